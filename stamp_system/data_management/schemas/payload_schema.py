"""Request and verdict schemas exchanged with verification providers.

A RequestPayload carries the identity being checked plus optional
provider-specific parameters. Every provider answers with a VerifiedPayload:
a boolean verdict, an optional evidence record used later for credential
issuance, and a list of human-readable errors.

CheckResponse is the per-type item of the batched ("bulk") check, both as
returned by the remote IAM service and by the local ProviderRegistry.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RequestPayload(BaseModel):
    """Input to a verification attempt. Immutable and single-use per call."""

    model_config = ConfigDict(frozen=True)

    address: str = Field(..., description="Chain identity string (EVM address)")
    type: str = Field(default="", description="Provider type for single checks")
    types: list[str] = Field(
        default_factory=list,
        description="Provider types for bulk checks",
    )
    version: str = Field(default="0.0.0", description="Payload version")
    rpc_url: Optional[str] = Field(
        default=None,
        description="RPC endpoint override for on-chain lookups",
    )


class VerifiedPayload(BaseModel):
    """Outcome of a single provider check.

    When valid is True the error list is empty; when valid is False there is
    no evidence record.
    """

    valid: bool = Field(..., description="Whether the check passed")
    errors: list[str] = Field(
        default_factory=list,
        description="Human-readable reasons the check failed",
    )
    record: Optional[dict[str, str]] = Field(
        default=None,
        description="Evidence facts used for credential issuance",
    )

    @model_validator(mode="after")
    def check_verdict_consistency(self) -> "VerifiedPayload":
        if self.valid and self.errors:
            raise ValueError("a valid payload cannot carry errors")
        if not self.valid and self.record is not None:
            raise ValueError("an invalid payload cannot carry a record")
        return self

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "valid": True,
                    "errors": [],
                    "record": {
                        "address": "0xcf314ce817e25b4f784bc1f24c9a79a525fec50f",
                        "stakeAmount": "ssgte5",
                    },
                },
                {
                    "valid": False,
                    "errors": ["Primary ENS name was not found for given address."],
                    "record": None,
                },
            ]
        }
    }


class CheckResponse(BaseModel):
    """Per-type result of a bulk check."""

    type: str = Field(..., description="Provider type that was checked")
    valid: bool = Field(..., description="Whether the provider check passed")
    error: Optional[str] = Field(default=None, description="Failure detail")
    code: Optional[int] = Field(default=None, description="Failure status code")
