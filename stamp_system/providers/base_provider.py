"""Base class for verification providers.

A provider is the smallest verification unit: it validates the request,
performs exactly one external lookup and applies one fixed decision rule.
The outcome is either a VerifiedPayload (including negative verdicts) or a
ProviderExternalVerificationError when the lookup itself could not be
carried out.

All providers inherit from this base class and implement _verify().
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from web3 import Web3

from stamp_system.data_management.schemas import ProviderId, RequestPayload, VerifiedPayload
from stamp_system.utils.logging import bind_provider_context, get_structured_logger

UNKNOWN_ERROR_MESSAGE = "We were unable to determine the cause of your error"


class ProviderExternalVerificationError(Exception):
    """A verification attempt failed before a verdict could be reached.

    The message names the provider and carries the proximate error text; the
    original exception is chained as __cause__.
    """


class InvalidAddressError(ValueError):
    """The request does not carry a syntactically valid address."""


def validate_address(address: Any) -> str:
    """Return address unchanged if it is a well-formed EVM address.

    Raises:
        InvalidAddressError: If address is not a string or not a valid address.
    """
    if not isinstance(address, str) or not Web3.is_address(address):
        raise InvalidAddressError("Not a proper address.")
    return address


class BaseProvider(ABC):
    """
    Abstract base for verification providers.

    Subclasses set `type` and implement _verify(). The public verify()
    wraps it with address validation, error wrapping and logging. Providers
    hold no per-call state. Adapters a provider builds for itself are released
    by close().

    Attributes:
        type: Provider identifier used for dispatch and in error messages.
        error_step: Label of the failing step used in error messages.
    """

    type: ClassVar[ProviderId]
    error_step: ClassVar[str] = "verify"

    def __init__(self) -> None:
        self._logger = bind_provider_context(
            get_structured_logger(__name__), self.type.value
        )

    @abstractmethod
    async def _verify(self, payload: RequestPayload, address: str) -> VerifiedPayload:
        """
        Perform the lookup and apply the decision rule.

        Args:
            payload: The original request.
            address: The validated address from the payload.

        Returns:
            VerifiedPayload with the verdict. Negative verdicts are returned,
            not raised.
        """
        pass

    async def close(self) -> None:
        """Release adapter resources created by this provider."""

    async def verify(self, payload: RequestPayload) -> VerifiedPayload:
        """
        Verify payload and return the verdict.

        Raises:
            ProviderExternalVerificationError: On malformed address, adapter
                failure or unexpected response shape.
        """
        try:
            address = validate_address(payload.address)
            result = await self._verify(payload, address)
        except Exception as e:
            self._logger.warning(
                "verification_error",
                error_type=type(e).__name__,
                error=str(e),
            )
            raise ProviderExternalVerificationError(
                f"{self.type.value} {self.error_step}: {type(e).__name__}: {e}"
            ) from e

        if not result.valid and not result.errors:
            result = VerifiedPayload(valid=False, errors=[UNKNOWN_ERROR_MESSAGE])

        self._logger.info("verification_complete", valid=result.valid)
        return result
