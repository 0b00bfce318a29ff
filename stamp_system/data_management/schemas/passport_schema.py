"""Passport schemas: the stamps an identity already holds."""

from typing import Any

from pydantic import BaseModel, Field


class Stamp(BaseModel):
    """A unit of verified identity evidence tied to one provider."""

    provider: str = Field(..., description="Provider type that issued the stamp")
    credential: dict[str, Any] = Field(
        default_factory=dict,
        description="Issued verifiable credential, opaque here",
    )


class Passport(BaseModel):
    """Collection of stamps held by one identity."""

    stamps: list[Stamp] = Field(default_factory=list)

    def provider_types(self) -> set[str]:
        return {stamp.provider for stamp in self.stamps}
