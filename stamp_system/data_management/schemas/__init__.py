"""Schema package for verification payloads, platform descriptors and passports.

Primary exports:
- RequestPayload / VerifiedPayload: provider input and verdict
- CheckResponse: per-type item of a bulk check
- PlatformSpec and friends: static platform configuration
- Passport / Stamp: stamps already held by an identity

Usage:
    from stamp_system.data_management.schemas import RequestPayload, VerifiedPayload
    payload = RequestPayload(address="0xcf31...c50f")
"""

from stamp_system.data_management.schemas.passport_schema import (
    Passport,
    Stamp,
)
from stamp_system.data_management.schemas.payload_schema import (
    CheckResponse,
    RequestPayload,
    VerifiedPayload,
)
from stamp_system.data_management.schemas.platform_schema import (
    PlatformGroupSpec,
    PlatformId,
    PlatformSpec,
    ProviderId,
    ProviderSpec,
    ValidatedPlatform,
    ValidatedProvider,
    ValidatedProviderGroup,
)

__all__ = [
    "CheckResponse",
    "Passport",
    "PlatformGroupSpec",
    "PlatformId",
    "PlatformSpec",
    "ProviderId",
    "ProviderSpec",
    "RequestPayload",
    "Stamp",
    "ValidatedPlatform",
    "ValidatedProvider",
    "ValidatedProviderGroup",
    "VerifiedPayload",
]
