"""Verification providers for identity stamps.

Each provider performs one external check and returns a VerifiedPayload:
- EnsProvider: primary ENS name exists for the address (chain RPC)
- SelfStaking{Bronze,Silver,Gold}Provider: GTC self stake >= 5/20/125
- CommunityStaking{Bronze,Silver,Gold}Provider: GTC community stake >= 5/20/125

ProviderRegistry dispatches to them through the static PROVIDER_REGISTRY table.
"""

from stamp_system.providers.base_provider import (
    BaseProvider,
    InvalidAddressError,
    ProviderExternalVerificationError,
)
from stamp_system.providers.community_staking import (
    CommunityStakingBronzeProvider,
    CommunityStakingGoldProvider,
    CommunityStakingSilverProvider,
)
from stamp_system.providers.ens_provider import EnsProvider
from stamp_system.providers.registry import PROVIDER_REGISTRY, ProviderRegistry
from stamp_system.providers.self_staking import (
    SelfStakingBronzeProvider,
    SelfStakingGoldProvider,
    SelfStakingSilverProvider,
)

__all__ = [
    "BaseProvider",
    "CommunityStakingBronzeProvider",
    "CommunityStakingGoldProvider",
    "CommunityStakingSilverProvider",
    "EnsProvider",
    "InvalidAddressError",
    "PROVIDER_REGISTRY",
    "ProviderExternalVerificationError",
    "ProviderRegistry",
    "SelfStakingBronzeProvider",
    "SelfStakingGoldProvider",
    "SelfStakingSilverProvider",
]
