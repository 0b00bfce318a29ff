"""Static platform configuration.

Each platform groups related providers under a display name. The table is
assembled once at import and is read-only afterwards; the stamp aggregator
walks it to decide which provider types to check for an address.
"""

from typing import Dict

from stamp_system.data_management.schemas import (
    PlatformGroupSpec,
    PlatformId,
    PlatformSpec,
    ProviderId,
    ProviderSpec,
)

ENS_PLATFORM = PlatformSpec(
    platform_id=PlatformId.ENS,
    name="ENS",
    description="Purchase an .eth name to verify your existing account.",
    is_evm=True,
    groups=(
        PlatformGroupSpec(
            platform_group="Account Name",
            providers=(
                ProviderSpec(
                    title="Encrypted",
                    name=ProviderId.ENS,
                ),
            ),
        ),
    ),
)

GTC_STAKING_PLATFORM = PlatformSpec(
    platform_id=PlatformId.GTC_STAKING,
    name="GTC Staking",
    description="Connect to passport to verify your staking amount.",
    is_evm=True,
    groups=(
        PlatformGroupSpec(
            platform_group="Self GTC Staking",
            providers=(
                ProviderSpec(title="More than or equal to 5 GTC", name=ProviderId.SELF_STAKING_BRONZE),
                ProviderSpec(title="More than or equal to 20 GTC", name=ProviderId.SELF_STAKING_SILVER),
                ProviderSpec(title="More than or equal to 125 GTC", name=ProviderId.SELF_STAKING_GOLD),
            ),
        ),
        PlatformGroupSpec(
            platform_group="Community GTC Staking",
            providers=(
                ProviderSpec(title="More than or equal to 5 GTC", name=ProviderId.COMMUNITY_STAKING_BRONZE),
                ProviderSpec(title="More than or equal to 20 GTC", name=ProviderId.COMMUNITY_STAKING_SILVER),
                ProviderSpec(title="More than or equal to 125 GTC", name=ProviderId.COMMUNITY_STAKING_GOLD),
            ),
        ),
    ),
)

# Key: platform id, Value: descriptor (insertion order is display order)
PLATFORMS: Dict[PlatformId, PlatformSpec] = {
    PlatformId.ENS: ENS_PLATFORM,
    PlatformId.GTC_STAKING: GTC_STAKING_PLATFORM,
}
