"""Community staking tiers: GTC staked by the address on other identities."""

from typing import Any

from stamp_system.data_management.schemas import ProviderId
from stamp_system.providers.gtc_staking import GtcStakingProvider


class CommunityStakingProvider(GtcStakingProvider):
    """Sums every `xstakeAggregates[].total` entry of the user for the round."""

    amount_label = "GTC community staking"

    def _amount_from_user(self, user: dict[str, Any]) -> int:
        return sum(int(aggregate["total"]) for aggregate in user["xstakeAggregates"])


class CommunityStakingBronzeProvider(CommunityStakingProvider):
    type = ProviderId.COMMUNITY_STAKING_BRONZE
    threshold_gtc = 5
    data_key = "csgte5"


class CommunityStakingSilverProvider(CommunityStakingProvider):
    type = ProviderId.COMMUNITY_STAKING_SILVER
    threshold_gtc = 20
    data_key = "csgte20"


class CommunityStakingGoldProvider(CommunityStakingProvider):
    type = ProviderId.COMMUNITY_STAKING_GOLD
    threshold_gtc = 125
    data_key = "csgte125"
