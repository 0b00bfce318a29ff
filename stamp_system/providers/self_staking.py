"""Self staking tiers: GTC staked by the address on itself."""

from typing import Any

from stamp_system.data_management.schemas import ProviderId
from stamp_system.providers.gtc_staking import GtcStakingProvider


class SelfStakingProvider(GtcStakingProvider):
    """Sums every `stakes[].stake` entry of the user for the configured round."""

    def _amount_from_user(self, user: dict[str, Any]) -> int:
        return sum(int(entry["stake"]) for entry in user["stakes"])


class SelfStakingBronzeProvider(SelfStakingProvider):
    type = ProviderId.SELF_STAKING_BRONZE
    threshold_gtc = 5
    data_key = "ssgte5"


class SelfStakingSilverProvider(SelfStakingProvider):
    type = ProviderId.SELF_STAKING_SILVER
    threshold_gtc = 20
    data_key = "ssgte20"


class SelfStakingGoldProvider(SelfStakingProvider):
    type = ProviderId.SELF_STAKING_GOLD
    threshold_gtc = 125
    data_key = "ssgte125"
