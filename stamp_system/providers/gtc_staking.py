"""Shared GTC staking lookup and tiered threshold rule.

Stakes are read from the staking subgraph. Amounts are wei strings that can
exceed native float precision, so they are summed and compared as Python
ints. A tier passes when the amount is greater than or equal to its
threshold.

Response shape:
    {"data": {"users": [{"stakes": [{"stake": "..."}],
                         "xstakeAggregates": [{"id": "...", "total": "..."}]}]}}
"""

from abc import abstractmethod
from typing import Any, ClassVar, Optional

from stamp_system.config.settings import settings
from stamp_system.data_management.schemas import RequestPayload, VerifiedPayload
from stamp_system.providers.base_provider import BaseProvider
from stamp_system.sources.subgraph_client import SubgraphClient

GTC_DECIMALS = 18


def get_stake_query(address: str, staking_round: str) -> str:
    """Build the subgraph query for one address and staking round."""
    return f"""
  {{
    users(where: {{address: "{address}"}}) {{
      stakes(where: {{round: "{staking_round}"}}) {{
        stake
      }}
      xstakeAggregates(where: {{round: "{staking_round}", total_gt: 0}}) {{
        id
        total
      }}
    }}
  }}
  """


def to_wei(amount_gtc: int) -> int:
    return amount_gtc * 10**GTC_DECIMALS


class GtcStakingProvider(BaseProvider):
    """
    Threshold provider over the GTC staking subgraph.

    Subclasses define the tier (threshold_gtc, data_key) and how the staked
    amount is read from the subgraph user object (_amount_from_user).
    """

    error_step: ClassVar[str] = "verifyStake"
    threshold_gtc: ClassVar[int]
    data_key: ClassVar[str]
    amount_label: ClassVar[str] = "GTC staking"

    def __init__(
        self,
        subgraph_client: Optional[SubgraphClient] = None,
        staking_round: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.subgraph_client = subgraph_client or SubgraphClient()
        self._owns_subgraph_client = subgraph_client is None
        self.staking_round = staking_round or settings.staking_round

    async def close(self) -> None:
        if self._owns_subgraph_client:
            await self.subgraph_client.close()

    @property
    def threshold_wei(self) -> int:
        return to_wei(self.threshold_gtc)

    @abstractmethod
    def _amount_from_user(self, user: dict[str, Any]) -> int:
        """Return the staked amount in wei for a subgraph user object."""
        pass

    async def fetch_user(self, address: str) -> Optional[dict[str, Any]]:
        """Query the subgraph for address; None if it has no user entry."""
        body = await self.subgraph_client.query(
            get_stake_query(address, self.staking_round)
        )
        users = body["data"]["users"]
        return users[0] if users else None

    async def _verify(self, payload: RequestPayload, address: str) -> VerifiedPayload:
        address = address.lower()
        user = await self.fetch_user(address)
        amount = self._amount_from_user(user) if user is not None else 0

        if amount >= self.threshold_wei:
            return VerifiedPayload(
                valid=True,
                record={"address": address, "stakeAmount": self.data_key},
            )

        return VerifiedPayload(
            valid=False,
            errors=[
                f"Your current {self.amount_label} amount is {amount}, "
                "which is below the requirement for this stamp."
            ],
        )
