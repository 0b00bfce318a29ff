"""Platform and provider descriptors.

Platforms group related providers (e.g. the three self-staking tiers) under
one name shown together to the user. Descriptors are static configuration,
read-only for the lifetime of the process; the aggregator produces the
Validated* shapes from them.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ProviderId(str, Enum):
    """Identifier of every registered verification provider."""

    ENS = "Ens"
    SELF_STAKING_BRONZE = "SelfStakingBronze"
    SELF_STAKING_SILVER = "SelfStakingSilver"
    SELF_STAKING_GOLD = "SelfStakingGold"
    COMMUNITY_STAKING_BRONZE = "CommunityStakingBronze"
    COMMUNITY_STAKING_SILVER = "CommunityStakingSilver"
    COMMUNITY_STAKING_GOLD = "CommunityStakingGold"


class PlatformId(str, Enum):
    """Identifier of every configured platform."""

    ENS = "Ens"
    GTC_STAKING = "GtcStaking"


class ProviderSpec(BaseModel):
    """One provider as listed inside a platform group."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Display title of the check")
    name: ProviderId = Field(..., description="Provider identifier")


class PlatformGroupSpec(BaseModel):
    """Named group of providers within a platform."""

    model_config = ConfigDict(frozen=True)

    platform_group: str = Field(..., description="Group display name")
    providers: tuple[ProviderSpec, ...] = Field(default_factory=tuple)


class PlatformSpec(BaseModel):
    """Static descriptor of a platform."""

    model_config = ConfigDict(frozen=True)

    platform_id: PlatformId
    name: str
    description: str = ""
    is_evm: bool = Field(
        default=False,
        description="True if the checks only need an on-chain address",
    )
    groups: tuple[PlatformGroupSpec, ...] = Field(default_factory=tuple)

    def provider_ids(self) -> list[ProviderId]:
        """All provider ids across this platform's groups, in order."""
        return [provider.name for group in self.groups for provider in group.providers]


class ValidatedProvider(BaseModel):
    name: ProviderId
    title: str


class ValidatedProviderGroup(BaseModel):
    name: str
    providers: list[ValidatedProvider]


class ValidatedPlatform(BaseModel):
    """A platform together with the groups whose checks currently pass."""

    groups: list[ValidatedProviderGroup]
    platform: PlatformSpec
