"""Static provider registry and dispatcher.

PROVIDER_REGISTRY maps every ProviderId to the class implementing it. The
table is fixed at import. ProviderRegistry instantiates each provider once,
hands every staking provider one shared subgraph client, and dispatches
single and bulk verifications to them.

Usage:
    from stamp_system.providers.registry import ProviderRegistry

    async with ProviderRegistry() as registry:
        verdict = await registry.verify("Ens", payload)
        results = await registry.verify_bulk(payload)  # payload.types
"""

import asyncio
from typing import Dict, Optional, Type, Union

from loguru import logger

from stamp_system.data_management.schemas import (
    CheckResponse,
    ProviderId,
    RequestPayload,
    VerifiedPayload,
)
from stamp_system.providers.base_provider import (
    BaseProvider,
    ProviderExternalVerificationError,
)
from stamp_system.providers.community_staking import (
    CommunityStakingBronzeProvider,
    CommunityStakingGoldProvider,
    CommunityStakingSilverProvider,
)
from stamp_system.providers.ens_provider import EnsProvider
from stamp_system.providers.gtc_staking import GtcStakingProvider
from stamp_system.providers.self_staking import (
    SelfStakingBronzeProvider,
    SelfStakingGoldProvider,
    SelfStakingSilverProvider,
)
from stamp_system.sources.rpc_client import RpcClient
from stamp_system.sources.subgraph_client import SubgraphClient
from stamp_system.utils.logging import get_correlation_id

MISSING_PROVIDER_MESSAGE = "Missing provider"

PROVIDER_REGISTRY: Dict[ProviderId, Type[BaseProvider]] = {
    ProviderId.ENS: EnsProvider,
    ProviderId.SELF_STAKING_BRONZE: SelfStakingBronzeProvider,
    ProviderId.SELF_STAKING_SILVER: SelfStakingSilverProvider,
    ProviderId.SELF_STAKING_GOLD: SelfStakingGoldProvider,
    ProviderId.COMMUNITY_STAKING_BRONZE: CommunityStakingBronzeProvider,
    ProviderId.COMMUNITY_STAKING_SILVER: CommunityStakingSilverProvider,
    ProviderId.COMMUNITY_STAKING_GOLD: CommunityStakingGoldProvider,
}


class ProviderRegistry:
    """
    Dispatcher over the static provider table.

    Features:
    - Lookup by provider type string or ProviderId
    - Single verification with a "Missing provider" verdict for unknown types
    - Concurrent bulk verification returning one CheckResponse per type
    """

    def __init__(
        self,
        providers: Optional[Dict[ProviderId, BaseProvider]] = None,
        subgraph_client: Optional[SubgraphClient] = None,
        rpc_client: Optional[RpcClient] = None,
    ) -> None:
        """
        Initialize the registry.

        Args:
            providers: Pre-built provider instances keyed by id. Any id not
                supplied is built from PROVIDER_REGISTRY.
            subgraph_client: Subgraph adapter shared by every built staking
                provider. Created here if not provided.
            rpc_client: RPC adapter for the built ENS provider. Created here
                if not provided.
        """
        self._subgraph_client = subgraph_client or SubgraphClient()
        self._rpc_client = rpc_client or RpcClient()
        self._owned_clients: list[Union[SubgraphClient, RpcClient]] = []
        if subgraph_client is None:
            self._owned_clients.append(self._subgraph_client)
        if rpc_client is None:
            self._owned_clients.append(self._rpc_client)

        self._providers: Dict[ProviderId, BaseProvider] = dict(providers or {})
        for provider_id, provider_cls in PROVIDER_REGISTRY.items():
            if provider_id in self._providers:
                continue
            if issubclass(provider_cls, GtcStakingProvider):
                provider = provider_cls(subgraph_client=self._subgraph_client)
            else:
                provider = provider_cls(rpc_client=self._rpc_client)
            self._providers[provider_id] = provider
        self.logger = logger.bind(component="ProviderRegistry")

    async def __aenter__(self) -> "ProviderRegistry":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the adapters this registry created. Injected ones stay open."""
        for client in self._owned_clients:
            await client.close()

    @property
    def provider_types(self) -> list[str]:
        return [provider_id.value for provider_id in self._providers]

    def get(self, provider_type: str) -> Optional[BaseProvider]:
        """Return the provider registered for provider_type, if any."""
        try:
            return self._providers.get(ProviderId(provider_type))
        except ValueError:
            return None

    async def verify(self, provider_type: str, payload: RequestPayload) -> VerifiedPayload:
        """
        Verify payload with a single provider.

        Raises:
            ProviderExternalVerificationError: Propagated from the provider.
        """
        provider = self.get(provider_type)
        if provider is None:
            self.logger.warning(f"No provider registered for type {provider_type}")
            return VerifiedPayload(valid=False, errors=[MISSING_PROVIDER_MESSAGE])
        return await provider.verify(payload)

    async def _check(self, provider_type: str, payload: RequestPayload) -> CheckResponse:
        try:
            verdict = await self.verify(provider_type, payload)
        except ProviderExternalVerificationError as e:
            return CheckResponse(type=provider_type, valid=False, error=str(e), code=400)

        return CheckResponse(
            type=provider_type,
            valid=verdict.valid,
            error="; ".join(verdict.errors) if verdict.errors else None,
        )

    async def verify_bulk(self, payload: RequestPayload) -> list[CheckResponse]:
        """
        Verify every type in payload.types concurrently.

        Provider failures are reported as invalid CheckResponse items with
        code 400; results keep the order of payload.types.
        """
        correlation_id = get_correlation_id()
        self.logger.info(
            f"Bulk verification of {len(payload.types)} types",
            correlation_id=correlation_id,
            types=payload.types,
        )

        results = await asyncio.gather(
            *[self._check(provider_type, payload) for provider_type in payload.types]
        )

        self.logger.info(
            "Bulk verification complete",
            correlation_id=correlation_id,
            valid=[r.type for r in results if r.valid],
        )
        return list(results)
