"""Tests for the static provider registry and bulk dispatch."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from stamp_system.data_management.schemas import (
    ProviderId,
    RequestPayload,
    VerifiedPayload,
)
from stamp_system.providers.base_provider import ProviderExternalVerificationError
from stamp_system.providers.ens_provider import EnsProvider
from stamp_system.providers.registry import (
    MISSING_PROVIDER_MESSAGE,
    PROVIDER_REGISTRY,
    ProviderRegistry,
)
from stamp_system.providers.self_staking import SelfStakingBronzeProvider

MOCK_ADDRESS_LOWER = "0xcf314ce817e25b4f784bc1f24c9a79a525fec50f"


# ── Helpers ──────────────────────────────────────────────────────────────


def _provider(verdict=None, error: Exception | None = None) -> MagicMock:
    provider = MagicMock()
    if error is not None:
        provider.verify = AsyncMock(side_effect=error)
    else:
        provider.verify = AsyncMock(return_value=verdict)
    return provider


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture
def registry() -> ProviderRegistry:
    return ProviderRegistry(
        providers={
            ProviderId.ENS: _provider(VerifiedPayload(valid=True, record={"ens": "a.eth"})),
            ProviderId.SELF_STAKING_BRONZE: _provider(
                VerifiedPayload(valid=False, errors=["below"])
            ),
            ProviderId.SELF_STAKING_GOLD: _provider(
                error=ProviderExternalVerificationError("SelfStakingGold verifyStake: Exception: boom")
            ),
        }
    )


# ── Table Tests ──────────────────────────────────────────────────────────


class TestProviderTable:
    def test_every_provider_id_registered(self) -> None:
        assert set(PROVIDER_REGISTRY) == set(ProviderId)

    def test_registered_types_match_keys(self) -> None:
        for provider_id, provider_cls in PROVIDER_REGISTRY.items():
            assert provider_cls.type == provider_id

    def test_default_registry_builds_all(self) -> None:
        registry = ProviderRegistry()
        assert registry.provider_types == [p.value for p in PROVIDER_REGISTRY]
        assert isinstance(registry.get("Ens"), EnsProvider)
        assert isinstance(registry.get("SelfStakingBronze"), SelfStakingBronzeProvider)

    def test_unknown_type_lookup(self) -> None:
        assert ProviderRegistry().get("Twitter") is None


# ── Dispatch Tests ───────────────────────────────────────────────────────


class TestVerify:
    @pytest.mark.asyncio
    async def test_dispatches_to_provider(self, registry: ProviderRegistry) -> None:
        payload = RequestPayload(address=MOCK_ADDRESS_LOWER, type="Ens")

        result = await registry.verify("Ens", payload)

        assert result.valid is True
        registry.get("Ens").verify.assert_awaited_once_with(payload)

    @pytest.mark.asyncio
    async def test_missing_provider(self, registry: ProviderRegistry) -> None:
        result = await registry.verify("Twitter", RequestPayload(address=MOCK_ADDRESS_LOWER))

        assert result.valid is False
        assert result.errors == [MISSING_PROVIDER_MESSAGE]

    @pytest.mark.asyncio
    async def test_external_error_propagates(self, registry: ProviderRegistry) -> None:
        with pytest.raises(ProviderExternalVerificationError):
            await registry.verify(
                "SelfStakingGold", RequestPayload(address=MOCK_ADDRESS_LOWER)
            )


class TestVerifyBulk:
    @pytest.mark.asyncio
    async def test_results_in_request_order(self, registry: ProviderRegistry) -> None:
        payload = RequestPayload(
            address=MOCK_ADDRESS_LOWER,
            type="bulk",
            types=["SelfStakingGold", "Ens", "SelfStakingBronze", "Twitter"],
        )

        results = await registry.verify_bulk(payload)

        assert [r.type for r in results] == payload.types
        by_type = {r.type: r for r in results}
        assert by_type["Ens"].valid is True
        assert by_type["Ens"].error is None
        assert by_type["SelfStakingBronze"].valid is False
        assert by_type["SelfStakingBronze"].error == "below"
        assert by_type["SelfStakingGold"].valid is False
        assert by_type["SelfStakingGold"].code == 400
        assert "boom" in by_type["SelfStakingGold"].error
        assert by_type["Twitter"].error == MISSING_PROVIDER_MESSAGE

    @pytest.mark.asyncio
    async def test_empty_types(self, registry: ProviderRegistry) -> None:
        results = await registry.verify_bulk(RequestPayload(address=MOCK_ADDRESS_LOWER))
        assert results == []


# ── Lifecycle Tests ──────────────────────────────────────────────────────


STAKING_TYPES = [
    "SelfStakingBronze",
    "SelfStakingSilver",
    "SelfStakingGold",
    "CommunityStakingBronze",
    "CommunityStakingSilver",
    "CommunityStakingGold",
]


class TestClose:
    def test_staking_providers_share_one_subgraph_client(self) -> None:
        registry = ProviderRegistry()

        clients = {id(registry.get(t).subgraph_client) for t in STAKING_TYPES}

        assert len(clients) == 1

    @pytest.mark.asyncio
    async def test_bulk_check_leaves_no_open_http_client(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        ten_gtc = "10000000000000000000"
        body = {
            "data": {
                "users": [
                    {
                        "stakes": [{"stake": ten_gtc}],
                        "xstakeAggregates": [{"id": "1", "total": ten_gtc}],
                    }
                ]
            }
        }
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=body))
        real_client = httpx.AsyncClient
        created: list[httpx.AsyncClient] = []

        def _client(**kwargs) -> httpx.AsyncClient:
            client = real_client(transport=transport, **kwargs)
            created.append(client)
            return client

        monkeypatch.setattr(httpx, "AsyncClient", _client)

        async with ProviderRegistry() as registry:
            results = await registry.verify_bulk(
                RequestPayload(address=MOCK_ADDRESS_LOWER, type="bulk", types=STAKING_TYPES)
            )

        assert [r.valid for r in results] == [True, False, False, True, False, False]
        assert len(created) == 1
        assert created[0].is_closed

    @pytest.mark.asyncio
    async def test_injected_clients_stay_open(self) -> None:
        subgraph = AsyncMock()
        rpc = AsyncMock()

        async with ProviderRegistry(subgraph_client=subgraph, rpc_client=rpc) as registry:
            assert registry.get("SelfStakingGold").subgraph_client is subgraph
            assert registry.get("Ens").rpc_client is rpc

        subgraph.close.assert_not_awaited()
        rpc.close.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_close_releases_owned_clients(self) -> None:
        registry = ProviderRegistry()
        subgraph = registry.get("SelfStakingBronze").subgraph_client
        rpc = registry.get("Ens").rpc_client
        subgraph.close = AsyncMock()
        rpc.close = AsyncMock()

        await registry.close()

        subgraph.close.assert_awaited_once()
        rpc.close.assert_awaited_once()
