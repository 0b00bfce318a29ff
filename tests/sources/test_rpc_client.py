"""Tests for the ENS reverse-lookup RPC adapter."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from web3 import Web3

from stamp_system.sources.rpc_client import RpcClient

MOCK_ADDRESS_LOWER = "0xcf314ce817e25b4f784bc1f24c9a79a525fec50f"


class TestWeb3Cache:
    def test_one_instance_per_endpoint(self) -> None:
        client = RpcClient(rpc_url="https://rpc.default")

        default = client._get_web3()

        assert client._get_web3() is default
        assert client._get_web3("https://rpc.default") is default
        assert client._get_web3("https://rpc.other") is not default

    @pytest.mark.asyncio
    async def test_close_disconnects_every_endpoint(self) -> None:
        client = RpcClient(rpc_url="https://rpc.default")
        providers = [client._get_web3().provider, client._get_web3("https://rpc.other").provider]
        for provider in providers:
            provider.disconnect = AsyncMock()

        async with client:
            pass

        for provider in providers:
            provider.disconnect.assert_awaited_once()
        assert client._web3 == {}


class TestLookupAddress:
    @pytest.mark.asyncio
    async def test_checksummed_address_sent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        w3 = MagicMock()
        w3.ens.name = AsyncMock(return_value="passport.eth")
        client = RpcClient(rpc_url="https://rpc.default")
        get_web3 = MagicMock(return_value=w3)
        monkeypatch.setattr(client, "_get_web3", get_web3)

        name = await client.lookup_address(MOCK_ADDRESS_LOWER, "https://rpc.override")

        assert name == "passport.eth"
        get_web3.assert_called_once_with("https://rpc.override")
        w3.ens.name.assert_awaited_once_with(Web3.to_checksum_address(MOCK_ADDRESS_LOWER))
