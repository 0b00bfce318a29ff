"""Chain RPC adapter for reverse-name (ENS) resolution."""

from typing import Optional

from web3 import AsyncHTTPProvider, AsyncWeb3, Web3

from stamp_system.config.settings import settings
from stamp_system.utils.logging import get_structured_logger


class RpcClient:
    """Resolve the primary ENS name of an address against an RPC node.

    One AsyncWeb3 instance is kept per endpoint, so a request-level RPC
    override never leaks into lookups against other endpoints. close()
    disconnects every provider session opened so far.
    """

    def __init__(self, rpc_url: Optional[str] = None) -> None:
        self.rpc_url = rpc_url or settings.rpc_url
        self._web3: dict[str, AsyncWeb3] = {}
        self._logger = get_structured_logger(__name__, component="RpcClient")

    async def __aenter__(self) -> "RpcClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _get_web3(self, rpc_url: Optional[str] = None) -> AsyncWeb3:
        url = rpc_url or self.rpc_url
        if url not in self._web3:
            self._web3[url] = AsyncWeb3(AsyncHTTPProvider(url))
        return self._web3[url]

    async def close(self) -> None:
        """Disconnect the HTTP sessions of every endpoint used."""
        for w3 in self._web3.values():
            await w3.provider.disconnect()
        self._web3.clear()

    async def lookup_address(self, address: str, rpc_url: Optional[str] = None) -> Optional[str]:
        """Return the reverse-resolved ENS name for address, or None.

        Raises whatever the web3 stack raises on transport or decoding failure.
        """
        w3 = self._get_web3(rpc_url)
        name = await w3.ens.name(Web3.to_checksum_address(address))
        self._logger.debug("ens_reverse_lookup", address=address.lower(), found=bool(name))
        return name
