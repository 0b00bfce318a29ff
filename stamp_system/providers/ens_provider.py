"""ENS provider: passes when the address has a primary (reverse) ENS name."""

from typing import Optional

from stamp_system.data_management.schemas import ProviderId, RequestPayload, VerifiedPayload
from stamp_system.providers.base_provider import BaseProvider
from stamp_system.sources.rpc_client import RpcClient

ENS_NOT_FOUND_MESSAGE = "Primary ENS name was not found for given address."


class EnsProvider(BaseProvider):
    """Existence check on the reverse-name lookup of the request address.

    The RPC endpoint is payload.rpc_url when given, else the client default.
    """

    type = ProviderId.ENS
    error_step = "verifyEnsName"

    def __init__(self, rpc_client: Optional[RpcClient] = None) -> None:
        super().__init__()
        self.rpc_client = rpc_client or RpcClient()
        self._owns_rpc_client = rpc_client is None

    async def close(self) -> None:
        if self._owns_rpc_client:
            await self.rpc_client.close()

    async def _verify(self, payload: RequestPayload, address: str) -> VerifiedPayload:
        reported_name = await self.rpc_client.lookup_address(address, payload.rpc_url)

        if reported_name:
            return VerifiedPayload(valid=True, record={"ens": reported_name})

        return VerifiedPayload(valid=False, errors=[ENS_NOT_FOUND_MESSAGE])
