"""Client for the IAM service's batched check endpoint.

The IAM service verifies a list of provider types for one address in a single
round-trip:

    POST <iam_url>/v<version>/check
    {"payload": {"type": "bulk", "types": [...], "address": "0x...", "version": "0.0.0"}}

and answers with a list of {"type", "valid", "error"?, "code"?} items.
"""

from typing import Any, Optional

import httpx
from pydantic import TypeAdapter

from stamp_system.config.settings import settings
from stamp_system.data_management.schemas import CheckResponse
from stamp_system.utils.logging import get_structured_logger

_CHECK_RESPONSES = TypeAdapter(list[CheckResponse])


class IamClient:
    """Async client for the bulk /check endpoint.

    Attributes:
        iam_url: Base URL of the IAM service
        version: API version used in the path and in bulk payloads
        timeout: Transport timeout in seconds
    """

    def __init__(
        self,
        iam_url: Optional[str] = None,
        version: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.iam_url = iam_url or settings.iam_url
        self.version = version or settings.iam_version
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self._client = http_client
        self._owns_client = http_client is None
        self._logger = get_structured_logger(__name__, component="IamClient")

    async def __aenter__(self) -> "IamClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def check_url(self) -> str:
        """Check endpoint with any trailing slashes of the base URL removed."""
        return f"{self.iam_url.rstrip('/')}/v{self.version}/check"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def build_bulk_payload(self, address: str, types: list[str]) -> dict[str, Any]:
        return {
            "type": "bulk",
            "types": list(types),
            "address": address,
            "version": self.version,
        }

    async def check(self, address: str, types: list[str]) -> list[CheckResponse]:
        """Run a bulk check for address over the given provider types.

        Raises:
            httpx.HTTPError: On transport failure or non-2xx status.
            pydantic.ValidationError: If the body is not a list of check items.
        """
        payload = self.build_bulk_payload(address, types)
        client = await self._get_client()
        response = await client.post(self.check_url, json={"payload": payload})
        response.raise_for_status()

        results = _CHECK_RESPONSES.validate_python(response.json())
        self._logger.info(
            "bulk_check_complete",
            url=self.check_url,
            requested=len(types),
            valid=sum(1 for r in results if r.valid),
        )
        return results
