"""GraphQL client for subgraph indexers.

POSTs a fixed query document to a configured subgraph endpoint and returns
the decoded JSON body. Interpretation of the `data` tree is left to the
provider that issued the query.

Usage:
    from stamp_system.sources.subgraph_client import SubgraphClient

    async with SubgraphClient() as client:
        body = await client.query('{ users(where: {address: "0xabc"}) { id } }')
"""

from typing import Any, Optional

import httpx

from stamp_system.config.settings import settings
from stamp_system.utils.logging import get_structured_logger


class SubgraphQueryError(Exception):
    """Raised when the subgraph answers with GraphQL errors instead of data."""


class SubgraphClient:
    """Async client for a single subgraph GraphQL endpoint.

    Attributes:
        url: GraphQL endpoint the queries are POSTed to
        timeout: Transport timeout in seconds
    """

    def __init__(
        self,
        url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialize SubgraphClient.

        Args:
            url: Endpoint override. Falls back to settings.staking_subgraph_url.
            http_client: Shared httpx client. Created lazily if not provided.
            timeout: Timeout override. Falls back to settings.request_timeout_seconds.
        """
        self.url = url or settings.staking_subgraph_url
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self._client = http_client
        self._owns_client = http_client is None
        self._logger = get_structured_logger(__name__, component="SubgraphClient")

    async def __aenter__(self) -> "SubgraphClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

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

    async def query(self, query: str) -> dict[str, Any]:
        """Execute a GraphQL query and return the decoded response body.

        Args:
            query: GraphQL query document.

        Returns:
            The JSON body, e.g. {"data": {...}}.

        Raises:
            httpx.HTTPError: On transport failure or non-2xx status.
            SubgraphQueryError: If the body carries GraphQL errors and no data.
        """
        client = await self._get_client()
        response = await client.post(self.url, json={"query": query})
        response.raise_for_status()
        body = response.json()

        if isinstance(body, dict) and body.get("errors") and not body.get("data"):
            messages = [str(err.get("message", err)) for err in body["errors"]]
            raise SubgraphQueryError("; ".join(messages))

        self._logger.debug("subgraph_queried", url=self.url, status=response.status_code)
        return body
