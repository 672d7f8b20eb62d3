"""GraphQL transport for the upstream coding-practice platform.

Implements `core.interfaces.transport.GraphQLTransport` on top of httpx.
One instance owns (or borrows) one `httpx.AsyncClient`, so a whole search
shares a connection pool.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.interfaces.transport import GraphQLTransport


class LeetCodeGraphQLClient(GraphQLTransport):
    """POSTs GraphQL documents and returns raw response bodies."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        # An injected client belongs to the caller.
        self._owns_client = client is None

    async def __aenter__(self) -> LeetCodeGraphQLClient:
        self._ensure_client()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = build_async_client(self._settings)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def execute(self, query: str, variables: dict[str, Any]) -> str:
        client = self._ensure_client()
        response = await client.post(
            self._settings.graphql_path,
            json={"query": query, "variables": variables},
        )
        response.raise_for_status()
        return response.text
