"""GraphQL transport contract.

Why Protocol:
- Defines a structural contract (duck typing) without rigid inheritance.
- Services depend on this abstraction, so tests can hand them a fake
  transport instead of a live HTTP client.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class GraphQLTransport(Protocol):
    """Minimal contract for sending one GraphQL document upstream.

    Design rules:
    - `execute` is async because it does network I/O.
    - Returns the raw response body; callers decide how to parse it.
    - Raises `httpx.HTTPStatusError` on non-2xx answers and other
      `httpx.HTTPError` subclasses on network failures.
    """

    async def execute(self, query: str, variables: dict[str, Any]) -> str:
        """Send `query` with `variables` and return the response body."""

        ...
