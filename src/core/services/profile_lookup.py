"""Direct profile lookup for a known username.

Unlike the keyword search, failures here are meaningful to the caller and
are raised as `ProfileLookupError` subclasses. A 200 answer is relayed
verbatim, including `"matchedUser": null`.
"""

from __future__ import annotations

import asyncio

import httpx
from loguru import logger

from adapters.leetcode_queries import USER_PROFILE_QUERY
from core.domain.errors import UpstreamStatusError, UpstreamTransportError
from core.interfaces.transport import GraphQLTransport


async def lookup_profile(
    username: str,
    *,
    transport: GraphQLTransport,
    timeout: float | None = None,
) -> str:
    """Return the raw upstream body for `username`.

    Raises:
    - `UpstreamStatusError` when the upstream answers with a non-2xx status.
    - `UpstreamTransportError` on any other failure (network, timeout, decoding).
    """

    try:
        return await asyncio.wait_for(
            transport.execute(USER_PROFILE_QUERY, {"username": username}),
            timeout=timeout,
        )
    except httpx.HTTPStatusError as exc:
        response = exc.response
        logger.warning("profile {!r}: upstream returned HTTP {}", username, response.status_code)
        raise UpstreamStatusError(response.status_code, response.text) from exc
    except asyncio.TimeoutError as exc:
        logger.warning("profile {!r}: timed out after {}s", username, timeout)
        raise UpstreamTransportError(f"timed out after {timeout}s") from exc
    except Exception as exc:  # noqa: BLE001
        logger.warning("profile {!r}: {}", username, exc)
        raise UpstreamTransportError(str(exc) or exc.__class__.__name__) from exc
