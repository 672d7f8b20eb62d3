"""httpx wrapper.

Why a wrapper:
- Standardises base URL, timeouts and the fixed upstream headers in one place.
- Eases testing: callers accept an injected client (e.g. `httpx.MockTransport`).
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` aimed at the upstream GraphQL host.

    Why a builder:
    - Every upstream call carries the same Content-Type, Referer and
      User-Agent, so a request looks like it came from the web front end.
    - The timeout bounds each phase of a call (connect/read/write/pool).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "Content-Type": "application/json",
        "Referer": settings.referer,
        "User-Agent": settings.user_agent,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
