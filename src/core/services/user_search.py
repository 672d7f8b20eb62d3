"""Keyword search: bounded concurrent fan-out over username candidates.

Flow:
- `generate_candidates` turns the keyword into up to 200 guesses.
- Each guess goes through `fetch_profile_summary` behind a semaphore, so
  at most `search_max_concurrency` upstream calls are in flight.
- Results are collected as they complete and deduplicated by the resolved
  `username` (first to complete wins).

The search never raises for upstream trouble: worst case is an empty list.
"""

from __future__ import annotations

import asyncio
import json
import time
from dataclasses import dataclass
from typing import Callable

from loguru import logger

from core.config import AppSettings
from core.domain.models import ProfileSummary, SearchResult
from core.interfaces.transport import GraphQLTransport
from core.services.candidates import collapse_case_variants, generate_candidates
from core.services.profile_fetcher import fetch_profile_summary

EMPTY_ENVELOPE = '{"data":{"userSearchList":[]}}'


@dataclass
class SearchHooks:
    """Optional callbacks for UI layers (progress bars)."""

    started: Callable[[int], None] | None = None
    progress: Callable[[int, int], None] | None = None


async def search_users(
    keyword: str,
    *,
    transport: GraphQLTransport,
    settings: AppSettings | None = None,
    hooks: SearchHooks | None = None,
) -> SearchResult:
    settings = settings or AppSettings()
    hooks = hooks or SearchHooks()

    candidates = generate_candidates(keyword, limit=settings.search_max_candidates)
    if settings.search_prefilter_case_variants:
        candidates = collapse_case_variants(candidates)

    total = len(candidates)
    if hooks.started:
        hooks.started(total)

    sem = asyncio.Semaphore(max(1, settings.search_max_concurrency))

    async def fetch_one(candidate: str) -> ProfileSummary | None:
        async with sem:
            return await fetch_profile_summary(
                transport,
                candidate,
                timeout=settings.http_timeout_seconds,
            )

    started_at = time.perf_counter()
    seen: set[str] = set()
    users: list[ProfileSummary] = []

    tasks = [asyncio.ensure_future(fetch_one(c)) for c in candidates]
    try:
        for done, next_result in enumerate(asyncio.as_completed(tasks), start=1):
            summary = await next_result
            if hooks.progress:
                hooks.progress(done, total)
            if summary is None or summary.username in seen:
                continue
            seen.add(summary.username)
            users.append(summary)
    finally:
        # Cancelling the search cancels every fetch still queued or in flight.
        for task in tasks:
            if not task.done():
                task.cancel()

    logger.info(
        "search {!r}: {} candidates, {} users in {:.2f}s",
        keyword,
        total,
        len(users),
        time.perf_counter() - started_at,
    )
    return SearchResult(keyword=keyword, candidates=total, users=users)


def render_search_envelope(result: SearchResult) -> str:
    """Serialise the envelope; degrade to the empty envelope on failure."""

    try:
        return json.dumps(result.envelope(), ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        logger.warning("search {!r}: envelope encoding failed: {}", result.keyword, exc)
        return EMPTY_ENVELOPE


async def search_users_json(
    keyword: str,
    *,
    transport: GraphQLTransport,
    settings: AppSettings | None = None,
    hooks: SearchHooks | None = None,
) -> str:
    result = await search_users(keyword, transport=transport, settings=settings, hooks=hooks)
    return render_search_envelope(result)
