"""Per-candidate profile resolution.

`fetch_profile_summary` is the isolation boundary of the keyword search:
whatever goes wrong for one candidate (not found, HTTP error, timeout,
malformed body) collapses to `None` so the rest of the batch carries on.
"""

from __future__ import annotations

import asyncio
import hashlib
import json
import math
from typing import Any

from loguru import logger

from adapters.leetcode_queries import USER_SUMMARY_QUERY
from core.domain.models import ProfileSummary
from core.interfaces.transport import GraphQLTransport


def username_id(username: str) -> str:
    """Stable 8-hex-digit id; same username, same id across processes."""

    return hashlib.sha1(username.encode("utf-8")).hexdigest()[:8]  # nosec - not a secret


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value)


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("+-").isdigit():
            return int(text)
    return 0


def parse_profile_summary(body: str) -> ProfileSummary | None:
    """Build a `ProfileSummary` from a raw GraphQL body, or `None`."""

    try:
        root = json.loads(body)
    except ValueError:
        return None

    data = root.get("data") if isinstance(root, dict) else None
    matched = data.get("matchedUser") if isinstance(data, dict) else None
    if not isinstance(matched, dict):
        return None

    username = _as_text(matched.get("username"))
    if not username:
        return None

    profile = matched.get("profile")
    if not isinstance(profile, dict):
        profile = {}

    return ProfileSummary(
        id=username_id(username),
        username=username,
        real_name=_as_text(profile.get("realName")),
        avatar_url=_as_text(profile.get("userAvatar")),
        ranking=_as_int(profile.get("ranking")),
        reputation=_as_int(profile.get("reputation")),
    )


async def fetch_profile_summary(
    transport: GraphQLTransport,
    username: str,
    *,
    timeout: float | None = None,
) -> ProfileSummary | None:
    """Resolve one candidate; `None` means "no result for this candidate"."""

    try:
        body = await asyncio.wait_for(
            transport.execute(USER_SUMMARY_QUERY, {"username": username}),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        logger.debug("candidate {!r}: timed out after {}s", username, timeout)
        return None
    except Exception as exc:  # noqa: BLE001
        logger.debug("candidate {!r}: {}", username, exc)
        return None

    try:
        summary = parse_profile_summary(body)
    except Exception as exc:  # noqa: BLE001
        logger.debug("candidate {!r}: unreadable body: {}", username, exc)
        return None
    if summary is None:
        logger.debug("candidate {!r}: no matched user", username)
    return summary
