"""Username candidate generation.

Turns a human-entered keyword (typically a real name) into an ordered,
bounded list of plausible usernames. Pure function: no I/O, no state.

Order matters: earlier entries are dispatched first, and the most literal
spellings of the keyword come before numeric and suffixed guesses.
"""

from __future__ import annotations

import re
from typing import Iterable

MAX_CANDIDATES = 200

_WHITESPACE = re.compile(r"\s+")

COMMON_SUFFIXES: tuple[str, ...] = (
    "_dev",
    "_code",
    "_coder",
    "_leetcode",
    "_algo",
    "_cp",
    "123",
    "456",
    "789",
)

_NUMBER_RANGE = range(0, 101)
_YEAR_RANGE = range(1990, 2026)
_PREFIX_LEN = 4
_PREFIX_NUMBER_RANGE = range(0, 20)


def _dedupe(values: Iterable[str]) -> list[str]:
    """Exact-match dedupe keeping first occurrence; blanks are dropped."""

    return [v for v in dict.fromkeys(values) if v.strip()]


def generate_candidates(keyword: str, *, limit: int = MAX_CANDIDATES) -> list[str]:
    """Return up to `limit` unique username guesses for `keyword`."""

    limit = max(0, min(limit, MAX_CANDIDATES))

    lower = keyword.lower().strip()
    upper = keyword.upper().strip()
    # Slicing keeps the empty keyword safe.
    capitalized = keyword[:1].upper() + keyword[1:].lower()

    out: list[str] = [keyword, lower, upper, capitalized]

    if _WHITESPACE.search(keyword):
        no_space = _WHITESPACE.sub("", keyword)
        out += [no_space, no_space.lower(), no_space.upper()]

        underscore = _WHITESPACE.sub("_", keyword)
        out += [underscore, underscore.lower()]

        dash = _WHITESPACE.sub("-", keyword)
        out += [dash, dash.lower()]

    for i in _NUMBER_RANGE:
        out.append(f"{lower}{i}")
        out.append(f"{capitalized}{i}")
        if i < 10:
            out.append(f"{lower}0{i}")

    out += [f"{lower}{year}" for year in _YEAR_RANGE]

    out += [
        f"{lower}_{lower}",
        f"{lower}-{lower}",
        f"{lower}_123",
        f"{lower}_{lower[:_PREFIX_LEN]}",
    ]

    out += [f"{lower}{suffix}" for suffix in COMMON_SUFFIXES]

    if len(lower) >= _PREFIX_LEN:
        prefix = lower[:_PREFIX_LEN]
        out += [f"{prefix}{i}" for i in _PREFIX_NUMBER_RANGE]

    return _dedupe(out)[:limit]


def collapse_case_variants(candidates: Iterable[str]) -> list[str]:
    """Keep only the first spelling of candidates equal under casefold.

    Upstream usernames resolve case-insensitively, so `JaneDoe` and
    `janedoe` cost two calls for the same account.
    """

    seen: set[str] = set()
    out: list[str] = []
    for candidate in candidates:
        key = candidate.casefold()
        if key in seen:
            continue
        seen.add(key)
        out.append(candidate)
    return out
