"""Tests for the concurrent keyword search."""

import asyncio
import json
from unittest.mock import patch

import pytest

from conftest import FakeTransport
from core.domain.models import ProfileSummary, SearchResult
from core.services.candidates import generate_candidates
from core.services.user_search import (
    EMPTY_ENVELOPE,
    SearchHooks,
    render_search_envelope,
    search_users,
    search_users_json,
)


@pytest.mark.asyncio
async def test_no_matches_gives_empty_envelope(settings):
    transport = FakeTransport()
    body = await search_users_json("Nobody Here", transport=transport, settings=settings)
    assert json.loads(body) == {"data": {"userSearchList": []}}
    assert len(transport.calls) == len(generate_candidates("Nobody Here"))


@pytest.mark.asyncio
async def test_concurrency_ceiling(settings):
    transport = FakeTransport(delay=0.01)
    await search_users("john", transport=transport, settings=settings)
    assert transport.max_in_flight <= 10
    # Enough candidates queue up to actually reach the ceiling.
    assert transport.max_in_flight == 10


@pytest.mark.asyncio
async def test_concurrency_ceiling_follows_settings(settings):
    settings.search_max_concurrency = 3
    transport = FakeTransport(delay=0.005)
    await search_users("john", transport=transport, settings=settings)
    assert transport.max_in_flight == 3


@pytest.mark.asyncio
async def test_dedupes_by_resolved_username(settings):
    # Upstream resolves every case variant to the same account.
    transport = FakeTransport(
        {"Jane Doe": "janedoe", "janedoe": "janedoe", "JANEDOE": "janedoe", "jane_doe": "jane_doe"}
    )
    result = await search_users("Jane Doe", transport=transport, settings=settings)
    usernames = [u.username for u in result.users]
    assert sorted(usernames) == ["jane_doe", "janedoe"]
    assert len(usernames) == len(set(usernames))


@pytest.mark.asyncio
async def test_result_order_is_completion_order(settings):
    class SlowFirst(FakeTransport):
        async def execute(self, query, variables):
            if variables["username"].lower() == "john":
                self.delay = 0.05
            else:
                self.delay = 0.0
            return await super().execute(query, variables)

    transport = SlowFirst({"john": "john", "john7": "john7"})
    result = await search_users("john", transport=transport, settings=settings)
    assert [u.username for u in result.users] == ["john7", "john"]


@pytest.mark.asyncio
async def test_failures_are_isolated(settings):
    transport = FakeTransport({"alice1": "alice1", "alice2": "alice2"}, fail_for={"alice1", "Alice1"})
    result = await search_users("alice", transport=transport, settings=settings)
    assert [u.username for u in result.users] == ["alice2"]


@pytest.mark.asyncio
async def test_result_metadata(settings):
    transport = FakeTransport({"bob": "bob"})
    result = await search_users("bob", transport=transport, settings=settings)
    assert result.keyword == "bob"
    assert result.candidates == 200
    assert result.users[0].ranking == 1234


@pytest.mark.asyncio
async def test_prefilter_case_variants_reduces_calls(settings):
    settings.search_prefilter_case_variants = True
    transport = FakeTransport({"jane doe": "jane doe"})
    result = await search_users("Jane Doe", transport=transport, settings=settings)
    lowered = [c.lower() for c in transport.calls]
    assert len(lowered) == len(set(lowered))
    assert [u.username for u in result.users] == ["jane doe"]


@pytest.mark.asyncio
async def test_hooks_report_progress(settings):
    seen = {"total": None, "last": None}
    hooks = SearchHooks(
        started=lambda total: seen.update(total=total),
        progress=lambda done, total: seen.update(last=(done, total)),
    )
    await search_users("ann", transport=FakeTransport(), settings=settings, hooks=hooks)
    assert seen["total"] == 200
    assert seen["last"] == (200, 200)


def test_envelope_shape():
    user = ProfileSummary(id="abcd1234", username="u", real_name="U", avatar_url="a", ranking=1, reputation=2)
    body = render_search_envelope(SearchResult(keyword="u", candidates=1, users=[user]))
    assert json.loads(body) == {
        "data": {
            "userSearchList": [
                {
                    "_id": "abcd1234",
                    "username": "u",
                    "realName": "U",
                    "userAvatar": "a",
                    "ranking": 1,
                    "reputation": 2,
                }
            ]
        }
    }


def test_envelope_encoding_failure_falls_back():
    result = SearchResult(keyword="x", candidates=0, users=[])
    with patch("core.services.user_search.json.dumps", side_effect=ValueError("bad")):
        assert render_search_envelope(result) == EMPTY_ENVELOPE
    assert json.loads(EMPTY_ENVELOPE) == {"data": {"userSearchList": []}}


@pytest.mark.asyncio
async def test_non_finite_ranking_does_not_break_search(settings):
    class InfiniteRanking(FakeTransport):
        async def execute(self, query, variables):
            if variables["username"] == "ann":
                return '{"data":{"matchedUser":{"username":"ann","profile":{"ranking":Infinity}}}}'
            return await super().execute(query, variables)

    body = await search_users_json("ann", transport=InfiniteRanking(), settings=settings)
    users = json.loads(body)["data"]["userSearchList"]
    assert [u["username"] for u in users] == ["ann"]
    assert users[0]["ranking"] == 0


@pytest.mark.asyncio
async def test_cancelling_search_stops_pending_fetches(settings):
    transport = FakeTransport(delay=0.05)
    search = asyncio.create_task(search_users("john", transport=transport, settings=settings))
    await asyncio.sleep(0.01)
    search.cancel()
    with pytest.raises(asyncio.CancelledError):
        await search

    await asyncio.sleep(0.01)
    calls_after_cancel = len(transport.calls)
    await asyncio.sleep(0.15)
    assert len(transport.calls) == calls_after_cancel
    assert calls_after_cancel < 200
    assert transport.in_flight == 0
