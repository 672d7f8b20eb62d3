"""Pytest configuration and fixtures."""

import asyncio
import json

import httpx
import pytest

from core.config import AppSettings


def matched_user_body(
    username,
    *,
    real_name="",
    avatar="",
    ranking=0,
    reputation=0,
):
    """Upstream body for a narrow query that resolved `username`."""
    return json.dumps(
        {
            "data": {
                "matchedUser": {
                    "username": username,
                    "profile": {
                        "ranking": ranking,
                        "userAvatar": avatar,
                        "realName": real_name,
                        "reputation": reputation,
                    },
                }
            }
        }
    )


NOT_FOUND_BODY = json.dumps(
    {
        "errors": [{"message": "That user does not exist."}],
        "data": {"matchedUser": None},
    }
)


class FakeTransport:
    """In-memory `GraphQLTransport`.

    `accounts` maps a candidate (compared case-insensitively) to the
    resolved upstream username. Tracks the in-flight peak so tests can
    assert the concurrency ceiling.
    """

    def __init__(self, accounts=None, *, delay=0.0, fail_for=()):
        self.accounts = {k.lower(): v for k, v in (accounts or {}).items()}
        self.delay = delay
        self.fail_for = set(fail_for)
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def execute(self, query, variables):
        username = variables["username"]
        self.calls.append(username)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            if username in self.fail_for:
                raise httpx.ConnectError("connection refused")
            resolved = self.accounts.get(username.lower())
            if resolved is None:
                return NOT_FOUND_BODY
            return matched_user_body(resolved, real_name=resolved.title(), ranking=1234, reputation=5)
        finally:
            self.in_flight -= 1


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return AppSettings(_env_file=None)


@pytest.fixture
def fake_transport():
    return FakeTransport()
