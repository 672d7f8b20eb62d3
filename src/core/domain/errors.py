"""Errors surfaced by the single-target profile lookup.

The keyword search never raises these: failures inside the fan-out are
absorbed per candidate. A direct lookup of a known username, on the other
hand, reports why it failed.
"""

from __future__ import annotations

from http import HTTPStatus


class ProfileLookupError(Exception):
    """Base class for classified profile lookup failures."""


class UpstreamStatusError(ProfileLookupError):
    """The upstream answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        try:
            reason = HTTPStatus(status_code).phrase
        except ValueError:
            reason = "Unknown"
        super().__init__(f"Upstream API error: {status_code} {reason} - {body}")


class UpstreamTransportError(ProfileLookupError):
    """Network, timeout or decoding failure unrelated to an HTTP status."""

    def __init__(self, message: str) -> None:
        self.detail = message
        super().__init__(f"Failed to get user profile: {message}")
