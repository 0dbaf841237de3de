"""Ports for the Strava application layer."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...models import HeartRateSamples


class MalformedResponse(ValueError):
    """Raised when a 2xx Strava response does not have the expected shape."""


@runtime_checkable
class TokenExchangerPort(Protocol):
    """Port that turns a one-time authorization code into an access token."""

    async def exchange(self, code: str) -> str:
        """Return the access token granted for ``code``."""


@runtime_checkable
class ActivityStreamPort(Protocol):
    """Port that retrieves heart rate and time streams for an activity."""

    async def fetch(self, token: str, activity_id: int) -> HeartRateSamples:
        """Return the raw, positionally paired heart rate and time samples."""


__all__ = ["ActivityStreamPort", "MalformedResponse", "TokenExchangerPort"]
