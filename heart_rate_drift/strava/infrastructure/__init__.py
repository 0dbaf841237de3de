"""Infrastructure adapters for the Strava integration."""

from ..application.ports import MalformedResponse
from .client import (
    StravaStreamFetcher,
    StravaTokenExchanger,
    create_strava_stream_fetcher,
    create_strava_token_exchanger,
)

__all__ = [
    "MalformedResponse",
    "StravaStreamFetcher",
    "StravaTokenExchanger",
    "create_strava_stream_fetcher",
    "create_strava_token_exchanger",
]
