"""Heart rate drift for Strava activities."""

from .domain.body_metrics.hr import DegenerateSegment, NotEnoughSamples, heart_rate_drift
from .platform.clients import HttpConnectionError, HttpStatusError
from .platform.secrets import MissingSecret
from .strava.application.ports import MalformedResponse

__all__ = [
    "DegenerateSegment",
    "HttpConnectionError",
    "HttpStatusError",
    "MalformedResponse",
    "MissingSecret",
    "NotEnoughSamples",
    "heart_rate_drift",
]
