"""Strava integration package."""

from .application.coordinator import HeartRateDriftCoordinator
from .application.ports import MalformedResponse

__all__ = [
    "HeartRateDriftCoordinator",
    "MalformedResponse",
]
