"""Application layer for Strava integration."""

from .coordinator import HeartRateDriftCoordinator
from .ports import ActivityStreamPort, MalformedResponse, TokenExchangerPort

__all__ = [
    "ActivityStreamPort",
    "HeartRateDriftCoordinator",
    "MalformedResponse",
    "TokenExchangerPort",
]
