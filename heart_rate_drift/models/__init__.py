from .strava import (
    ActivityStreams,
    DriftReport,
    DriftResult,
    HeartRateSamples,
    Stream,
    TokenResponse,
)

__all__ = [
    'ActivityStreams',
    'DriftReport',
    'DriftResult',
    'HeartRateSamples',
    'Stream',
    'TokenResponse',
]
