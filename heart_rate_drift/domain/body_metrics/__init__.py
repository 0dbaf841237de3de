from .hr import (
    DegenerateSegment,
    HeartRateAtTime,
    NotEnoughSamples,
    heart_rate_drift,
    pair_samples,
    segment_averages,
)

__all__ = [
    "DegenerateSegment",
    "HeartRateAtTime",
    "NotEnoughSamples",
    "heart_rate_drift",
    "pair_samples",
    "segment_averages",
]
