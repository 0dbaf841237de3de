"""Heart rate derived metrics."""

from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple

# Elapsed seconds from activity start.
WARM_UP_LIMIT = 900
FIRST_SEGMENT_LIMIT = 2700
LAST_SEGMENT_LIMIT = 4500


class NotEnoughSamples(ValueError):
    """Raised when either scored segment has no samples."""

    def __init__(self) -> None:
        super().__init__(
            "Not enough samples to calculate drift. The calculation needs a "
            "15 min warm-up followed by two 30 min segments with at least one "
            "sample each"
        )


class DegenerateSegment(ArithmeticError):
    """Raised when the first segment averages to zero beats per minute."""


class HeartRateAtTime(NamedTuple):
    heart_rate: int
    time: int


def pair_samples(rates: Sequence[int], times: Sequence[int]) -> List[HeartRateAtTime]:
    """Pair rates and times by position; the shorter sequence wins."""
    return [HeartRateAtTime(rate, time) for rate, time in zip(rates, times)]


def segment_averages(samples: Sequence[HeartRateAtTime]) -> Tuple[float, float]:
    """Return the mean heart rate of the first and second scored segments."""
    first = [
        s.heart_rate
        for s in samples
        if WARM_UP_LIMIT <= s.time < FIRST_SEGMENT_LIMIT
    ]
    second = [
        s.heart_rate
        for s in samples
        if FIRST_SEGMENT_LIMIT <= s.time < LAST_SEGMENT_LIMIT
    ]
    if not first or not second:
        raise NotEnoughSamples()
    return sum(first) / len(first), sum(second) / len(second)


def drift_between(first_avg: float, second_avg: float) -> float:
    if first_avg == 0:
        raise DegenerateSegment("First segment average heart rate is zero")
    return (second_avg - first_avg) / first_avg * 100


def heart_rate_drift(rates: Sequence[int], times: Sequence[int]) -> float:
    """Percentage change between the two 30 minute segments after warm-up.

    Samples before ``WARM_UP_LIMIT`` and from ``LAST_SEGMENT_LIMIT`` on are
    ignored. Raises ``NotEnoughSamples`` when a segment is empty and
    ``DegenerateSegment`` when the first segment averages to zero.
    """
    first_avg, second_avg = segment_averages(pair_samples(rates, times))
    return drift_between(first_avg, second_avg)


__all__ = [
    "DegenerateSegment",
    "FIRST_SEGMENT_LIMIT",
    "HeartRateAtTime",
    "LAST_SEGMENT_LIMIT",
    "NotEnoughSamples",
    "WARM_UP_LIMIT",
    "drift_between",
    "heart_rate_drift",
    "pair_samples",
    "segment_averages",
]
