from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class TokenResponse(BaseModel):
    """Subset of the Strava ``/oauth/token`` response used here."""

    access_token: str = Field(min_length=1)


class Stream(BaseModel):
    model_config = ConfigDict(strict=True)

    data: List[int]


class ActivityStreams(BaseModel):
    """Activity streams keyed by type (``key_by_type=true``)."""

    heartrate: Stream
    time: Stream


class HeartRateSamples(BaseModel):
    rates: List[int]
    times: List[int]

    def to_streams(self) -> ActivityStreams:
        return ActivityStreams(
            heartrate=Stream(data=self.rates), time=Stream(data=self.times)
        )


class DriftReport(BaseModel):
    activity_id: int
    drift_percent: float
    first_segment_average: float
    second_segment_average: float
    sample_count: int


class DriftResult(BaseModel):
    drift_percent: float
