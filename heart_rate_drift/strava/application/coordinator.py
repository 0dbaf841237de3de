from __future__ import annotations

import logging

from ...domain.body_metrics.hr import drift_between, pair_samples, segment_averages
from ...models import DriftReport, HeartRateSamples
from .ports import ActivityStreamPort, TokenExchangerPort

logger = logging.getLogger(__name__)


class HeartRateDriftCoordinator:
    """Runs token exchange, stream fetch and drift computation in order."""

    def __init__(
        self,
        exchanger: TokenExchangerPort,
        fetcher: ActivityStreamPort,
    ) -> None:
        self._exchanger = exchanger
        self._fetcher = fetcher

    async def exchange_code(self, code: str) -> str:
        return await self._exchanger.exchange(code)

    async def fetch_samples(self, token: str, activity_id: int) -> HeartRateSamples:
        return await self._fetcher.fetch(token, activity_id)

    def compute_drift(
        self, activity_id: int, samples: HeartRateSamples
    ) -> DriftReport:
        paired = pair_samples(samples.rates, samples.times)
        first_avg, second_avg = segment_averages(paired)
        return DriftReport(
            activity_id=activity_id,
            drift_percent=drift_between(first_avg, second_avg),
            first_segment_average=first_avg,
            second_segment_average=second_avg,
            sample_count=len(paired),
        )

    async def process(self, code: str, activity_id: int) -> DriftReport:
        token = await self.exchange_code(code)
        samples = await self.fetch_samples(token, activity_id)
        report = self.compute_drift(activity_id, samples)
        logger.info(
            "Heart rate drift for activity %s is %.2f%%",
            activity_id,
            report.drift_percent,
        )
        return report


__all__ = ["HeartRateDriftCoordinator"]
