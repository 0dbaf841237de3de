"""End-to-end drift pipeline over the deterministic HTTP double."""

from __future__ import annotations

from typing import List

import pytest

from heart_rate_drift.domain.body_metrics.hr import NotEnoughSamples
from heart_rate_drift.models import HeartRateSamples
from heart_rate_drift.platform.clients import HttpStatusError
from heart_rate_drift.platform.clients.stub import StubHttpClient
from heart_rate_drift.platform.config import Settings
from heart_rate_drift.platform.secrets import InMemorySecretProvider, MissingSecret
from heart_rate_drift.strava import HeartRateDriftCoordinator, MalformedResponse
from heart_rate_drift.strava.infrastructure import (
    create_strava_stream_fetcher,
    create_strava_token_exchanger,
)

from tests.builders import make_streams_payload, make_strava_token_response, streams_url


def make_coordinator(
    stub: StubHttpClient, secrets: InMemorySecretProvider, settings: Settings
) -> HeartRateDriftCoordinator:
    return HeartRateDriftCoordinator(
        create_strava_token_exchanger(
            http_client=stub, secrets=secrets, settings=settings
        ),
        create_strava_stream_fetcher(http_client=stub, settings=settings),
    )


@pytest.mark.asyncio
async def test_process_runs_exchange_fetch_and_compute(
    stub_http: StubHttpClient,
    secrets: InMemorySecretProvider,
    settings: Settings,
) -> None:
    stub_http.on_post(make_strava_token_response(access_token="T"))
    stub_http.on_get(
        streams_url(settings, 7), make_streams_payload([1, 2], [901, 2701]), token="T"
    )

    report = await make_coordinator(stub_http, secrets, settings).process("code", 7)

    assert report.activity_id == 7
    assert report.drift_percent == 100.0
    assert report.first_segment_average == 1.0
    assert report.second_segment_average == 2.0
    assert report.sample_count == 2
    assert [r.method for r in stub_http.requests] == ["POST", "GET"]


@pytest.mark.asyncio
async def test_process_stops_when_credentials_are_missing(
    stub_http: StubHttpClient, settings: Settings
) -> None:
    coordinator = make_coordinator(stub_http, InMemorySecretProvider(), settings)

    with pytest.raises(MissingSecret):
        await coordinator.process("code", 7)

    assert stub_http.call_count == 0


@pytest.mark.asyncio
async def test_process_does_not_fetch_after_malformed_token(
    stub_http: StubHttpClient,
    secrets: InMemorySecretProvider,
    settings: Settings,
) -> None:
    stub_http.on_post("{}")

    with pytest.raises(MalformedResponse):
        await make_coordinator(stub_http, secrets, settings).process("code", 7)

    assert stub_http.get_requests == []


@pytest.mark.asyncio
async def test_process_surfaces_rejected_token(
    stub_http: StubHttpClient,
    secrets: InMemorySecretProvider,
    settings: Settings,
) -> None:
    stub_http.on_post(make_strava_token_response(access_token="T"))
    stub_http.on_get(
        streams_url(settings, 7), make_streams_payload([1], [1]), token="other"
    )

    with pytest.raises(HttpStatusError) as excinfo:
        await make_coordinator(stub_http, secrets, settings).process("code", 7)

    assert excinfo.value.status_code == 401


@pytest.mark.asyncio
async def test_process_surfaces_not_enough_samples(
    stub_http: StubHttpClient,
    secrets: InMemorySecretProvider,
    settings: Settings,
) -> None:
    stub_http.on_post(make_strava_token_response(access_token="T"))
    stub_http.on_get(streams_url(settings, 7), make_streams_payload([1], [899]))

    with pytest.raises(NotEnoughSamples):
        await make_coordinator(stub_http, secrets, settings).process("code", 7)


@pytest.mark.asyncio
async def test_coordinator_accepts_any_port_implementation() -> None:
    calls: List[str] = []

    class DummyExchanger:
        async def exchange(self, code: str) -> str:
            calls.append(f"exchange:{code}")
            return "token"

    class DummyFetcher:
        async def fetch(self, token: str, activity_id: int) -> HeartRateSamples:
            calls.append(f"fetch:{token}:{activity_id}")
            return HeartRateSamples(rates=[1, 1, 1], times=[899, 2699, 4499])

    coordinator = HeartRateDriftCoordinator(DummyExchanger(), DummyFetcher())
    report = await coordinator.process("abc", 3)

    assert report.drift_percent == 0.0
    assert calls == ["exchange:abc", "fetch:token:3"]


def test_compute_drift_counts_paired_samples() -> None:
    coordinator = HeartRateDriftCoordinator(None, None)  # type: ignore[arg-type]
    samples = HeartRateSamples(rates=[140, 150, 161], times=[1000, 3000])

    report = coordinator.compute_drift(5, samples)

    assert report.sample_count == 2
    assert report.drift_percent == pytest.approx(100 * 10 / 140)
