"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from heart_rate_drift import main
from heart_rate_drift.platform import InMemorySecretProvider, StubHttpClient
from heart_rate_drift.platform.config import Settings, get_settings
from heart_rate_drift.platform.wiring import (
    provide_http_client,
    provide_secret_provider,
)

TEST_CLIENT_ID = "Test_Strava_Client_ID"
TEST_CLIENT_SECRET = "Test_Strava_Client_Secret"


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        strava_base_url="https://strava.test",
        strava_client_id_key="STRAVA_CLIENT_ID",
        strava_client_secret_key="STRAVA_CLIENT_SECRET",
        http_timeout_seconds=1.0,
    )


@pytest.fixture
def secrets(settings: Settings) -> InMemorySecretProvider:
    return (
        InMemorySecretProvider()
        .add(settings.strava_client_id_key, TEST_CLIENT_ID)
        .add(settings.strava_client_secret_key, TEST_CLIENT_SECRET)
    )


@pytest.fixture
def stub_http() -> StubHttpClient:
    return StubHttpClient()


@pytest.fixture
def app(
    settings: Settings,
    secrets: InMemorySecretProvider,
    stub_http: StubHttpClient,
) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        provide_secret_provider: lambda: secrets,
        provide_http_client: lambda: stub_http,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as api_client:
        yield api_client
