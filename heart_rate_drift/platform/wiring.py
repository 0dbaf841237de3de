"""FastAPI dependency wiring for the drift pipeline."""

from __future__ import annotations

from typing import AsyncIterator

import httpx
from fastapi import Depends

from ..strava.application import (
    ActivityStreamPort,
    HeartRateDriftCoordinator,
    TokenExchangerPort,
)
from ..strava.infrastructure import (
    create_strava_stream_fetcher,
    create_strava_token_exchanger,
)
from .clients import AuthenticatedHttpClient, HttpxAuthenticatedClient
from .config import Settings, get_settings
from .secrets import EnvironmentSecretProvider, SecretProvider


def provide_secret_provider() -> SecretProvider:
    return EnvironmentSecretProvider()


async def provide_http_client(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[AuthenticatedHttpClient]:
    async with httpx.AsyncClient(timeout=settings.http_timeout_seconds) as http_client:
        yield HttpxAuthenticatedClient(http_client)


def provide_token_exchanger(
    http_client: AuthenticatedHttpClient = Depends(provide_http_client),
    secrets: SecretProvider = Depends(provide_secret_provider),
    settings: Settings = Depends(get_settings),
) -> TokenExchangerPort:
    return create_strava_token_exchanger(
        http_client=http_client, secrets=secrets, settings=settings
    )


def provide_stream_fetcher(
    http_client: AuthenticatedHttpClient = Depends(provide_http_client),
    settings: Settings = Depends(get_settings),
) -> ActivityStreamPort:
    return create_strava_stream_fetcher(http_client=http_client, settings=settings)


def provide_heart_rate_drift_coordinator(
    exchanger: TokenExchangerPort = Depends(provide_token_exchanger),
    fetcher: ActivityStreamPort = Depends(provide_stream_fetcher),
) -> HeartRateDriftCoordinator:
    return HeartRateDriftCoordinator(exchanger, fetcher)


__all__ = [
    "provide_heart_rate_drift_coordinator",
    "provide_http_client",
    "provide_secret_provider",
    "provide_stream_fetcher",
    "provide_token_exchanger",
]
