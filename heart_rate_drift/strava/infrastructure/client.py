from __future__ import annotations

import logging

from pydantic import ValidationError

from ...models import ActivityStreams, HeartRateSamples, TokenResponse
from ...platform.clients import AuthenticatedHttpClient
from ...platform.config import (
    DEFAULT_CLIENT_ID_KEY,
    DEFAULT_CLIENT_SECRET_KEY,
    DEFAULT_STRAVA_BASE_URL,
    Settings,
)
from ...platform.secrets import SecretProvider
from ..application.ports import (
    ActivityStreamPort,
    MalformedResponse,
    TokenExchangerPort,
)

logger = logging.getLogger(__name__)

OAUTH_TOKEN_PATH = "/oauth/token"
STREAMS_PATH = "/api/v3/activities/{activity_id}/streams"
STREAMS_QUERY = "keys=heartrate,time&key_by_type=true"


class StravaTokenExchanger(TokenExchangerPort):
    """Exchange an OAuth authorization code for a Strava access token."""

    def __init__(
        self,
        http_client: AuthenticatedHttpClient,
        secrets: SecretProvider,
        *,
        base_url: str = DEFAULT_STRAVA_BASE_URL,
        client_id_key: str = DEFAULT_CLIENT_ID_KEY,
        client_secret_key: str = DEFAULT_CLIENT_SECRET_KEY,
    ) -> None:
        self._http_client = http_client
        self._secrets = secrets
        self._token_url = f"{base_url.rstrip('/')}{OAUTH_TOKEN_PATH}"
        self._client_id_key = client_id_key
        self._client_secret_key = client_secret_key

    async def exchange(self, code: str) -> str:
        # Both credentials are resolved before anything goes over the wire.
        client_id = self._secrets.get(self._client_id_key)
        client_secret = self._secrets.get(self._client_secret_key)

        body = await self._http_client.post_form(
            self._token_url,
            [
                ("code", code),
                ("client_id", client_id),
                ("client_secret", client_secret),
            ],
        )
        try:
            token = TokenResponse.model_validate_json(body)
        except ValidationError as exc:
            raise MalformedResponse(
                "Strava token response missing access token"
            ) from exc

        logger.debug("Exchanged authorization code for Strava access token")
        return token.access_token


class StravaStreamFetcher(ActivityStreamPort):
    """Fetch the heart rate and time streams of a single activity."""

    def __init__(
        self,
        http_client: AuthenticatedHttpClient,
        *,
        base_url: str = DEFAULT_STRAVA_BASE_URL,
    ) -> None:
        self._http_client = http_client
        self._base_url = base_url.rstrip("/")

    def streams_url(self, activity_id: int) -> str:
        path = STREAMS_PATH.format(activity_id=activity_id)
        return f"{self._base_url}{path}?{STREAMS_QUERY}"

    async def fetch(self, token: str, activity_id: int) -> HeartRateSamples:
        body = await self._http_client.get(self.streams_url(activity_id), token)
        try:
            streams = ActivityStreams.model_validate_json(body)
        except ValidationError as exc:
            raise MalformedResponse(
                f"Unexpected stream payload for activity {activity_id}"
            ) from exc

        logger.debug(
            "Fetched %d heart rate and %d time samples for activity %s",
            len(streams.heartrate.data),
            len(streams.time.data),
            activity_id,
        )
        return HeartRateSamples(
            rates=streams.heartrate.data, times=streams.time.data
        )


def create_strava_token_exchanger(
    *,
    http_client: AuthenticatedHttpClient,
    secrets: SecretProvider,
    settings: Settings,
) -> TokenExchangerPort:
    """Create a token exchanger without FastAPI dependencies."""
    return StravaTokenExchanger(
        http_client,
        secrets,
        base_url=settings.strava_base_url,
        client_id_key=settings.strava_client_id_key,
        client_secret_key=settings.strava_client_secret_key,
    )


def create_strava_stream_fetcher(
    *, http_client: AuthenticatedHttpClient, settings: Settings
) -> ActivityStreamPort:
    """Create a stream fetcher without FastAPI dependencies."""
    return StravaStreamFetcher(http_client, base_url=settings.strava_base_url)
