from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_STRAVA_BASE_URL = "https://www.strava.com"
DEFAULT_CLIENT_ID_KEY = "STRAVA_CLIENT_ID"
DEFAULT_CLIENT_SECRET_KEY = "STRAVA_CLIENT_SECRET"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Credentials are not settings: only the *names* under which the Strava
    client id and secret are stored live here, the values themselves are
    resolved through a ``SecretProvider``.
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    strava_base_url: str = DEFAULT_STRAVA_BASE_URL
    strava_client_id_key: str = DEFAULT_CLIENT_ID_KEY
    strava_client_secret_key: str = DEFAULT_CLIENT_SECRET_KEY
    http_timeout_seconds: float = 10.0


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = [
    "DEFAULT_CLIENT_ID_KEY",
    "DEFAULT_CLIENT_SECRET_KEY",
    "DEFAULT_STRAVA_BASE_URL",
    "Settings",
    "get_settings",
]
