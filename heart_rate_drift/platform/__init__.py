"""Configuration, credentials and HTTP plumbing."""

from .clients import (
    AuthenticatedHttpClient,
    HttpConnectionError,
    HttpRequest,
    HttpStatusError,
    HttpxAuthenticatedClient,
)
from .clients.stub import StubHttpClient
from .config import Settings, get_settings
from .secrets import (
    EnvironmentSecretProvider,
    InMemorySecretProvider,
    MissingSecret,
    SecretProvider,
)

__all__ = [
    "AuthenticatedHttpClient",
    "EnvironmentSecretProvider",
    "HttpConnectionError",
    "HttpRequest",
    "HttpStatusError",
    "HttpxAuthenticatedClient",
    "InMemorySecretProvider",
    "MissingSecret",
    "SecretProvider",
    "Settings",
    "StubHttpClient",
    "get_settings",
]
