"""Credential lookup used by the token exchange."""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional, Protocol, runtime_checkable


class MissingSecret(LookupError):
    """Raised when a required credential cannot be resolved."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Secret {key} is not set")
        self.key = key


@runtime_checkable
class SecretProvider(Protocol):
    """Resolve named credential values from a backing store."""

    def get(self, key: str) -> str:
        """Return the value stored under ``key`` or raise ``MissingSecret``."""


class EnvironmentSecretProvider(SecretProvider):
    """Read secrets from the process environment on every lookup."""

    def get(self, key: str) -> str:
        value = os.environ.get(key)
        if value is None:
            raise MissingSecret(key)
        return value


class InMemorySecretProvider(SecretProvider):
    """Dictionary backed provider for tests and local wiring."""

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(values or {})

    def add(self, key: str, value: str) -> "InMemorySecretProvider":
        self._values[key] = value
        return self

    def get(self, key: str) -> str:
        try:
            return self._values[key]
        except KeyError:
            raise MissingSecret(key) from None


__all__ = [
    "EnvironmentSecretProvider",
    "InMemorySecretProvider",
    "MissingSecret",
    "SecretProvider",
]
