"""Minimal authenticated HTTP interface shared by the Strava adapters."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import httpx

logger = logging.getLogger(__name__)

Pairs = Tuple[Tuple[str, str], ...]

_BEARER_PREFIX = "Bearer "


class HttpConnectionError(ConnectionError):
    """Raised when a request cannot be completed.

    ``status_code`` is ``None`` for transport failures (DNS, refused
    connection, timeouts) and set for responses outside the 2xx range.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpStatusError(HttpConnectionError):
    """Raised when the remote side answers with a non-2xx status."""

    def __init__(self, url: str, status_code: int, body: str = "") -> None:
        super().__init__(f"{url} returned HTTP {status_code}", status_code=status_code)
        self.url = url
        self.body = body


@dataclass(frozen=True)
class HttpRequest:
    """Fully described request handed to a client in one piece."""

    method: str
    url: str
    headers: Pairs = ()
    form: Pairs = ()

    @classmethod
    def authenticated_get(cls, url: str, bearer_token: str) -> "HttpRequest":
        return cls(
            method="GET",
            url=url,
            headers=(("Authorization", f"{_BEARER_PREFIX}{bearer_token}"),),
        )

    @classmethod
    def form_post(cls, url: str, fields: Sequence[Tuple[str, str]]) -> "HttpRequest":
        return cls(method="POST", url=url, form=tuple((k, v) for k, v in fields))

    @property
    def bearer_token(self) -> Optional[str]:
        for name, value in self.headers:
            if name.lower() == "authorization" and value.startswith(_BEARER_PREFIX):
                return value[len(_BEARER_PREFIX):]
        return None


class AuthenticatedHttpClient(ABC):
    """GET with a bearer token, or POST a form without one.

    Implementations only provide ``send``; header construction stays here so
    every caller gets the same authorization semantics.
    """

    async def get(self, url: str, bearer_token: str) -> str:
        return await self.send(HttpRequest.authenticated_get(url, bearer_token))

    async def post_form(self, url: str, fields: Sequence[Tuple[str, str]]) -> str:
        return await self.send(HttpRequest.form_post(url, fields))

    @abstractmethod
    async def send(self, request: HttpRequest) -> str:
        """Perform ``request`` and return the response body."""


class HttpxAuthenticatedClient(AuthenticatedHttpClient):
    """Live implementation on top of ``httpx.AsyncClient``."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http_client = http_client

    async def send(self, request: HttpRequest) -> str:
        logger.debug("%s %s", request.method, request.url)
        try:
            response = await self._http_client.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                data=dict(request.form) if request.form else None,
            )
        except httpx.TransportError as exc:
            raise HttpConnectionError(
                f"Error connecting to {request.url}: {exc}"
            ) from exc

        if not response.is_success:
            raise HttpStatusError(request.url, response.status_code, response.text)
        return response.text


__all__ = [
    "AuthenticatedHttpClient",
    "HttpConnectionError",
    "HttpRequest",
    "HttpStatusError",
    "HttpxAuthenticatedClient",
]
