"""Deterministic stand-in for ``AuthenticatedHttpClient``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from . import AuthenticatedHttpClient, HttpConnectionError, HttpRequest, HttpStatusError


@dataclass(frozen=True)
class CannedResponse:
    body: str
    status_code: int = 200


class StubHttpClient(AuthenticatedHttpClient):
    """Table backed client that never touches the network.

    GET requests are routed by ``(token, url)`` first and by ``(None, url)``
    second. A GET without a matching entry answers like an unauthorized
    request (``HttpStatusError`` with status 401) so callers can tell
    authorization failures apart from connectivity failures. POST requests
    return the canned body registered for the URL, or for any URL, whatever
    fields were submitted; the fields are recorded for later assertions.
    """

    def __init__(self) -> None:
        self._gets: Dict[Tuple[Optional[str], str], CannedResponse] = {}
        self._posts: Dict[Optional[str], CannedResponse] = {}
        self._unreachable: Set[str] = set()
        self.requests: List[HttpRequest] = []

    def on_get(
        self,
        url: str,
        body: str,
        *,
        token: Optional[str] = None,
        status_code: int = 200,
    ) -> "StubHttpClient":
        """Register a GET response; ``token=None`` registers it for any caller."""

        self._gets[(token, url)] = CannedResponse(body, status_code)
        return self

    def on_post(
        self,
        body: str,
        *,
        url: Optional[str] = None,
        status_code: int = 200,
    ) -> "StubHttpClient":
        """Register a POST response for ``url``, or for every URL when omitted."""

        self._posts[url] = CannedResponse(body, status_code)
        return self

    def fail_transport(self, url: str) -> "StubHttpClient":
        """Make every request to ``url`` fail as if the host were unreachable."""

        self._unreachable.add(url)
        return self

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def get_requests(self) -> List[HttpRequest]:
        return [r for r in self.requests if r.method == "GET"]

    @property
    def post_requests(self) -> List[HttpRequest]:
        return [r for r in self.requests if r.method == "POST"]

    def last_post_fields(self) -> Tuple[Tuple[str, str], ...]:
        posts = self.post_requests
        if not posts:
            raise LookupError("No post_form() call was recorded")
        return posts[-1].form

    async def send(self, request: HttpRequest) -> str:
        self.requests.append(request)
        if request.url in self._unreachable:
            raise HttpConnectionError(f"Error connecting to {request.url}")

        canned = self._route(request)
        if canned is None:
            status = 401 if request.method == "GET" else 404
            raise HttpStatusError(request.url, status)
        if not 200 <= canned.status_code < 300:
            raise HttpStatusError(request.url, canned.status_code, canned.body)
        return canned.body

    def _route(self, request: HttpRequest) -> Optional[CannedResponse]:
        if request.method == "GET":
            token = request.bearer_token
            if token is not None and (token, request.url) in self._gets:
                return self._gets[(token, request.url)]
            return self._gets.get((None, request.url))
        if request.url in self._posts:
            return self._posts[request.url]
        return self._posts.get(None)


__all__ = ["CannedResponse", "StubHttpClient"]
