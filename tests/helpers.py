"""Helpers for tests: a fake CS-Cart upstream built on httpx.MockTransport."""
from __future__ import annotations

import json
from typing import Any, Callable, Optional

import httpx

from cscart_mcp_server.config import Config

API_URL = "https://shop.example.com/api"
API_EMAIL = "admin@example.com"
API_KEY = "s3cret-key"


def make_config(**overrides: Any) -> Config:
    """Config pointing at the fake upstream, with optional field overrides."""
    values: dict[str, Any] = {"api_url": API_URL, "api_email": API_EMAIL, "api_key": API_KEY}
    values.update(overrides)
    return Config(**values)


class FakeUpstream:
    """Records every request and answers with a configurable responder.

    The default responder echoes method and path back as JSON so tests can
    tell which endpoint was hit from the tool result alone.
    """

    def __init__(self, responder: Optional[Callable[[httpx.Request], httpx.Response]] = None):
        self.requests: list[httpx.Request] = []
        self._responder = responder or _echo

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handle))

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request reached the upstream"
        return self.requests[-1]


def _echo(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"method": request.method, "target": api_target(request)})


def api_target(request: httpx.Request) -> str:
    """Path plus query string relative to the API base URL (e.g. "/products?page=2")."""
    raw = request.url.raw_path.decode("ascii")
    prefix = httpx.URL(API_URL).path
    return raw[len(prefix):] if raw.startswith(prefix) else raw


def body_of(request: httpx.Request) -> Any:
    """Decoded JSON body of a request, or None if it has no body."""
    return json.loads(request.content) if request.content else None
