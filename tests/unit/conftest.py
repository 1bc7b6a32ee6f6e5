"""
Unit Test Fixtures.

The remote API is replaced with httpx.MockTransport; nothing touches the
network.
"""

from typing import Any

import httpx
import pytest

from owo.api.client import OwoClient
from owo.core.config import ClientConfig


class FakeAPI:
    """
    Canned whats-th.is API for httpx.MockTransport.

    Records every request it receives and answers with the configured
    response.

    Usage:
        def test_something(fake_api, api_client):
            fake_api.respond(200, json={...})
            ...
            assert fake_api.last_request.url.path == "/objects"
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = 200
        self._json: Any = None
        self._content: bytes = b""
        self._error: Exception | None = None

    def respond(
        self,
        status_code: int = 200,
        json: Any = None,
        text: str | None = None,
    ) -> None:
        """Set the response returned for subsequent requests."""
        self._status_code = status_code
        self._json = json
        self._content = text.encode() if text is not None else b""
        self._error = None

    def fail_with(self, error: Exception) -> None:
        """Raise `error` from the transport instead of responding."""
        self._error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._json is not None:
            return httpx.Response(self._status_code, json=self._json)
        return httpx.Response(self._status_code, content=self._content)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def fake_api() -> FakeAPI:
    """Provide a fresh FakeAPI for one test."""
    return FakeAPI()


@pytest.fixture
def api_client(client_config: ClientConfig, fake_api: FakeAPI) -> OwoClient:
    """OwoClient wired to the FakeAPI transport."""
    return OwoClient(client_config, transport=httpx.MockTransport(fake_api.handler))
