"""Shared pytest fixtures for waitlister-mcp test suite."""

from __future__ import annotations

import json

import httpx
import pytest

from waitlister_mcp import waitlister_client
from waitlister_mcp.config import Settings


class FakeWaitlister:
    """In-memory stand-in for the Waitlister API.

    Records every request and answers with the queued status/body
    (``200 {}`` unless told otherwise).
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.content: bytes = b"{}"

    def respond(self, status_code: int, data: object = None, *, raw: bytes | None = None) -> None:
        self.status_code = status_code
        self.content = raw if raw is not None else json.dumps(data).encode()

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            status_code=self.status_code,
            content=self.content,
            headers={"content-type": "application/json"},
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> object:
        return json.loads(self.last.content)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-api-key", waitlist_key="wl_test")


@pytest.fixture
def fake_api(settings):
    """Route the process-wide client to a FakeWaitlister."""
    fake = FakeWaitlister()
    waitlister_client.configure(settings, transport=httpx.MockTransport(fake.handler))
    yield fake
    waitlister_client.reset()
