"""Async Waitlister REST API client using httpx.

Every call is scoped to one waitlist:
``{api_base}/waitlist/{waitlist_key}{path}``. Successful JSON bodies are
returned untouched; non-2xx responses raise :class:`ApiError`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from waitlister_mcp.config import Settings

log = logging.getLogger("waitlister-mcp")

API_KEY_HEADER = "X-Api-Key"
_RESERVED_HEADERS = frozenset({"content-type", API_KEY_HEADER.lower()})

# Characters encodeURIComponent leaves alone besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


class ApiError(Exception):
    """The Waitlister API answered with a non-success status."""

    def __init__(self, status_code: int, message: str, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.body = body


def encode_path_segment(value: str) -> str:
    """Percent-encode *value* for use as a single URL path segment."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def _error_message(response: httpx.Response, data: Any) -> str:
    if isinstance(data, dict) and "message" in data:
        return str(data["message"])
    return f"API error: {response.status_code} {response.reason_phrase}"


class WaitlisterClient:
    """Builds authenticated requests for one waitlist and normalises responses."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self._transport = transport

    @property
    def base_url(self) -> str:
        return f"{self.settings.api_base}/waitlist/{encode_path_segment(self.settings.waitlist_key)}"

    def _headers(self, extra: Mapping[str, str] | None = None) -> httpx.Headers:
        headers = httpx.Headers(extra or {})
        for name in _RESERVED_HEADERS:
            if name in headers:
                log.warning("Ignoring caller-supplied reserved header %r", name)
        headers["Content-Type"] = "application/json"
        headers[API_KEY_HEADER] = self.settings.api_key
        return headers

    def _make_client(self) -> httpx.AsyncClient:
        """Create a per-call AsyncClient (caller manages lifecycle)."""
        kwargs: dict[str, Any] = {}
        if self.settings.timeout is not None:
            kwargs["timeout"] = self.settings.timeout
        return httpx.AsyncClient(base_url=self.base_url, transport=self._transport, **kwargs)

    async def request(
        self,
        path: str,
        method: str = "GET",
        json: Any = None,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send one request to *path* (relative to the waitlist) and return its JSON body.

        Raises:
            ApiError: on any non-2xx status.
            httpx.HTTPError: on network failures.
            json.JSONDecodeError: when the response body is not JSON.
        """
        log.debug("%s %s", method, path)
        async with self._make_client() as client:
            resp = await client.request(
                method,
                path,
                json=json,
                params=params,
                headers=self._headers(headers),
            )

        data = resp.json()

        if not resp.is_success:
            message = _error_message(resp, data)
            log.warning("%s %s failed with %d: %s", method, path, resp.status_code, message)
            raise ApiError(resp.status_code, message, data)

        return data


# Module-level singleton, set by configure() at startup
_client: WaitlisterClient | None = None


def configure(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WaitlisterClient:
    """Install the process-wide client used by the tools."""
    global _client  # noqa: PLW0603
    _client = WaitlisterClient(settings, transport=transport)
    return _client


def get_client() -> WaitlisterClient:
    """Return the client installed by :func:`configure`."""
    if _client is None:
        raise RuntimeError("Waitlister client is not configured; call configure() at startup.")
    return _client


def reset() -> None:
    global _client  # noqa: PLW0603
    _client = None
