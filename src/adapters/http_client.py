"""httpx wrapper.

Centralises timeouts and headers so every route behaves the same, and keeps
URL building in one place. The optional `transport` lets tests plug an
`httpx.MockTransport` in without touching the routes.
"""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the catalog defaults."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def _query_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(params: Mapping[str, Any] | None) -> str:
    """Form-encode `params` (spaces as `+`); `None` values become empty."""

    if not params:
        return ""
    return urlencode([(key, _query_value(value)) for key, value in params.items()])


def build_url(base_url: str, endpoint: str, params: Mapping[str, Any] | None = None) -> str:
    """`{base_url}{endpoint}?{query}`; the `?` is kept even with no params."""

    return f"{base_url.rstrip('/')}{endpoint}?{encode_query(params)}"
