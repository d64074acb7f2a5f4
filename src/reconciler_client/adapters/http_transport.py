"""Factories for the HTTP transports injected into reconciler clients.

Callers own the returned client and are expected to close it (``with`` / ``async with``).
No retry, caching or rate limiting is layered on top; the timeout is the only
per-request deadline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from reconciler_client import __version__

if TYPE_CHECKING:
    from reconciler_client.config.http_transport import TransportConfig

USER_AGENT = f"reconciler-client/{__version__}"


def _headers(config: TransportConfig) -> dict[str, str]:
    headers = {"User-Agent": USER_AGENT}
    if config.default_headers:
        headers.update(config.default_headers)
    return headers


def build_http_client(
    config: TransportConfig,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    return httpx.Client(
        timeout=config.timeout_seconds,
        headers=_headers(config),
        verify=config.verify,
        transport=transport,
    )


def build_async_http_client(
    config: TransportConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=config.timeout_seconds,
        headers=_headers(config),
        verify=config.verify,
        transport=transport,
    )
