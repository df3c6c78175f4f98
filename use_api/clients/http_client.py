"""
clients/http_client.py
----------------------

Default transport with connection pooling and timeouts.  It uses the
``httpx`` library under the hood and honours the settings defined in
:mod:`use_api.core.config`.

``HttpxTransport`` is the fetch-like callable the request functions
fall back to when no transport is injected.  A single instance should
be shared per process; :func:`get_default_transport` provides one
lazily and :func:`set_default_transport` replaces it, for example with
a fake in tests.

Each request is sent exactly once.  Network errors raised by ``httpx``
propagate unchanged after being logged.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional

import httpx
import orjson

from use_api.core.config import Settings, get_settings
from use_api.core.transport import Transport
from use_api.logging_config import log_http_request, logger


class FetchResponse:
    """Response envelope over an ``httpx.Response``.

    Mirrors the parts of a fetch ``Response`` the request functions
    use: ``status_code``, ``ok`` (any 2xx status) and a lazy ``json()``.
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def ok(self) -> bool:
        return self._response.is_success

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def raw(self) -> httpx.Response:
        return self._response

    async def json(self) -> Any:
        """Decode the body as JSON.

        :raises orjson.JSONDecodeError: if the body is not valid JSON
        """
        content = await self._response.aread()
        return orjson.loads(content)


class HttpxTransport:
    """Pooled async HTTP transport.

    Instances own an ``httpx.AsyncClient``; close them with
    :meth:`aclose` or use them as an async context manager.  An already
    configured client may be passed in, in which case its own timeouts,
    limits and base URL apply instead of the settings.
    """

    def __init__(self, settings: Optional[Settings] = None,
                 client: Optional[httpx.AsyncClient] = None) -> None:
        self.settings = settings or get_settings()
        if client is None:
            client = self._build_client(self.settings)
        self._client = client

    @staticmethod
    def _build_client(settings: Settings) -> httpx.AsyncClient:
        kwargs: Dict[str, Any] = {
            "timeout": httpx.Timeout(settings.http_timeout),
            "limits": httpx.Limits(
                max_connections=settings.max_connections,
                max_keepalive_connections=settings.max_keepalive_connections,
            ),
            "follow_redirects": settings.follow_redirects,
            "http2": settings.http2,
        }
        if settings.base_url:
            kwargs["base_url"] = settings.base_url
        return httpx.AsyncClient(**kwargs)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        """Close the underlying HTTPX client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def __call__(self, url: str, options: Dict[str, Any]) -> FetchResponse:
        """Perform a single HTTP request.

        ``options`` carries ``method``, ``body`` (JSON text or ``None``)
        and ``headers``.  The response body is not read here; that is
        left to :meth:`FetchResponse.json`.
        """
        method = str(options.get("method", "GET")).upper()
        body = options.get("body")
        headers = options.get("headers") or {}
        start_time = time.perf_counter()
        log_http_request(method, str(url), headers=headers, json_body=_loggable_body(body))
        try:
            response = await self._client.request(method, url, content=body, headers=headers)
        except httpx.HTTPError as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(json.dumps({
                "event": "http_error",
                "method": method,
                "url": str(url),
                "detail": str(exc) or type(exc).__name__,
                "duration_ms": round(duration_ms, 2),
            }), exc_info=True)
            raise
        duration_ms = (time.perf_counter() - start_time) * 1000
        log_http_request(method, str(response.request.url), status=response.status_code,
                         duration_ms=duration_ms)
        return FetchResponse(response)


def _loggable_body(body: Optional[str]) -> Any:
    if body is None:
        return None
    try:
        return orjson.loads(body)
    except orjson.JSONDecodeError:
        return f"<text {len(body)} chars>"


_default_transport: Optional[Transport] = None


def get_default_transport() -> Transport:
    """Return the process-wide transport, creating an ``HttpxTransport`` on first use."""
    global _default_transport
    if _default_transport is None:
        _default_transport = HttpxTransport()
    return _default_transport


def set_default_transport(transport: Optional[Transport]) -> None:
    """Replace the process-wide transport.  ``None`` resets to lazy creation."""
    global _default_transport
    _default_transport = transport


async def close_default_transport() -> None:
    """Close the process-wide transport if it owns a connection pool."""
    global _default_transport
    transport, _default_transport = _default_transport, None
    if isinstance(transport, HttpxTransport):
        await transport.aclose()
