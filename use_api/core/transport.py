"""
core/transport.py
------------------

Structural types for the network boundary.

A transport is any async callable ``transport(url, options)`` returning
a response envelope.  ``options`` is a plain dict with ``method``,
``body`` (JSON text or ``None``) and ``headers``.  The default
implementation lives in :mod:`use_api.clients.http_client`; tests and
applications may inject their own.
"""

from __future__ import annotations

from typing import Any, Awaitable, Dict, Protocol, Union


class ResponseEnvelope(Protocol):
    """Read-only view of a response before its body is decoded."""

    status_code: int
    ok: bool

    def json(self) -> Union[Any, Awaitable[Any]]:
        ...


class Transport(Protocol):
    async def __call__(self, url: str, options: Dict[str, Any]) -> ResponseEnvelope:
        ...
