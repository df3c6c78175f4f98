"""
use_api package
---------------

A small async JSON client: :func:`create_client` returns ``get``,
``post``, ``put`` and ``delete`` coroutine functions that send JSON,
decode JSON, and route failures through optional recovery handlers.
"""

from use_api.clients.api import ApiClient, create_client, use_api
from use_api.clients.http_client import (
    FetchResponse,
    HttpxTransport,
    close_default_transport,
    get_default_transport,
    set_default_transport,
)
from use_api.core.errors import HTTPStatusError, UseApiError, is_unauthorized
from use_api.core.headers import DEFAULT_HEADERS

__all__ = [
    "ApiClient",
    "DEFAULT_HEADERS",
    "FetchResponse",
    "HTTPStatusError",
    "HttpxTransport",
    "UseApiError",
    "close_default_transport",
    "create_client",
    "get_default_transport",
    "is_unauthorized",
    "set_default_transport",
    "use_api",
]
