"""
clients/api.py
---------------

Factory for the verb-scoped request functions.

``create_client`` returns an :class:`ApiClient` holding four coroutine
functions that share one pair of recovery handlers::

    get, post, put, delete = create_client(on_unauthorized=redirect_to_login)
    todo = await get("https://example.com/todos/1")

Each call sends one request, decodes the JSON response and, on failure,
runs the recovery chain: a 401 goes to ``on_unauthorized`` first, and
anything still unhandled goes to ``on_error``.  Without handlers the
exception reaches the caller.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Mapping, NamedTuple, Optional

from use_api.clients.http_client import get_default_transport
from use_api.core.recovery import Handler, build_recovery_chain
from use_api.core.request import execute
from use_api.core.transport import Transport
from use_api.schemas.request import HttpMethod, RequestSpec

Headers = Optional[Mapping[str, Any]]


class ApiClient(NamedTuple):
    get: Callable[..., Awaitable[Any]]
    post: Callable[..., Awaitable[Any]]
    put: Callable[..., Awaitable[Any]]
    delete: Callable[..., Awaitable[Any]]


def create_client(on_unauthorized: Optional[Handler] = None,
                  on_error: Optional[Handler] = None,
                  *,
                  transport: Optional[Transport] = None) -> ApiClient:
    """Return the four request functions bound to the given handlers.

    :param on_unauthorized: called with the error of a 401 response; its
        return value becomes the result of the call
    :param on_error: called with any error not handled above; its return
        value becomes the result of the call
    :param transport: fetch-like callable; when omitted the process-wide
        default transport is looked up on every call
    :return: ``ApiClient(get, post, put, delete)``
    """
    chain = build_recovery_chain(on_unauthorized, on_error)

    async def send(method: HttpMethod, path: Any, data: Any, headers: Headers) -> Any:
        try:
            spec = RequestSpec(path=path, method=method, body=data, headers=headers)
            active = transport if transport is not None else get_default_transport()
            return await execute(spec, active)
        except Exception as exc:
            return await chain.recover(exc)

    async def get(path: Any, headers: Headers = None) -> Any:
        return await send(HttpMethod.GET, path, None, headers)

    async def post(path: Any, data: Any = None, headers: Headers = None) -> Any:
        return await send(HttpMethod.POST, path, data, headers)

    async def put(path: Any, data: Any = None, headers: Headers = None) -> Any:
        return await send(HttpMethod.PUT, path, data, headers)

    async def delete(path: Any, headers: Headers = None) -> Any:
        return await send(HttpMethod.DELETE, path, None, headers)

    return ApiClient(get=get, post=post, put=put, delete=delete)


use_api = create_client
