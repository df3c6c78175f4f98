"""
core/request.py
----------------

The single request-execution routine shared by every verb function.

``execute`` performs exactly one transport call, turns a non-2xx
envelope into :class:`~use_api.core.errors.HTTPStatusError` and decodes
the JSON body.  It does not retry, log or cache.
"""

from __future__ import annotations

import inspect
import json
from typing import Any, Dict, Optional

import orjson

from use_api.core.errors import HTTPStatusError
from use_api.core.headers import resolve_headers
from use_api.core.transport import Transport
from use_api.schemas.request import RequestSpec

NO_CONTENT = 204


def encode_body(data: Any) -> Optional[str]:
    """Serialise ``data`` to compact JSON text, or ``None`` when absent.

    Non-string dict keys are stringified.  Integers outside the 64-bit
    range are not supported by ``orjson``; such payloads go through the
    standard library encoder with the same compact separators.
    """
    if data is None:
        return None
    try:
        return orjson.dumps(data, option=orjson.OPT_NON_STR_KEYS).decode("utf-8")
    except orjson.JSONEncodeError:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def build_options(spec: RequestSpec) -> Dict[str, Any]:
    return {
        "method": spec.method.value,
        "body": encode_body(spec.body),
        "headers": resolve_headers(spec.headers),
    }


async def execute(spec: RequestSpec, transport: Transport) -> Any:
    """Send ``spec`` through ``transport`` and return the decoded body.

    :raises HTTPStatusError: if the envelope is not ok
    :return: ``{}`` for a 204 response, the decoded JSON otherwise
    """
    response = await transport(spec.path, build_options(spec))
    if not response.ok:
        raise HTTPStatusError(response.status_code)
    # 204 carries no body; the decoder is never called for it.
    if response.status_code == NO_CONTENT:
        return {}
    body = response.json()
    if inspect.isawaitable(body):
        body = await body
    return body
