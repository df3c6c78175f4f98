"""
schemas/request.py
-------------------

Pydantic model describing one outbound request.  A ``RequestSpec`` is
built by each verb function, handed to :func:`use_api.core.request.execute`
and discarded once the call settles.  Path, payload and headers are
carried verbatim: this layer validates none of them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class RequestSpec(BaseModel):
    path: Any
    method: HttpMethod
    body: Any = None
    headers: Optional[Any] = None

    model_config = ConfigDict(frozen=True)
