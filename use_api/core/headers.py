"""
core/headers.py
----------------

Default HTTP headers sent with every request and the rule that decides
which headers actually go on the wire.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType({
    "Content-Type": "application/json",
    "Accept": "application/json",
})


def resolve_headers(headers: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return the headers to send for a request.

    Caller-supplied headers replace the defaults entirely; they are not
    merged, so a caller passing only ``Authorization`` sends no
    ``Accept`` or ``Content-Type``.  Without caller headers a fresh copy
    of :data:`DEFAULT_HEADERS` is returned so the transport can never
    mutate the shared constant.
    """
    if headers is None:
        return dict(DEFAULT_HEADERS)
    return dict(headers)
