"""
logging_config.py
------------------

Shared logging configuration and utilities for structured logging in
``use_api``.  It uses Python's built‑in ``logging`` module so that log
output can be captured by standard logging handlers or external
systems.  Messages are serialised as JSON to make them easier to parse
downstream.

Only the default ``httpx`` transport logs; the request functions
returned by :func:`use_api.create_client` never do.  Applications that
want the package's output on stdout call :func:`configure_logging`
once at start-up.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Mapping, Optional, Union

from use_api.core.config import get_settings

# Headers never written to the logs.
SENSITIVE_HEADERS = frozenset({"authorization", "proxy-authorization", "cookie", "set-cookie"})

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

# Library logger.  A NullHandler keeps the package silent until the
# host application configures logging.
logger = logging.getLogger("use_api")
logger.addHandler(logging.NullHandler())

# Stream handler installed by configure_logging(), if any.
_stream_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """Send ``use_api`` log records to stdout.

    The level defaults to ``Settings.log_level``.  Calling this more
    than once replaces the previously installed stream handler instead
    of stacking duplicates.
    """
    global _stream_handler
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()
    if _stream_handler is not None:
        logger.removeHandler(_stream_handler)
    _stream_handler = logging.StreamHandler(sys.stdout)
    _stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_stream_handler)
    logger.setLevel(level)


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries have keys containing 'token', 'password' or 'secret'
    removed.  Lists and tuples are processed element‑wise.  Byte
    strings are replaced with a size marker.  Anything that is not JSON
    serialisable falls back to its ``str``.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, Mapping):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in ("token", "password", "secret")):
                continue
            clean[str(k)] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def redact_headers(headers: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``headers`` without credential-bearing entries."""
    return {k: v for k, v in headers.items() if str(k).lower() not in SENSITIVE_HEADERS}


def log_http_request(method: str, url: str, *, headers: Optional[Mapping[str, Any]] = None,
                     json_body: Any = None, status: Optional[int] = None,
                     duration_ms: Optional[float] = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    This helper centralises HTTP request logging so that credentials
    are automatically removed from headers and only high‑level
    information (method, URL, status and duration) is recorded.  The
    default transport invokes it before and after each exchange.

    Parameters
    ----------
    method : str
        The HTTP method (GET, POST, etc.)
    url : str
        The URL being requested.
    headers : mapping, optional
        Request headers.  Sensitive keys are removed.
    json_body : any, optional
        Decoded request payload.  Sensitive keys are removed.
    status : int, optional
        Response status code (log end only).
    duration_ms : float, optional
        Time taken in milliseconds (log end only).
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = _sanitize(redact_headers(headers))
    if json_body is not None:
        data["json"] = _sanitize(json_body)
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
