"""
core/errors.py
---------------

Exceptions raised by the request functions.

A non-2xx response is reduced to its status code: no body or headers
survive.  Callers that need more detail have to read the response in
their own transport before it reaches this layer.
"""

from __future__ import annotations

UNAUTHORIZED = 401


class UseApiError(Exception):
    """Base class for errors raised by ``use_api``."""


class HTTPStatusError(UseApiError):
    """A response arrived with a non-2xx status code.

    ``str(exc)`` is the decimal status code (``"401"``, ``"500"``), so
    code that compares the message keeps working, but prefer the
    ``status_code`` attribute.
    """

    def __init__(self, status_code: int) -> None:
        self.status_code = int(status_code)
        super().__init__(str(self.status_code))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code})"


def is_unauthorized(exc: BaseException) -> bool:
    """Return ``True`` for an ``HTTPStatusError`` carrying a 401 status."""
    return isinstance(exc, HTTPStatusError) and exc.status_code == UNAUTHORIZED
