"""
Core helpers package for use_api.

This package contains the transport-independent pieces: request
execution, error recovery, default headers, typed errors and settings.
Keeping them apart from the ``httpx`` transport makes it easy to swap
the transport for testing.
"""

__all__ = []
