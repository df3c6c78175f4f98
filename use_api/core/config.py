"""
core/config.py
----------------

Package configuration module.

Defines strongly‑typed settings loaded from the environment using
``pydantic-settings``. These settings only shape the default
``httpx`` transport and the logging helpers; the request functions
themselves take no configuration. The values provided here are
sensible defaults but can be overridden via environment variables at
deployment time.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    The settings structure is flat and uses environment variables
    prefixed with ``USE_API_``.  For example, to override the default
    request timeout you can set ``USE_API_HTTP_TIMEOUT=15``.

    See :class:`pydantic_settings.BaseSettings` for details on how
    environment variables are mapped onto fields.
    """

    # HTTP transport settings
    http_timeout: float = Field(10.0, gt=0, description="Hard timeout for HTTP requests in seconds.")
    base_url: Optional[str] = Field(None, description="Base URL joined with relative request paths.")
    follow_redirects: bool = Field(True, description="Follow 3xx redirects in the default transport, as fetch does.")
    http2: bool = Field(False, description="Negotiate HTTP/2 in the default transport.")

    # Connection pool
    max_connections: int = Field(100, ge=1, description="Maximum number of concurrent connections.")
    max_keepalive_connections: int = Field(20, ge=0, description="Maximum number of idle keep-alive connections.")

    log_level: str = Field("INFO", description="Level applied by logging_config.configure_logging().")

    model_config = SettingsConfigDict(env_prefix="USE_API_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the settings.

    Using a cache prevents environment parsing on every transport
    construction. Call ``get_settings.cache_clear()`` after changing
    the environment to pick up new values.
    """
    return Settings()
