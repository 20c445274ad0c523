"""
Application settings and environment configuration.

Responsibilities:
- Collect configuration from environment variables and .env files.
- Validate settings once and provide defaults for optional ones.
- Expose typed settings (host, port, log level, CORS origins) to the
  API server and the process entrypoint.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from wallet_signer.config import env


@dataclass(frozen=True)
class Settings:
    """Resolved process configuration."""

    api_host: str
    port: int
    log_level: str
    log_format: str
    cors_origins: tuple[str, ...]


def load_settings() -> Settings:
    """Build Settings from the current environment (no caching)."""
    return Settings(
        api_host=env.get_api_host(),
        port=env.get_port(),
        log_level=env.get_log_level(),
        log_format=env.get_log_format(),
        cors_origins=tuple(env.get_cors_origins()),
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the current application settings.

    Cached for the life of the process; tests call get_settings.cache_clear()
    after changing the environment.
    """
    return load_settings()
