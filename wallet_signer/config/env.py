"""
Environment variable loading and validation for the Wallet Signer API.

- PORT: listening port (default: 3000)
- API_HOST: bind address (default: 0.0.0.0)
- LOG_LEVEL / LOG_FORMAT: structlog level and renderer (json | console)
- CORS_ORIGINS: comma-separated allowed origins (default: *)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

# Project root: config is wallet_signer/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"
LOG_FORMATS = ("json", "console")


def load_signer_env() -> None:
    """Load .env from project root. Safe to call multiple times; real env vars win."""
    from dotenv import load_dotenv

    load_dotenv(_ENV_PATH, override=False)


def get_port() -> int:
    """
    Return PORT from env, or DEFAULT_PORT when unset or blank.
    Raises ValueError for anything that is not a TCP port number.
    """
    load_signer_env()
    raw = (os.getenv("PORT") or "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError as e:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from e
    if not 0 < port < 65536:
        raise ValueError(f"PORT out of range: {port}")
    return port


def get_api_host() -> str:
    load_signer_env()
    return (os.getenv("API_HOST") or DEFAULT_HOST).strip() or DEFAULT_HOST


def get_log_level() -> str:
    load_signer_env()
    return (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL


def get_log_format() -> str:
    """Return LOG_FORMAT (json | console). Unknown values fall back to json."""
    load_signer_env()
    raw = (os.getenv("LOG_FORMAT") or DEFAULT_LOG_FORMAT).strip().lower()
    return raw if raw in LOG_FORMATS else DEFAULT_LOG_FORMAT


def get_cors_origins() -> list[str]:
    """
    Return CORS_ORIGINS as a list. Default: ["*"] (any origin, as the
    browser demo page on / is often opened from another host).
    """
    load_signer_env()
    raw = (os.getenv("CORS_ORIGINS") or "*").strip()
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]
