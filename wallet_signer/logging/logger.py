"""
Log pipeline for the signer service.

Every line carries event_type, level, logger, a UTC timestamp and, inside a
request, the request_id bound by the HTTP middleware. Fields that could hold
key material (private keys, mnemonics, raw messages) are masked before
rendering, so a careless logger.info(..., private_key=...) never leaks.

Level and renderer come from LOG_LEVEL / LOG_FORMAT through
wallet_signer.config.env, the only wallet_signer import allowed here.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

from wallet_signer.config.env import get_log_format, get_log_level

REDACTED = "[redacted]"
SECRET_FIELDS = frozenset({"key", "private_key", "privateKey", "mnemonic", "message", "seed"})


def _stamp_utc(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _event_to_event_type(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog's positional 'event' becomes event_type; message mirrors it unless given."""
    if "event_type" not in event_dict and "event" in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "event_type" in event_dict:
        event_dict.setdefault("message", str(event_dict["event_type"]))
    return event_dict


def _mask_secrets(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for field in SECRET_FIELDS.intersection(event_dict):
        event_dict[field] = REDACTED
    return event_dict


def build_processors(log_format: str) -> list[Any]:
    """Processor chain ending in the JSON renderer, or the console renderer for local runs."""
    renderer: Any
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _mask_secrets,
        _stamp_utc,
        _event_to_event_type,
        renderer,
    ]


def configure_logging(level: str | None = None, log_format: str | None = None) -> None:
    level_name = (level or get_log_level()).upper()
    structlog.configure(
        processors=build_processors(log_format or get_log_format()),
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level_name, logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Logger bound to the module name.

        logger = get_logger(__name__)
        logger.info("wallet_generated", scheme="sui", derivation_path="random")

    renders as {"scheme": "sui", "derivation_path": "random", "logger": "...",
    "level": "info", "timestamp": "...", "event_type": "wallet_generated", ...}
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_request(request_id: str, **fields: Any) -> None:
    """Replace the contextvars with this request's id and fields."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, **fields)
