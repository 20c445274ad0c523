"""
Structured logging for the Wallet Signer API.

JSON logs with timestamp, level, event_type and logger name.
Use get_logger() in every module; never pass key material or messages as fields.
"""

from wallet_signer.logging.logger import bind_request, get_logger

__all__ = ["bind_request", "get_logger"]
