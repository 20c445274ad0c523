"""
Configuration management for the Wallet Signer API.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for host, port, logging and CORS.
"""

from wallet_signer.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
