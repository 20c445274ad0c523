"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn wallet_signer.api_server.app:app --host 0.0.0.0 --port 3000
"""

from wallet_signer.api_server.server import app

__all__ = ["app"]
