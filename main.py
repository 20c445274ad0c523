"""
Main entrypoint: run the Wallet Signer API with uvicorn.

Env: PORT (default 3000), API_HOST (default 0.0.0.0), LOG_LEVEL, LOG_FORMAT,
CORS_ORIGINS. A .env file in the project root is loaded when present.

Equivalent: uvicorn wallet_signer.api_server.app:app --host 0.0.0.0 --port 3000
"""

# Configure structured JSON logging before other imports that may log
from wallet_signer.logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Resolve settings, then serve the FastAPI app in the main thread."""
    from wallet_signer.config import get_settings

    settings = get_settings()

    from wallet_signer.api_server.app import app
    import uvicorn

    logger.info("main_server_starting", host=settings.api_host, port=settings.port)
    uvicorn.run(app, host=settings.api_host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
