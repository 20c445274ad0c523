"""
FastAPI server — stateless signing and key API.

Every route is GET with query parameters. Parameters are validated by the
endpoint's EndpointSchema (schemas.py) before the handler runs; the handler
calls one KeyScheme operation and wraps the result in the success envelope.
Library failures are logged with full detail and reported to the caller as a
CryptoOperationError with a fixed message.
"""

from __future__ import annotations

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from wallet_signer import __version__
from wallet_signer.api_server.docs_page import render_docs_page
from wallet_signer.api_server.middleware import request_logging_middleware
from wallet_signer.api_server.responses import (
    EthKeyWalletResponse,
    EthWalletResponse,
    SignResponse,
    SuiKeyAddressResponse,
    SuiWalletResponse,
    VerifyResponse,
    error_response,
    success_response,
)
from wallet_signer.api_server.schemas import (
    ETH_KEY_TO_WALLET_SCHEMA,
    SIGN_SCHEMA,
    SUI_KEY_TO_ADDRESS_SCHEMA,
    SUI_SIGN_SCHEMA,
    SUI_VERIFY_SCHEMA,
    VERIFY_SCHEMA,
    Params,
    validated,
)
from wallet_signer.config import get_settings
from wallet_signer.core.exceptions import (
    KeyConversionError,
    SigningError,
    VerificationError,
    WalletApiError,
    WalletGenerationError,
)
from wallet_signer.crypto import EthereumScheme, KeyScheme, SuiScheme, WalletKeys, get_scheme
from wallet_signer.crypto.base import RecoveredSigner, SignedMessage
from wallet_signer.logging import get_logger

logger = get_logger(__name__)

API_TITLE = "Ethereum & SUI Wallet API"

ETHEREUM = get_scheme(EthereumScheme.name)
SUI = get_scheme(SuiScheme.name)

MSG_ETH_GENERATION_FAILED = "Error generating ETH wallet"
MSG_SUI_GENERATION_FAILED = "Error generating SUI wallet"
MSG_ETH_CONVERSION_FAILED = "Error converting ETH private key. Please ensure the private key is valid."
MSG_SUI_CONVERSION_FAILED = "Error converting SUI private key. Please ensure the private key is valid."


# -----------------------------------------------------------------------------
# Scheme-agnostic operations
# -----------------------------------------------------------------------------


def _sign(scheme: KeyScheme, private_key: str, message: str) -> SignedMessage:
    try:
        signed = scheme.sign_message(private_key, message)
    except Exception as e:
        logger.exception("sign_message_failed", scheme=scheme.name, error=str(e))
        raise SigningError() from e
    logger.info("message_signed", scheme=scheme.name, address=signed.address)
    return signed


def _verify(scheme: KeyScheme, message: str, signature: str, expected: str | None) -> RecoveredSigner:
    try:
        recovered = scheme.verify_message(message, signature, expected_address=expected)
    except Exception as e:
        logger.exception("verify_signature_failed", scheme=scheme.name, error=str(e))
        raise VerificationError() from e
    logger.info(
        "signature_verified",
        scheme=scheme.name,
        recovered_address=recovered.recovered_address,
        is_valid=recovered.is_valid,
        expected_address_given=expected is not None,
    )
    return recovered


def _key_to_wallet(scheme: KeyScheme, private_key: str, failure_message: str) -> WalletKeys:
    try:
        keys = scheme.key_to_wallet(private_key)
    except Exception as e:
        logger.exception("key_conversion_failed", scheme=scheme.name, error=str(e))
        raise KeyConversionError(failure_message) from e
    logger.info("key_converted", scheme=scheme.name, address=keys.address)
    return keys


def _generate(scheme: KeyScheme, failure_message: str) -> WalletKeys:
    try:
        keys = scheme.generate_wallet()
    except Exception as e:
        logger.exception("wallet_generation_failed", scheme=scheme.name, error=str(e))
        raise WalletGenerationError(failure_message) from e
    logger.info(
        "wallet_generated",
        scheme=scheme.name,
        address=keys.address,
        derivation_path=keys.derivation_path,
    )
    return keys


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------

app = FastAPI(
    title=API_TITLE,
    description="Message signing, signature recovery and key management for Ethereum and Sui.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.middleware("http")(request_logging_middleware)


@app.get("/sign")
def sign_message(params: Params = Depends(validated(SIGN_SCHEMA))) -> JSONResponse:
    """Sign `message` with Ethereum private key `key` (EIP-191 personal message)."""
    signed = _sign(ETHEREUM, params["key"], params["message"])
    return success_response(SignResponse.from_signed(signed))


@app.get("/verify")
def verify_signature(params: Params = Depends(validated(VERIFY_SCHEMA))) -> JSONResponse:
    """
    Recover the Ethereum address that signed `message`.

    isValid is always true once recovery succeeds, unless `address` is supplied,
    in which case it reports whether the recovered address matches it.
    """
    recovered = _verify(ETHEREUM, params["message"], params["signature"], params["address"])
    return success_response(VerifyResponse.from_recovered(recovered))


@app.get("/generate-eth")
def generate_eth_wallet() -> JSONResponse:
    """New Ethereum wallet: mnemonic + HD key at m/44'/60'/0'/0/0 (or a random key, derivationPath='random')."""
    keys = _generate(ETHEREUM, MSG_ETH_GENERATION_FAILED)
    return success_response(EthWalletResponse.from_keys(keys))


@app.get("/generate-sui")
def generate_sui_wallet() -> JSONResponse:
    """New Sui Ed25519 wallet."""
    keys = _generate(SUI, MSG_SUI_GENERATION_FAILED)
    return success_response(SuiWalletResponse.from_keys(keys))


@app.get("/eth-key-to-wallet")
def eth_key_to_wallet(params: Params = Depends(validated(ETH_KEY_TO_WALLET_SCHEMA))) -> JSONResponse:
    """Address, public key and compressed public key for an Ethereum private key."""
    keys = _key_to_wallet(ETHEREUM, params["privateKey"], MSG_ETH_CONVERSION_FAILED)
    return success_response(EthKeyWalletResponse.from_keys(keys))


@app.get("/sui-key-to-address")
def sui_key_to_address(params: Params = Depends(validated(SUI_KEY_TO_ADDRESS_SCHEMA))) -> JSONResponse:
    """Address and base64 public key for a 64 hex character Ed25519 private key."""
    keys = _key_to_wallet(SUI, params["privateKey"], MSG_SUI_CONVERSION_FAILED)
    return success_response(SuiKeyAddressResponse.from_keys(keys))


@app.get("/sui-sign")
def sui_sign_message(params: Params = Depends(validated(SUI_SIGN_SCHEMA))) -> JSONResponse:
    """Sign `message` as a Sui personal message."""
    signed = _sign(SUI, params["privateKey"], params["message"])
    return success_response(SignResponse.from_signed(signed))


@app.get("/sui-verify")
def sui_verify_signature(params: Params = Depends(validated(SUI_VERIFY_SCHEMA))) -> JSONResponse:
    """Verify a serialized Sui Ed25519 signature over a personal message."""
    recovered = _verify(SUI, params["message"], params["signature"], params["address"])
    return success_response(VerifyResponse.from_recovered(recovered))


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness check: API is up."""
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def docs_page() -> HTMLResponse:
    """HTML documentation for the API."""
    return HTMLResponse(render_docs_page(API_TITLE, __version__))


# -----------------------------------------------------------------------------
# Error envelope
# -----------------------------------------------------------------------------


@app.exception_handler(WalletApiError)
def wallet_api_error_handler(request: Request, exc: WalletApiError) -> JSONResponse:
    """{success: false, error} with the error's status code and public message."""
    if exc.status_code < 500:
        logger.info("request_rejected", status_code=exc.status_code, error=exc.message)
    return error_response(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Same envelope for routing errors (404 unknown path, 405 non-GET)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )
