"""
Application-level exceptions.

Every error the API reports is a WalletApiError carrying an HTTP status and a
public message. ValidationError is the caller's fault (400). CryptoOperationError
and its subclasses mean the library rejected the input or failed internally
(500); their message is fixed and never includes the underlying exception.
"""

from __future__ import annotations


class WalletApiError(Exception):
    """Base error: status_code + message returned as {success: false, error: message}."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(WalletApiError):
    """Missing or malformed query parameter."""

    status_code = 400
    default_message = "Invalid request"


class CryptoOperationError(WalletApiError):
    """The crypto library rejected the input or failed internally."""

    status_code = 500
    default_message = "Cryptographic operation failed"


class SigningError(CryptoOperationError):
    default_message = "Error signing message. Please ensure the private key is valid."


class VerificationError(CryptoOperationError):
    default_message = "Error verifying signature"


class WalletGenerationError(CryptoOperationError):
    default_message = "Error generating wallet"


class KeyConversionError(CryptoOperationError):
    default_message = "Error converting private key. Please ensure the private key is valid."
