"""
Core utilities — domain exceptions shared by the schemes and the API server.
"""

from wallet_signer.core.exceptions import (  # noqa: F401
    CryptoOperationError,
    KeyConversionError,
    SigningError,
    ValidationError,
    VerificationError,
    WalletApiError,
    WalletGenerationError,
)
