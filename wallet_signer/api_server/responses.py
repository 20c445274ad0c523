"""
Response models and the {success, data} / {success, error} envelope.

Models use snake_case attributes and camelCase serialization aliases so the
JSON keys match the public API (privateKey, recoveredAddress, ...).
"""

from __future__ import annotations

from typing import Literal

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from wallet_signer.crypto.base import RecoveredSigner, SignedMessage, WalletKeys


class SignResponse(BaseModel):
    """GET /sign and /sui-sign data."""

    address: str = Field(..., description="Signer address")
    message: str = Field(..., description="Message as received")
    signature: str = Field(..., description="Scheme-encoded signature")

    @classmethod
    def from_signed(cls, signed: SignedMessage) -> "SignResponse":
        return cls(address=signed.address, message=signed.message, signature=signed.signature)


class VerifyResponse(BaseModel):
    """GET /verify and /sui-verify data."""

    recovered_address: str = Field(..., serialization_alias="recoveredAddress")
    message: str
    is_valid: bool = Field(..., serialization_alias="isValid")

    @classmethod
    def from_recovered(cls, recovered: RecoveredSigner) -> "VerifyResponse":
        return cls(
            recovered_address=recovered.recovered_address,
            message=recovered.message,
            is_valid=recovered.is_valid,
        )


class EthWalletResponse(BaseModel):
    """GET /generate-eth data. publicKey is the compressed 0x02/0x03 encoding."""

    address: str
    private_key: str = Field(..., serialization_alias="privateKey")
    mnemonic: str = Field(..., description="BIP-39 phrase; not the key's seed when derivationPath is 'random'")
    public_key: str = Field(..., serialization_alias="publicKey")
    derivation_path: str = Field(..., serialization_alias="derivationPath")

    @classmethod
    def from_keys(cls, keys: WalletKeys) -> "EthWalletResponse":
        return cls(
            address=keys.address,
            private_key=keys.private_key,
            mnemonic=keys.mnemonic or "",
            public_key=keys.compressed_public_key or "",
            derivation_path=keys.derivation_path or "",
        )


class EthKeyWalletResponse(BaseModel):
    """GET /eth-key-to-wallet data."""

    address: str
    private_key: str = Field(..., serialization_alias="privateKey")
    public_key: str = Field(..., serialization_alias="publicKey")
    compressed_public_key: str = Field(..., serialization_alias="compressedPublicKey")

    @classmethod
    def from_keys(cls, keys: WalletKeys) -> "EthKeyWalletResponse":
        return cls(
            address=keys.address,
            private_key=keys.private_key,
            public_key=keys.public_key,
            compressed_public_key=keys.compressed_public_key or "",
        )


class SuiWalletResponse(BaseModel):
    """GET /generate-sui data."""

    address: str
    private_key: str = Field(..., serialization_alias="privateKey")
    public_key: str = Field(..., serialization_alias="publicKey")
    key_type: Literal["Ed25519"] = Field("Ed25519", serialization_alias="keyType")

    @classmethod
    def from_keys(cls, keys: WalletKeys) -> "SuiWalletResponse":
        return cls(address=keys.address, private_key=keys.private_key, public_key=keys.public_key)


class SuiKeyAddressResponse(BaseModel):
    """GET /sui-key-to-address data."""

    address: str
    public_key: str = Field(..., serialization_alias="publicKey")
    private_key: str = Field(..., serialization_alias="privateKey")
    key_type: Literal["Ed25519"] = Field("Ed25519", serialization_alias="keyType")

    @classmethod
    def from_keys(cls, keys: WalletKeys) -> "SuiKeyAddressResponse":
        return cls(address=keys.address, public_key=keys.public_key, private_key=keys.private_key)


def success_response(data: BaseModel, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": True, "data": data.model_dump(by_alias=True)},
    )


def error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error},
    )
