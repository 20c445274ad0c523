"""
Key scheme capability interface.

A KeyScheme wraps one chain's crypto library behind four operations:
sign_message, verify_message, key_to_wallet and generate_wallet. Schemes hold
no state; every call builds fresh key objects and returns frozen values.
Library exceptions propagate unchanged; the API layer maps them to
CryptoOperationError subclasses.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

HEX_RE = re.compile(r"^[0-9a-fA-F]*$")


def is_hex(value: str) -> bool:
    return bool(HEX_RE.match(value))


def strip_0x(value: str) -> str:
    """Remove one leading 0x/0X prefix, if present."""
    return value[2:] if value[:2].lower() == "0x" else value


@dataclass(frozen=True)
class SignedMessage:
    address: str
    message: str
    signature: str


@dataclass(frozen=True)
class RecoveredSigner:
    """Result of verify_message. is_valid is False only when a check actually failed."""

    recovered_address: str
    message: str
    is_valid: bool


@dataclass(frozen=True)
class WalletKeys:
    """Key material for one wallet. Optional fields are scheme/endpoint specific."""

    address: str
    private_key: str
    public_key: str
    key_type: str
    compressed_public_key: str | None = None
    mnemonic: str | None = None
    derivation_path: str | None = None


def addresses_match(recovered: str, expected: str | None) -> bool:
    """Case-insensitive hex address compare; True when no expected address was given."""
    if expected is None:
        return True
    return strip_0x(recovered).lower() == strip_0x(expected.strip()).lower()


class KeyScheme(ABC):
    """One signature scheme (Ethereum secp256k1, Sui Ed25519)."""

    name: str
    key_type: str

    @abstractmethod
    def sign_message(self, private_key: str, message: str) -> SignedMessage:
        """Sign message with private_key; returns signer address and encoded signature."""

    @abstractmethod
    def verify_message(
        self,
        message: str,
        signature: str,
        expected_address: str | None = None,
    ) -> RecoveredSigner:
        """Recover the signer of (message, signature); raises on malformed input."""

    @abstractmethod
    def key_to_wallet(self, private_key: str) -> WalletKeys:
        """Derive address and public key(s) from a normalized private key."""

    @abstractmethod
    def generate_wallet(self) -> WalletKeys:
        """Create a fresh random wallet."""
