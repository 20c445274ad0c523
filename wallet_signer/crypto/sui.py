"""
Sui (Ed25519) key scheme on solders keypairs.

- Private key: 32-byte Ed25519 seed, 64 hex chars (no prefix).
- Public key: raw 32 bytes, base64.
- Address: 0x + hex(blake2b-256(0x00 flag || pubkey)).
- Personal message signature: base64(0x00 || ed25519(digest) || pubkey), where
  digest = blake2b-256(intent [3, 0, 0] || bcs(vector<u8> message)).
"""

from __future__ import annotations

import base64
import hashlib

from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from wallet_signer.crypto.base import (
    KeyScheme,
    RecoveredSigner,
    SignedMessage,
    WalletKeys,
    addresses_match,
    is_hex,
    strip_0x,
)

ED25519_FLAG = 0x00
ED25519_KEY_TYPE = "Ed25519"
SUI_PRIVATE_KEY_HEX_LEN = 64
PUBLIC_KEY_LEN = 32
SIGNATURE_LEN = 64
SERIALIZED_SIGNATURE_LEN = 1 + SIGNATURE_LEN + PUBLIC_KEY_LEN  # 97
# IntentScope::PersonalMessage, IntentVersion::V0, AppId::Sui
PERSONAL_MESSAGE_INTENT = bytes([3, 0, 0])


def normalize_sui_private_key(value: str) -> str:
    """Strip a leading 0x. Does not validate or trim."""
    return strip_0x(value)


def is_sui_address(value: str) -> bool:
    body = strip_0x(value)
    return value.startswith("0x") and len(body) == 64 and is_hex(body)


def sui_address(public_key: bytes) -> str:
    """Sui address for an Ed25519 public key."""
    digest = hashlib.blake2b(bytes([ED25519_FLAG]) + public_key, digest_size=32)
    return "0x" + digest.hexdigest()


def _uleb128(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def personal_message_digest(message: bytes) -> bytes:
    """blake2b-256 over the personal message intent and the BCS-encoded bytes."""
    payload = PERSONAL_MESSAGE_INTENT + _uleb128(len(message)) + message
    return hashlib.blake2b(payload, digest_size=32).digest()


def _wallet_keys(keypair: Keypair) -> WalletKeys:
    public_key = bytes(keypair.pubkey())
    return WalletKeys(
        address=sui_address(public_key),
        private_key=bytes(keypair.secret()).hex(),
        public_key=base64.b64encode(public_key).decode("ascii"),
        key_type=ED25519_KEY_TYPE,
    )


def keypair_from_hex(private_key: str) -> Keypair:
    """Build the keypair from a 64-char hex seed."""
    seed = bytes.fromhex(private_key)
    if len(seed) != 32:
        raise ValueError(f"Ed25519 seed must be 32 bytes, got {len(seed)}")
    return Keypair.from_seed(seed)


class SuiScheme(KeyScheme):
    name = "sui"
    key_type = ED25519_KEY_TYPE

    def sign_message(self, private_key: str, message: str) -> SignedMessage:
        keypair = keypair_from_hex(private_key)
        public_key = bytes(keypair.pubkey())
        signature = keypair.sign_message(personal_message_digest(message.encode("utf-8")))
        serialized = bytes([ED25519_FLAG]) + bytes(signature) + public_key
        return SignedMessage(
            address=sui_address(public_key),
            message=message,
            signature=base64.b64encode(serialized).decode("ascii"),
        )

    def verify_message(
        self,
        message: str,
        signature: str,
        expected_address: str | None = None,
    ) -> RecoveredSigner:
        """
        Decode a serialized Ed25519 signature and verify it against message.
        Raises ValueError for malformed signatures; a well-formed signature that
        does not verify yields is_valid=False.
        """
        raw = base64.b64decode(signature, validate=True)
        if len(raw) != SERIALIZED_SIGNATURE_LEN:
            raise ValueError(f"serialized signature must be {SERIALIZED_SIGNATURE_LEN} bytes, got {len(raw)}")
        if raw[0] != ED25519_FLAG:
            raise ValueError(f"unsupported signature scheme flag {raw[0]:#04x}")
        sig = Signature.from_bytes(raw[1 : 1 + SIGNATURE_LEN])
        public_key = raw[1 + SIGNATURE_LEN :]
        address = sui_address(public_key)
        verified = sig.verify(
            Pubkey.from_bytes(public_key),
            personal_message_digest(message.encode("utf-8")),
        )
        return RecoveredSigner(
            recovered_address=address,
            message=message,
            is_valid=bool(verified) and addresses_match(address, expected_address),
        )

    def key_to_wallet(self, private_key: str) -> WalletKeys:
        keys = _wallet_keys(keypair_from_hex(private_key))
        # echo the caller's key as given (after prefix strip)
        return WalletKeys(
            address=keys.address,
            private_key=private_key,
            public_key=keys.public_key,
            key_type=keys.key_type,
        )

    def generate_wallet(self) -> WalletKeys:
        return _wallet_keys(Keypair())
