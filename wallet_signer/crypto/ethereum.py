"""
Ethereum (secp256k1) key scheme.

- Signing: EIP-191 personal message (encode_defunct) via eth-account.
- Recovery: Account.recover_message returns the checksummed signer address.
- Keys: eth-keys for the uncompressed (0x04...) and compressed public key.
- Wallet generation: BIP-39 mnemonic (mnemonic package), BIP-44 derivation at
  m/44'/60'/0'/0/0 via eth-account's HD wallet support.
"""

from __future__ import annotations

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_keys import keys
from eth_utils import is_address
from mnemonic import Mnemonic

from wallet_signer.crypto.base import (
    KeyScheme,
    RecoveredSigner,
    SignedMessage,
    WalletKeys,
    addresses_match,
    is_hex,
)
from wallet_signer.logging import get_logger

logger = get_logger(__name__)

ETH_DERIVATION_PATH = "m/44'/60'/0'/0/0"
RANDOM_DERIVATION_PATH = "random"
ETH_PRIVATE_KEY_LEN = 66  # 0x + 64 hex
MNEMONIC_LANGUAGE = "english"
MNEMONIC_STRENGTH = 128  # 12 words

Account.enable_unaudited_hdwallet_features()

_MNEMO = Mnemonic(MNEMONIC_LANGUAGE)


def generate_mnemonic(strength: int = MNEMONIC_STRENGTH) -> str:
    """Return a fresh BIP-39 English phrase (12 words at the default strength)."""
    return _MNEMO.generate(strength=strength)


def normalize_eth_private_key(value: str) -> str:
    """Prefix 0x when missing. Does not validate or trim."""
    return value if value.startswith("0x") else "0x" + value


def is_eth_private_key(value: str) -> bool:
    """True for 0x + exactly 64 hex digits."""
    return len(value) == ETH_PRIVATE_KEY_LEN and value.startswith("0x") and is_hex(value[2:])


def _hex(raw: bytes) -> str:
    return "0x" + bytes(raw).hex()


def public_keys(private_key: bytes) -> tuple[str, str]:
    """Return (uncompressed 0x04..., compressed 0x02/0x03...) public key hex."""
    public_key = keys.PrivateKey(private_key).public_key
    return _hex(b"\x04" + public_key.to_bytes()), _hex(public_key.to_compressed_bytes())


class EthereumScheme(KeyScheme):
    name = "ethereum"
    key_type = "secp256k1"

    def sign_message(self, private_key: str, message: str) -> SignedMessage:
        account = Account.from_key(private_key)
        signed = account.sign_message(encode_defunct(text=message))
        return SignedMessage(
            address=account.address,
            message=message,
            signature=_hex(signed.signature),
        )

    def verify_message(
        self,
        message: str,
        signature: str,
        expected_address: str | None = None,
    ) -> RecoveredSigner:
        """
        Recover the signer address. Recovery succeeds for any well-formed
        signature, so is_valid is True unless expected_address is given and differs.
        """
        recovered = Account.recover_message(encode_defunct(text=message), signature=signature)
        return RecoveredSigner(
            recovered_address=recovered,
            message=message,
            is_valid=addresses_match(recovered, expected_address),
        )

    def key_to_wallet(self, private_key: str) -> WalletKeys:
        account = Account.from_key(private_key)
        public_key, compressed = public_keys(bytes(account.key))
        return WalletKeys(
            address=account.address,
            private_key=private_key,
            public_key=public_key,
            key_type=self.key_type,
            compressed_public_key=compressed,
        )

    def wallet_from_mnemonic(self, phrase: str, path: str = ETH_DERIVATION_PATH) -> WalletKeys:
        """Derive the HD account at path from a BIP-39 phrase."""
        account = Account.from_mnemonic(phrase, account_path=path)
        public_key, compressed = public_keys(bytes(account.key))
        return WalletKeys(
            address=account.address,
            private_key=_hex(account.key),
            public_key=public_key,
            key_type=self.key_type,
            compressed_public_key=compressed,
            mnemonic=phrase,
            derivation_path=path,
        )

    def random_wallet(self) -> WalletKeys:
        """
        Independent random key plus a fresh phrase. The phrase is NOT the seed
        of the key; derivation_path="random" marks this.
        """
        phrase = generate_mnemonic()
        account = Account.create()
        public_key, compressed = public_keys(bytes(account.key))
        return WalletKeys(
            address=account.address,
            private_key=_hex(account.key),
            public_key=public_key,
            key_type=self.key_type,
            compressed_public_key=compressed,
            mnemonic=phrase,
            derivation_path=RANDOM_DERIVATION_PATH,
        )

    def generate_wallet(self) -> WalletKeys:
        """HD wallet from a new mnemonic; falls back to random_wallet() if derivation fails."""
        try:
            return self.wallet_from_mnemonic(generate_mnemonic())
        except Exception as e:
            logger.warning("eth_hd_derivation_failed", error=str(e), fallback=RANDOM_DERIVATION_PATH)
        return self.random_wallet()


def is_eth_address(value: str) -> bool:
    """True for a 0x-prefixed 20-byte hex address (any casing)."""
    return value.startswith("0x") and is_address(value)
