"""
Crypto capability providers: one KeyScheme per supported chain.

Schemes are stateless, so a single instance of each is shared by all requests.
"""

from __future__ import annotations

from wallet_signer.crypto.base import KeyScheme, RecoveredSigner, SignedMessage, WalletKeys
from wallet_signer.crypto.ethereum import EthereumScheme
from wallet_signer.crypto.sui import SuiScheme

SCHEMES: dict[str, KeyScheme] = {
    EthereumScheme.name: EthereumScheme(),
    SuiScheme.name: SuiScheme(),
}


def get_scheme(name: str) -> KeyScheme:
    """Return the scheme registered under name ("ethereum" | "sui")."""
    try:
        return SCHEMES[name]
    except KeyError:
        raise ValueError(f"Unknown key scheme: {name}") from None


__all__ = [
    "EthereumScheme",
    "KeyScheme",
    "RecoveredSigner",
    "SCHEMES",
    "SignedMessage",
    "SuiScheme",
    "WalletKeys",
    "get_scheme",
]
