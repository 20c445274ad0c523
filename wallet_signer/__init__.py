"""
Wallet Signer — stateless HTTP API for wallet keys and message signatures.

Exposes signing, signature recovery, key generation and key-to-address
conversion for Ethereum (secp256k1) and Sui (Ed25519). All cryptography is
delegated to eth-account, eth-keys, mnemonic and solders; this package only
validates input, calls the scheme, and shapes the JSON envelope.
"""

__version__ = "0.1.0"
