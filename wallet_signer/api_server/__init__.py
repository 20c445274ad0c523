"""
API server package — HTTP interface over the key schemes.

Validates query parameters, delegates to wallet_signer.crypto, and returns the
uniform {success, data|error} JSON envelope.
"""
