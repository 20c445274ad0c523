"""
Wallet Signer API Python client.

Uses the requests library.

Usage:
    from wallet_signer.client import WalletSignerClient
    client = WalletSignerClient("http://localhost:3000")
    signed = client.sign("0x...", "hello")
    client.verify(signed["signature"], "hello")["recoveredAddress"]
"""

from __future__ import annotations

from typing import Any

import requests


class WalletSignerClientError(Exception):
    """Raised when the API returns {success: false, error}."""

    def __init__(self, message: str, status_code: int | None = None, response: requests.Response | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class WalletSignerClient:
    """Client for the Wallet Signer API. Methods return the envelope's data dict."""

    def __init__(self, base_url: str = "http://localhost:3000", timeout: float = 30.0, session: Any = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        query = {k: v for k, v in (params or {}).items() if v is not None}
        resp = self._session.request("GET", url, params=query, timeout=self.timeout)
        is_json = resp.headers.get("content-type", "").startswith("application/json")
        body = resp.json() if is_json else {}
        if not resp.ok or not body.get("success"):
            error = body.get("error", resp.text) if is_json else resp.text
            raise WalletSignerClientError(
                f"API error: {error}",
                status_code=resp.status_code,
                response=resp,
            )
        return body["data"]

    def sign(self, key: str, message: str) -> dict[str, Any]:
        """GET /sign: {address, message, signature}."""
        return self._get("/sign", {"key": key, "message": message})

    def verify(self, signature: str, message: str, address: str | None = None) -> dict[str, Any]:
        """GET /verify: {recoveredAddress, message, isValid}."""
        return self._get("/verify", {"signature": signature, "message": message, "address": address})

    def generate_eth(self) -> dict[str, Any]:
        return self._get("/generate-eth")

    def generate_sui(self) -> dict[str, Any]:
        return self._get("/generate-sui")

    def eth_key_to_wallet(self, private_key: str) -> dict[str, Any]:
        return self._get("/eth-key-to-wallet", {"privateKey": private_key})

    def sui_key_to_address(self, private_key: str) -> dict[str, Any]:
        return self._get("/sui-key-to-address", {"privateKey": private_key})

    def sui_sign(self, private_key: str, message: str) -> dict[str, Any]:
        return self._get("/sui-sign", {"privateKey": private_key, "message": message})

    def sui_verify(self, signature: str, message: str, address: str | None = None) -> dict[str, Any]:
        return self._get("/sui-verify", {"signature": signature, "message": message, "address": address})

    def health(self) -> bool:
        """True if GET /health reports ok."""
        resp = self._session.request("GET", f"{self.base_url}/health", timeout=self.timeout)
        return resp.ok and resp.json().get("status") == "ok"
