"""
Pytest tests for the HTTP API (FastAPI TestClient): envelopes, status codes,
validation messages and failure isolation.
"""

from __future__ import annotations

import base64
import re

import pytest

from wallet_signer.crypto.ethereum import ETH_DERIVATION_PATH, EthereumScheme
from wallet_signer.crypto.sui import SuiScheme

KEY_ONE = "0x" + "00" * 31 + "01"
KEY_ONE_ADDRESS = "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"
RFC_SECRET = "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
RFC_PUBLIC = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"

HEX64 = re.compile(r"^[0-9a-f]{64}$")
ETH_ADDRESS = re.compile(r"^0x[0-9a-fA-F]{40}$")
SUI_ADDRESS = re.compile(r"^0x[0-9a-f]{64}$")


def _error(response) -> str:
    body = response.json()
    assert body["success"] is False
    assert set(body) == {"success", "error"}
    return body["error"]


# -----------------------------------------------------------------------------
# /sign and /verify
# -----------------------------------------------------------------------------


def test_sign_then_verify_roundtrip(client):
    r = client.get("/sign", params={"key": KEY_ONE, "message": "hello world"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")
    body = r.json()
    assert body["success"] is True
    data = body["data"]
    assert data["address"] == KEY_ONE_ADDRESS
    assert data["message"] == "hello world"
    assert set(data) == {"address", "message", "signature"}

    v = client.get("/verify", params={"signature": data["signature"], "message": "hello world"})
    assert v.status_code == 200
    assert v.json() == {
        "success": True,
        "data": {"recoveredAddress": KEY_ONE_ADDRESS, "message": "hello world", "isValid": True},
    }


def test_sign_accepts_key_without_prefix(client):
    r = client.get("/sign", params={"key": KEY_ONE[2:], "message": "m"})
    assert r.status_code == 200
    assert r.json()["data"]["address"] == KEY_ONE_ADDRESS


@pytest.mark.parametrize(
    "params",
    [{"key": KEY_ONE}, {"message": "hi"}, {}, {"key": "", "message": "hi"}],
)
def test_sign_missing_params_is_400(client, params):
    r = client.get("/sign", params=params)
    assert r.status_code == 400
    assert _error(r) == "Private key and message are required"


def test_sign_invalid_key_is_500_with_fixed_message(client):
    r = client.get("/sign", params={"key": "not-a-key", "message": "hi"})
    assert r.status_code == 500
    error = _error(r)
    assert error == "Error signing message. Please ensure the private key is valid."
    assert "not-a-key" not in error


def test_verify_missing_params_is_400(client):
    r = client.get("/verify", params={"signature": "0xabc"})
    assert r.status_code == 400
    assert _error(r) == "Message and signature are required"


def test_verify_garbage_signature_is_500_and_server_keeps_serving(client):
    r = client.get("/verify", params={"signature": "garbage", "message": "hi"})
    assert r.status_code == 500
    assert _error(r) == "Error verifying signature"
    assert client.get("/health").json() == {"status": "ok"}


def test_verify_with_expected_address(client):
    signature = client.get("/sign", params={"key": KEY_ONE, "message": "m"}).json()["data"]["signature"]
    match = client.get("/verify", params={"signature": signature, "message": "m", "address": KEY_ONE_ADDRESS.lower()})
    assert match.json()["data"]["isValid"] is True
    other = "0x" + "22" * 20
    mismatch = client.get("/verify", params={"signature": signature, "message": "m", "address": other})
    assert mismatch.status_code == 200
    assert mismatch.json()["data"]["isValid"] is False
    assert mismatch.json()["data"]["recoveredAddress"] == KEY_ONE_ADDRESS


def test_verify_malformed_expected_address_is_400(client):
    r = client.get("/verify", params={"signature": "0xabc", "message": "m", "address": "nope"})
    assert r.status_code == 400


# -----------------------------------------------------------------------------
# /generate-eth and /generate-sui
# -----------------------------------------------------------------------------


def test_generate_eth_twice_gives_distinct_wallets(client):
    first = client.get("/generate-eth").json()["data"]
    second = client.get("/generate-eth").json()["data"]
    for data in (first, second):
        assert set(data) == {"address", "privateKey", "mnemonic", "publicKey", "derivationPath"}
        assert ETH_ADDRESS.match(data["address"])
        assert data["privateKey"].startswith("0x") and len(data["privateKey"]) == 66
        assert data["publicKey"][:4] in ("0x02", "0x03") and len(data["publicKey"]) == 68
        assert len(data["mnemonic"].split()) == 12
        assert data["derivationPath"] in (ETH_DERIVATION_PATH, "random")
    assert first["address"] != second["address"]
    assert first["privateKey"] != second["privateKey"]
    assert first["mnemonic"] != second["mnemonic"]


def test_generate_eth_key_matches_key_to_wallet(client):
    data = client.get("/generate-eth").json()["data"]
    converted = client.get("/eth-key-to-wallet", params={"privateKey": data["privateKey"]}).json()["data"]
    assert converted["address"] == data["address"]
    assert converted["compressedPublicKey"] == data["publicKey"]
    assert converted["publicKey"].startswith("0x04")


def test_generate_eth_fallback_reports_random_path(client, monkeypatch):
    def boom(self, phrase, path=ETH_DERIVATION_PATH):
        raise RuntimeError("hd derivation unavailable")

    monkeypatch.setattr(EthereumScheme, "wallet_from_mnemonic", boom)
    r = client.get("/generate-eth")
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["derivationPath"] == "random"
    assert len(data["mnemonic"].split()) == 12
    assert data["publicKey"][:4] in ("0x02", "0x03") and len(data["publicKey"]) == 68


def test_generate_eth_total_failure_is_500(client, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("no entropy")

    monkeypatch.setattr(EthereumScheme, "wallet_from_mnemonic", boom)
    monkeypatch.setattr(EthereumScheme, "random_wallet", boom)
    r = client.get("/generate-eth")
    assert r.status_code == 500
    assert _error(r) == "Error generating ETH wallet"


def test_generate_sui_shape(client):
    r = client.get("/generate-sui")
    assert r.status_code == 200
    data = r.json()["data"]
    assert set(data) == {"address", "privateKey", "publicKey", "keyType"}
    assert HEX64.match(data["privateKey"])
    assert SUI_ADDRESS.match(data["address"])
    assert data["keyType"] == "Ed25519"
    assert len(base64.b64decode(data["publicKey"])) == 32

    converted = client.get("/sui-key-to-address", params={"privateKey": data["privateKey"]}).json()["data"]
    assert converted["address"] == data["address"]
    assert converted["publicKey"] == data["publicKey"]


def test_generate_sui_failure_is_500(client, monkeypatch):
    def boom(self):
        raise RuntimeError("keypair backend down")

    monkeypatch.setattr(SuiScheme, "generate_wallet", boom)
    r = client.get("/generate-sui")
    assert r.status_code == 500
    assert _error(r) == "Error generating SUI wallet"


# -----------------------------------------------------------------------------
# /eth-key-to-wallet
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("key", [KEY_ONE, KEY_ONE[2:]])
def test_eth_key_to_wallet(client, key):
    r = client.get("/eth-key-to-wallet", params={"privateKey": key})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["address"] == KEY_ONE_ADDRESS
    assert data["privateKey"] == KEY_ONE
    assert data["publicKey"].startswith("0x04")
    assert data["compressedPublicKey"] == "0x0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"


def test_eth_key_to_wallet_missing_is_400(client):
    r = client.get("/eth-key-to-wallet")
    assert r.status_code == 400
    assert _error(r) == "Private key is required"


@pytest.mark.parametrize("key", ["a" * 65, "0x" + "a" * 63, "0x" + "g" * 64])
def test_eth_key_to_wallet_bad_format_is_400(client, key):
    r = client.get("/eth-key-to-wallet", params={"privateKey": key})
    assert r.status_code == 400
    assert _error(r) == "Invalid private key format. Expected 64 hex characters (with or without 0x prefix)."


def test_eth_key_to_wallet_library_failure_is_500(client, monkeypatch):
    def boom(self, private_key):
        raise ValueError("key out of range")

    monkeypatch.setattr(EthereumScheme, "key_to_wallet", boom)
    r = client.get("/eth-key-to-wallet", params={"privateKey": KEY_ONE})
    assert r.status_code == 500
    assert _error(r) == "Error converting ETH private key. Please ensure the private key is valid."


# -----------------------------------------------------------------------------
# /sui-key-to-address, /sui-sign, /sui-verify
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("key", [RFC_SECRET, "0x" + RFC_SECRET])
def test_sui_key_to_address(client, key):
    r = client.get("/sui-key-to-address", params={"privateKey": key})
    assert r.status_code == 200
    data = r.json()["data"]
    assert list(data) == ["address", "publicKey", "privateKey", "keyType"]
    assert data["privateKey"] == RFC_SECRET
    assert base64.b64decode(data["publicKey"]).hex() == RFC_PUBLIC
    assert SUI_ADDRESS.match(data["address"])
    assert data["keyType"] == "Ed25519"


def test_sui_key_to_address_is_deterministic(client):
    a = client.get("/sui-key-to-address", params={"privateKey": RFC_SECRET}).json()["data"]
    b = client.get("/sui-key-to-address", params={"privateKey": RFC_SECRET}).json()["data"]
    assert a == b


def test_sui_key_to_address_short_key_is_400(client):
    r = client.get("/sui-key-to-address", params={"privateKey": "0x" + "a" * 63})
    assert r.status_code == 400
    assert _error(r) == "Invalid private key length. Expected 64 hex characters for Ed25519."


def test_sui_key_to_address_non_hex_is_400(client):
    r = client.get("/sui-key-to-address", params={"privateKey": "z" * 64})
    assert r.status_code == 400
    assert _error(r) == "Invalid private key format. Expected 64 hex characters for Ed25519."


def test_key_conversion_does_not_trim_whitespace(client):
    eth = client.get("/eth-key-to-wallet", params={"privateKey": " " + "a" * 64})
    assert eth.status_code == 400
    assert _error(eth) == "Invalid private key format. Expected 64 hex characters (with or without 0x prefix)."
    sui = client.get("/sui-key-to-address", params={"privateKey": " " + "a" * 64})
    assert sui.status_code == 400
    assert _error(sui) == "Invalid private key length. Expected 64 hex characters for Ed25519."


def test_sui_key_to_address_missing_is_400(client):
    r = client.get("/sui-key-to-address", params={"privateKey": ""})
    assert r.status_code == 400
    assert _error(r) == "Private key is required"


def test_sui_sign_then_verify(client):
    signed = client.get("/sui-sign", params={"privateKey": RFC_SECRET, "message": "gm"})
    assert signed.status_code == 200
    data = signed.json()["data"]
    address = client.get("/sui-key-to-address", params={"privateKey": RFC_SECRET}).json()["data"]["address"]
    assert data["address"] == address

    ok = client.get("/sui-verify", params={"signature": data["signature"], "message": "gm"}).json()["data"]
    assert ok == {"recoveredAddress": address, "message": "gm", "isValid": True}

    bad = client.get("/sui-verify", params={"signature": data["signature"], "message": "gn"}).json()["data"]
    assert bad["isValid"] is False


def test_sui_verify_garbage_is_500(client):
    r = client.get("/sui-verify", params={"signature": "%%%", "message": "gm"})
    assert r.status_code == 500
    assert _error(r) == "Error verifying signature"


# -----------------------------------------------------------------------------
# Router, docs, middleware
# -----------------------------------------------------------------------------


def test_docs_page_lists_endpoints(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    for path in ("/sign", "/verify", "/generate-eth", "/generate-sui", "/eth-key-to-wallet", "/sui-key-to-address"):
        assert path in r.text


def test_docs_page_has_try_it_forms(client):
    page = client.get("/").text
    assert "<h2>Try it</h2>" in page
    assert "async function tryEndpoint(form)" in page
    assert page.count("<form ") == 8
    assert '<form id="try-sign" data-path="/sign"' in page
    assert '<input name="key" autocomplete="off" required>' in page
    # optional address field on verify
    assert '<input name="address" autocomplete="off">' in page
    assert '<form id="try-generate-eth" data-path="/generate-eth"' in page


def test_unknown_path_uses_error_envelope(client):
    r = client.get("/does-not-exist")
    assert r.status_code == 404
    assert _error(r) == "Not Found"


def test_post_not_allowed(client):
    r = client.post("/sign", params={"key": KEY_ONE, "message": "m"})
    assert r.status_code == 405
    assert r.json() == {"success": False, "error": "Method Not Allowed"}


def test_request_id_header(client):
    r = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert r.headers["X-Request-ID"] == "abc123"
    generated = client.get("/health").headers["X-Request-ID"]
    assert re.match(r"^[0-9a-f]{32}$", generated)
