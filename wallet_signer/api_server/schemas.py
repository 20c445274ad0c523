"""
Declarative query-parameter schemas, one per endpoint.

Each EndpointSchema lists its ParamSpecs (name, required, normalizer, format
checks). validated(schema) turns a schema into a FastAPI dependency, so every
route is validated the same way before its handler runs. A parameter that is
absent or empty counts as missing.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from wallet_signer.core.exceptions import ValidationError
from wallet_signer.crypto.base import is_hex
from wallet_signer.crypto.ethereum import is_eth_address, is_eth_private_key, normalize_eth_private_key
from wallet_signer.crypto.sui import (
    SUI_PRIVATE_KEY_HEX_LEN,
    is_sui_address,
    normalize_sui_private_key,
)

Params = dict[str, Optional[str]]
Check = tuple[Callable[[str], bool], str]

MSG_KEY_AND_MESSAGE_REQUIRED = "Private key and message are required"
MSG_MESSAGE_AND_SIGNATURE_REQUIRED = "Message and signature are required"
MSG_PRIVATE_KEY_REQUIRED = "Private key is required"
MSG_ETH_KEY_FORMAT = "Invalid private key format. Expected 64 hex characters (with or without 0x prefix)."
MSG_SUI_KEY_LENGTH = "Invalid private key length. Expected 64 hex characters for Ed25519."
MSG_SUI_KEY_FORMAT = "Invalid private key format. Expected 64 hex characters for Ed25519."
MSG_ETH_ADDRESS_FORMAT = "Invalid address format. Expected 0x followed by 40 hex characters."
MSG_SUI_ADDRESS_FORMAT = "Invalid address format. Expected 0x followed by 64 hex characters."


@dataclass(frozen=True)
class ParamSpec:
    """One query parameter: presence, normalization, then ordered format checks."""

    name: str
    required: bool = True
    normalize: Callable[[str], str] | None = None
    checks: tuple[Check, ...] = ()


@dataclass(frozen=True)
class EndpointSchema:
    params: tuple[ParamSpec, ...]
    missing_message: str
    name: str = ""

    def validate(self, query: Mapping[str, str]) -> Params:
        """
        Return {name: normalized value} for every declared param (None for absent
        optional params). Raises ValidationError with missing_message if any
        required param is absent, else with the first failing check's message.
        """
        raw = {spec.name: query.get(spec.name) or None for spec in self.params}
        if any(spec.required and raw[spec.name] is None for spec in self.params):
            raise ValidationError(self.missing_message)
        values: Params = {}
        for spec in self.params:
            value = raw[spec.name]
            if value is not None:
                if spec.normalize is not None:
                    value = spec.normalize(value)
                for predicate, message in spec.checks:
                    if not predicate(value):
                        raise ValidationError(message)
            values[spec.name] = value
        return values


def validated(schema: EndpointSchema) -> Callable[[Request], Params]:
    """FastAPI dependency factory: validate request.query_params against schema."""

    def dependency(request: Request) -> Params:
        return schema.validate(request.query_params)

    dependency.__name__ = f"validate_{schema.name or 'params'}"
    return dependency


# -----------------------------------------------------------------------------
# Shared param specs
# -----------------------------------------------------------------------------

MESSAGE = ParamSpec("message")
SIGNATURE = ParamSpec("signature")

ETH_PRIVATE_KEY = ParamSpec(
    "privateKey",
    normalize=normalize_eth_private_key,
    checks=((is_eth_private_key, MSG_ETH_KEY_FORMAT),),
)

SUI_PRIVATE_KEY = ParamSpec(
    "privateKey",
    normalize=normalize_sui_private_key,
    checks=(
        (lambda v: len(v) == SUI_PRIVATE_KEY_HEX_LEN, MSG_SUI_KEY_LENGTH),
        (is_hex, MSG_SUI_KEY_FORMAT),
    ),
)

ETH_EXPECTED_ADDRESS = ParamSpec(
    "address",
    required=False,
    normalize=str.strip,
    checks=((is_eth_address, MSG_ETH_ADDRESS_FORMAT),),
)

SUI_EXPECTED_ADDRESS = ParamSpec(
    "address",
    required=False,
    normalize=str.strip,
    checks=((is_sui_address, MSG_SUI_ADDRESS_FORMAT),),
)

# -----------------------------------------------------------------------------
# Endpoint schemas
# -----------------------------------------------------------------------------

SIGN_SCHEMA = EndpointSchema(
    name="sign",
    params=(ParamSpec("key"), MESSAGE),
    missing_message=MSG_KEY_AND_MESSAGE_REQUIRED,
)

VERIFY_SCHEMA = EndpointSchema(
    name="verify",
    params=(SIGNATURE, MESSAGE, ETH_EXPECTED_ADDRESS),
    missing_message=MSG_MESSAGE_AND_SIGNATURE_REQUIRED,
)

ETH_KEY_TO_WALLET_SCHEMA = EndpointSchema(
    name="eth_key_to_wallet",
    params=(ETH_PRIVATE_KEY,),
    missing_message=MSG_PRIVATE_KEY_REQUIRED,
)

SUI_KEY_TO_ADDRESS_SCHEMA = EndpointSchema(
    name="sui_key_to_address",
    params=(SUI_PRIVATE_KEY,),
    missing_message=MSG_PRIVATE_KEY_REQUIRED,
)

SUI_SIGN_SCHEMA = EndpointSchema(
    name="sui_sign",
    params=(SUI_PRIVATE_KEY, MESSAGE),
    missing_message=MSG_KEY_AND_MESSAGE_REQUIRED,
)

SUI_VERIFY_SCHEMA = EndpointSchema(
    name="sui_verify",
    params=(SIGNATURE, MESSAGE, SUI_EXPECTED_ADDRESS),
    missing_message=MSG_MESSAGE_AND_SIGNATURE_REQUIRED,
)
