"""Wire primitives shared by every message shape.

Amounts travel as decimal strings so 128-bit values survive JSON number
handling. Binary payloads travel as standard base64. Addresses are opaque
strings and are never validated here.
"""

from __future__ import annotations

import base64
import binascii
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer, WithJsonSchema

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1
UINT128_MAX = 2**128 - 1


def _unsigned(value: Any, *, maximum: int, label: str) -> int:
    """Coerce *value* into an unsigned integer no larger than *maximum*."""
    if isinstance(value, bool):
        raise ValueError(f"{label} must be an integer or decimal string, not a boolean")
    if isinstance(value, str):
        if not value or not (value.isascii() and value.isdigit()):
            raise ValueError(f"{label} must be a string of decimal digits")
        value = int(value)
    if not isinstance(value, int):
        raise ValueError(f"{label} must be an integer or decimal string")
    if value < 0 or value > maximum:
        raise ValueError(f"{label} out of range")
    return value


def _decode_binary(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        try:
            return base64.b64decode(value, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"invalid base64 payload: {exc}") from exc
    raise ValueError("binary payload must be bytes or a base64 string")


def _encode_binary(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


Uint128 = Annotated[
    int,
    BeforeValidator(lambda v: _unsigned(v, maximum=UINT128_MAX, label="Uint128")),
    PlainSerializer(str, return_type=str, when_used="json"),
    WithJsonSchema(
        {
            "type": "string",
            "description": "A string containing a 128-bit unsigned integer.",
        }
    ),
]

Uint64 = Annotated[
    int,
    BeforeValidator(lambda v: _unsigned(v, maximum=UINT64_MAX, label="Uint64")),
    PlainSerializer(str, return_type=str, when_used="json"),
    WithJsonSchema(
        {
            "type": "string",
            "description": "A string containing a 64-bit unsigned integer.",
        }
    ),
]

Binary = Annotated[
    bytes,
    BeforeValidator(_decode_binary),
    PlainSerializer(_encode_binary, return_type=str, when_used="json"),
    WithJsonSchema(
        {
            "type": "string",
            "description": "Binary data, base64 encoded on the wire.",
        }
    ),
]


class WireModel(BaseModel):
    """Frozen base for every message and response shape."""

    model_config = ConfigDict(frozen=True, extra="forbid")
