"""Convenience functions over the ULID codec.

``ulid``, ``binary_ulid`` and ``ulid_date`` accept the same inputs as
``parse_any``, so each one doubles as a generator and a converter::

    ulid()                  # new canonical ULID
    ulid(binary_value)      # binary -> canonical
    binary_ulid(text)       # canonical -> binary
    ulid_date(text)         # embedded instant
"""

from __future__ import annotations

from datetime import datetime

from packages.ulid_shared.errors import InvalidLength

from .binary import BytesLike, decode_binary, encode_binary
from .canonical import decode_canonical, encode_canonical
from .constants import BINARY_LENGTH
from .parse import UlidInput, extract_instant, parse_any


def ulid(value: UlidInput = None) -> str:
    """Return the canonical string for ``value`` or for a new ULID."""
    return encode_canonical(parse_any(value))


def binary_ulid(value: UlidInput = None) -> bytes:
    """Return the 16-byte binary form for ``value`` or for a new ULID."""
    return encode_binary(parse_any(value))


def ulid_date(value: UlidInput) -> datetime:
    """Return the instant embedded in a canonical or binary ULID."""
    return extract_instant(value)


def ulid_str_to_bytes(value: str) -> bytes:
    """Convert a canonical ULID string into 16-byte big-endian form."""
    return encode_binary(decode_canonical(value))


def ulid_bytes_to_str(value: BytesLike) -> str:
    """Convert 16-byte big-endian ULID into its canonical string."""
    return encode_canonical(decode_binary(value))


def require_ulid_bytes(value: object, *, field_name: str = "id") -> bytes:
    """Validate and normalize a value as 16-byte ULID binary."""
    if isinstance(value, (bytes, bytearray)) and len(value) == BINARY_LENGTH:
        return bytes(value)
    raise InvalidLength(f"{field_name} must be {BINARY_LENGTH}-byte ULID binary")
