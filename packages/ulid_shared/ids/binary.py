"""Fixed 16-byte big-endian binary codec.

Field layout, most significant first::

    4 bytes  timestamp bits 47..16
    2 bytes  timestamp bits 15..0
    2 bytes  random bits 79..64
    4 bytes  random bits 63..32
    4 bytes  random bits 31..0
"""

from __future__ import annotations

import struct

from packages.ulid_shared.errors import InvalidLength, InvalidULID

from .constants import BINARY_LENGTH
from .value import Ulid

BytesLike = bytes | bytearray | memoryview

_LAYOUT = struct.Struct(">IHHII")
_MASK_16 = 0xFFFF
_MASK_32 = 0xFFFFFFFF


def encode_binary(value: Ulid) -> bytes:
    """Return the 16-byte storage form of ``value``."""
    return _LAYOUT.pack(
        value.timestamp >> 16,
        value.timestamp & _MASK_16,
        value.random >> 64,
        (value.random >> 32) & _MASK_32,
        value.random & _MASK_32,
    )


def decode_binary(data: BytesLike) -> Ulid:
    """Decode exactly 16 bytes into a ``Ulid``."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidULID(f"ULID binary must be bytes-like, got {type(data).__name__}")
    raw = bytes(data)
    if len(raw) != BINARY_LENGTH:
        raise InvalidLength(
            f"ULID bytes must be exactly {BINARY_LENGTH} bytes, got {len(raw)}"
        )

    ts_high, ts_low, rand_high, rand_mid, rand_low = _LAYOUT.unpack(raw)
    return Ulid(
        timestamp=(ts_high << 16) | ts_low,
        random=(rand_high << 64) | (rand_mid << 32) | rand_low,
    )
