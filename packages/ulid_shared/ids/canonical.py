"""Canonical 26-character string codec.

The timestamp and random halves are encoded independently: 48 bits become
10 characters and 80 bits become 16, each left-padded with ``0``.
"""

from __future__ import annotations

from packages.ulid_shared.errors import InvalidLength, InvalidULID

from .base32 import decode_base32, encode_base32, normalize
from .constants import CANONICAL_LENGTH, RANDOM_CHARS, TIMESTAMP_CHARS
from .value import Ulid


def encode_canonical(value: Ulid) -> str:
    """Return the canonical uppercase string form of ``value``."""
    return encode_base32(value.timestamp, TIMESTAMP_CHARS) + encode_base32(
        value.random, RANDOM_CHARS
    )


def normalize_canonical(text: str) -> str:
    """Return ``text`` uppercased with non-alphabet characters removed."""
    if not isinstance(text, str):
        raise InvalidULID(f"ULID text must be str, got {type(text).__name__}")
    return normalize(text)


def decode_canonical(text: str) -> Ulid:
    """Decode a canonical ULID string, tolerating case and decoration.

    Raises ``InvalidLength`` when the normalized text is not 26 characters and
    ``InvalidTimestamp`` when the leading 10 characters overflow 48 bits.
    """
    candidate = normalize_canonical(text)
    if len(candidate) != CANONICAL_LENGTH:
        raise InvalidLength(
            f"ULID string must be exactly {CANONICAL_LENGTH} characters after "
            f"normalization, got {len(candidate)}"
        )
    return Ulid(
        timestamp=decode_base32(candidate[:TIMESTAMP_CHARS]),
        random=decode_base32(candidate[TIMESTAMP_CHARS:]),
    )
