"""ULID generation and conversion.

Canonical strings are 26 Crockford base32 characters; binary values are 16
big-endian bytes. Both carry the same 48-bit millisecond timestamp and 80-bit
random part.
"""

from packages.ulid_shared.ids.api import (
    binary_ulid,
    require_ulid_bytes,
    ulid,
    ulid_bytes_to_str,
    ulid_date,
    ulid_str_to_bytes,
)
from packages.ulid_shared.ids.binary import decode_binary, encode_binary
from packages.ulid_shared.ids.canonical import (
    decode_canonical,
    encode_canonical,
    normalize_canonical,
)
from packages.ulid_shared.ids.constants import (
    BINARY_LENGTH,
    CANONICAL_LENGTH,
    CROCKFORD_ALPHABET,
)
from packages.ulid_shared.ids.generator import generate, instant_to_ms
from packages.ulid_shared.ids.parse import (
    UlidInput,
    extract_instant,
    extract_timestamp_ms,
    parse_any,
)
from packages.ulid_shared.ids.value import Ulid

__all__ = [
    "BINARY_LENGTH",
    "CANONICAL_LENGTH",
    "CROCKFORD_ALPHABET",
    "Ulid",
    "UlidInput",
    "binary_ulid",
    "decode_binary",
    "decode_canonical",
    "encode_binary",
    "encode_canonical",
    "extract_instant",
    "extract_timestamp_ms",
    "generate",
    "instant_to_ms",
    "normalize_canonical",
    "parse_any",
    "require_ulid_bytes",
    "ulid",
    "ulid_bytes_to_str",
    "ulid_date",
    "ulid_str_to_bytes",
]
