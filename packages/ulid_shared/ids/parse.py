"""Polymorphic ULID parsing and timestamp extraction.

``parse_any`` accepts every shape a caller may hold and resolves it to a
``Ulid`` in a fixed order: nothing, an instant, a ``Ulid``, exactly 16 raw
bytes, then canonical text. The byte-length check runs before any text
normalization, so a 16-byte value is always read as binary.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from packages.ulid_shared.errors import InvalidTimestamp, InvalidULID

from .binary import BytesLike, decode_binary
from .canonical import decode_canonical
from .constants import BINARY_LENGTH
from .generator import EPOCH, Instant, generate
from .value import Ulid

UlidInput = Ulid | Instant | BytesLike | str | None


def parse_any(value: UlidInput = None) -> Ulid:
    """Resolve ``value`` to a ``Ulid``, generating one for absent or instant input."""
    if value is None:
        return generate()
    if isinstance(value, Ulid):
        return value
    if isinstance(value, (datetime, float)) or (
        isinstance(value, int) and not isinstance(value, bool)
    ):
        return generate(value)

    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        if len(raw) == BINARY_LENGTH:
            return decode_binary(raw)
        text = raw.decode("latin-1")
    elif isinstance(value, str):
        text = value
    else:
        raise InvalidULID(f"Unsupported ULID input type: {type(value).__name__}")

    if text == "":
        raise InvalidULID("ULID input must not be empty")
    return decode_canonical(text)


def extract_timestamp_ms(value: UlidInput) -> int:
    """Return the epoch-millisecond timestamp embedded in an existing ULID."""
    if value is None or (isinstance(value, (str, bytes, bytearray)) and not value):
        raise InvalidULID("a canonical or binary ULID is required")
    return parse_any(value).timestamp


def extract_instant(value: UlidInput) -> datetime:
    """Return the embedded timestamp as an aware UTC ``datetime``."""
    return timestamp_to_datetime(extract_timestamp_ms(value))


def timestamp_to_datetime(timestamp_ms: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC ``datetime``.

    ``datetime`` stops at year 9999 while 48-bit timestamps reach year 10889;
    later timestamps raise ``InvalidTimestamp``.
    """
    try:
        return EPOCH + timedelta(milliseconds=timestamp_ms)
    except OverflowError as exc:
        raise InvalidTimestamp(
            f"timestamp {timestamp_ms} ms is beyond the representable calendar range"
        ) from exc
