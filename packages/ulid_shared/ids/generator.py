"""Fresh ULID generation from the current or a supplied instant."""

from __future__ import annotations

import logging
import math
import secrets
import time
from datetime import UTC, datetime, timedelta
from typing import Callable

from packages.ulid_shared.errors import EntropyUnavailable, InvalidTimestamp

from .constants import MAX_TIMESTAMP, RANDOM_BYTES
from .value import Ulid

logger = logging.getLogger(__name__)

EntropySource = Callable[[int], bytes]
Instant = datetime | int | float

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def generate(
    instant: Instant | None = None, *, entropy: EntropySource | None = None
) -> Ulid:
    """Generate a new ULID.

    ``instant`` may be a ``datetime`` or a count of epoch milliseconds;
    when omitted the current wall-clock time is used. The random part is
    80 bits read from ``entropy`` (``secrets.token_bytes`` by default).
    """
    timestamp = current_timestamp_ms() if instant is None else instant_to_ms(instant)
    return Ulid(timestamp=timestamp, random=random_bits(entropy))


def current_timestamp_ms() -> int:
    """Return the current wall-clock time in whole epoch milliseconds."""
    return time.time_ns() // 1_000_000


def instant_to_ms(instant: Instant) -> int:
    """Convert an instant to epoch milliseconds within the 48-bit range.

    Sub-millisecond precision, from a datetime or a fractional float, is
    truncated toward the earlier millisecond. Naive datetimes are read as UTC.
    """
    if isinstance(instant, datetime):
        if instant.utcoffset() is None:
            instant = instant.replace(tzinfo=UTC)
        timestamp = (instant - EPOCH) // _ONE_MILLISECOND
    elif isinstance(instant, int) and not isinstance(instant, bool):
        timestamp = instant
    elif isinstance(instant, float) and math.isfinite(instant):
        timestamp = math.floor(instant)
    else:
        raise InvalidTimestamp(
            "ULID instant must be a datetime or finite epoch milliseconds, "
            f"got {instant!r}"
        )

    if not 0 <= timestamp <= MAX_TIMESTAMP:
        raise InvalidTimestamp(
            f"timestamp {timestamp} ms is outside the ULID 48-bit range"
        )
    return timestamp


def random_bits(entropy: EntropySource | None = None) -> int:
    """Return 80 uniformly random bits as an unsigned integer."""
    source = entropy if entropy is not None else secrets.token_bytes
    try:
        raw = source(RANDOM_BYTES)
    except (OSError, NotImplementedError) as exc:
        logger.critical("secure random source unavailable", exc_info=True)
        raise EntropyUnavailable("secure random source unavailable") from exc

    if not isinstance(raw, (bytes, bytearray)) or len(raw) != RANDOM_BYTES:
        raise EntropyUnavailable(
            f"entropy source must return exactly {RANDOM_BYTES} bytes"
        )
    return int.from_bytes(raw, byteorder="big", signed=False)
