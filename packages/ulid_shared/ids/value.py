"""The ULID value type: a validated 48-bit timestamp and 80-bit random pair."""

from __future__ import annotations

from dataclasses import dataclass

from packages.ulid_shared.errors import InvalidTimestamp, InvalidULID

from .constants import MAX_RANDOM, MAX_TIMESTAMP, RANDOM_BITS, ULID_BITS


@dataclass(frozen=True, order=True, slots=True)
class Ulid:
    """One immutable ULID.

    Field order matches bit significance, so the generated ordering compares
    values exactly like their 128-bit integers and canonical strings.
    """

    timestamp: int
    random: int

    def __post_init__(self) -> None:
        """Reject components outside their unsigned bit widths."""
        if not _is_int(self.timestamp) or not 0 <= self.timestamp <= MAX_TIMESTAMP:
            raise InvalidTimestamp(
                f"ULID timestamp must be an integer in [0, 2**48), got {self.timestamp!r}"
            )
        if not _is_int(self.random) or not 0 <= self.random <= MAX_RANDOM:
            raise InvalidULID(
                f"ULID random part must be an integer in [0, 2**80), got {self.random!r}"
            )

    @classmethod
    def from_int(cls, number: int) -> Ulid:
        """Split an unsigned 128-bit integer into timestamp and random parts."""
        if not _is_int(number) or number < 0 or number >> ULID_BITS:
            raise InvalidULID("ULID integer must be in the unsigned 128-bit range")
        return cls(timestamp=number >> RANDOM_BITS, random=number & MAX_RANDOM)

    def __int__(self) -> int:
        """Return the combined unsigned 128-bit integer."""
        return (self.timestamp << RANDOM_BITS) | self.random


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
