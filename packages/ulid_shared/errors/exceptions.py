"""Exception types raised by the ULID codec.

All input failures derive from ``ValueError`` so generic callers can keep a
single ``except ValueError`` branch. ``InvalidLength`` is a specialization of
``InvalidULID``: a wrong-size input is one way of being a malformed ULID.
"""

from __future__ import annotations

from . import codes


class UlidError(ValueError):
    """Base type for malformed ULID input or out-of-range values."""

    code: str = codes.INVALID_ULID

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        """Return human-readable error message."""
        return self.message


class InvalidULID(UlidError):
    """Input cannot be interpreted as a ULID."""


class InvalidLength(InvalidULID):
    """Canonical text is not 26 characters or binary input is not 16 bytes."""

    code = codes.INVALID_LENGTH


class InvalidTimestamp(UlidError):
    """Timestamp does not fit the unsigned 48-bit millisecond range."""

    code = codes.INVALID_TIMESTAMP


class EntropyUnavailable(RuntimeError):
    """The secure random source failed; no weaker fallback is attempted."""

    code: str = codes.ENTROPY_UNAVAILABLE
