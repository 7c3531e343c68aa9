"""SQLAlchemy helpers for storing ULIDs in their 16-byte binary form."""

from __future__ import annotations

from typing import Any

from sqlalchemy import CheckConstraint, Column, LargeBinary
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from .api import require_ulid_bytes, ulid_str_to_bytes
from .binary import decode_binary, encode_binary
from .constants import BINARY_LENGTH
from .value import Ulid

ULID_BYTES_LENGTH = BINARY_LENGTH


class UlidBinary(TypeDecorator[Ulid]):
    """Column type binding ``Ulid`` values to fixed 16-byte storage.

    Bound parameters may be a ``Ulid``, a canonical string, or raw 16 bytes;
    loaded rows always come back as ``Ulid``.
    """

    impl = LargeBinary(ULID_BYTES_LENGTH)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> bytes | None:
        """Encode one bound value to its storage bytes."""
        if value is None:
            return None
        if isinstance(value, Ulid):
            return encode_binary(value)
        if isinstance(value, str):
            return ulid_str_to_bytes(value)
        return require_ulid_bytes(value)

    def process_result_value(self, value: Any, dialect: Dialect) -> Ulid | None:
        """Decode stored bytes back into a ``Ulid``."""
        if value is None:
            return None
        return decode_binary(value)


def ulid_primary_key_column(
    name: str = "id",
    *,
    length_constraint_name: str | None = None,
) -> Column[Ulid]:
    """Return a standard ULID primary-key column definition.

    The column stores 16 bytes and carries a CHECK constraint enforcing that
    size at the database layer.
    """
    constraint = ulid_length_check(
        name,
        length_constraint_name or f"ck_{name}_ulid_16",
    )
    return Column(name, UlidBinary(), constraint, primary_key=True, nullable=False)


def ulid_length_check(column_name: str, constraint_name: str) -> CheckConstraint:
    """Return a CHECK constraint enforcing fixed 16-byte ULID storage."""
    return CheckConstraint(
        f"octet_length({column_name}) = {ULID_BYTES_LENGTH}",
        name=constraint_name,
    )
