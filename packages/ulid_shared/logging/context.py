"""Per-invocation fields attached to every log record.

Values live in a ``ContextVar``, so threads and tasks each see only what
their own ``log_context`` blocks added.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import Iterator, Mapping

_FIELDS: ContextVar[Mapping[str, str]] = ContextVar(
    "ulid_log_fields", default=MappingProxyType({})
)


def current_context() -> Mapping[str, str]:
    """Return the fields bound by the enclosing ``log_context`` blocks."""
    return _FIELDS.get()


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Add ``values`` to the log fields until the block exits.

    Inner blocks extend and override outer ones. ``None`` values are skipped
    and everything else is stored as ``str``.
    """
    merged = dict(_FIELDS.get())
    merged.update(
        (str(key), str(value)) for key, value in values.items() if value is not None
    )
    token = _FIELDS.set(MappingProxyType(merged))
    try:
        yield
    finally:
        _FIELDS.reset(token)
