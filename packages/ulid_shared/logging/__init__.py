"""Structured logging on top of the standard ``logging`` module."""

from .config import ContextFilter, RecordFormatter, configure_logging
from .context import log_context

__all__ = [
    "ContextFilter",
    "RecordFormatter",
    "configure_logging",
    "log_context",
]
