"""Root logger setup driven by ``LoggingSettings``.

Records go to one stream handler as either newline-delimited JSON or a plain
line with ``key=value`` context. Service and environment from the settings
are stamped on every record alongside the ``log_context`` fields.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, Mapping, TextIO

from packages.ulid_shared.config import LoggingSettings

from . import fields
from .context import current_context

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_PLAIN_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


class ContextFilter(logging.Filter):
    """Set ``record.context`` from static fields plus the active log context."""

    def __init__(self, static_fields: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self.static_fields = dict(static_fields or {})

    def filter(self, record: logging.LogRecord) -> bool:
        record.context = {**self.static_fields, **current_context()}
        return True


class RecordFormatter(logging.Formatter):
    """Render a record, with its context, as JSON or as a plain line."""

    def __init__(self, *, json_output: bool) -> None:
        super().__init__(fmt=_PLAIN_FORMAT, datefmt=_PLAIN_DATEFMT)
        self.json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        context: Mapping[str, str] = getattr(record, "context", {})
        if self.json_output:
            return self._format_json(record, context)

        line = super().format(record)
        if context:
            line += " " + " ".join(f"{key}={context[key]}" for key in sorted(context))
        return line

    def _format_json(self, record: logging.LogRecord, context: Mapping[str, str]) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
            **context,
        }
        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


def configure_logging(
    settings: LoggingSettings, *, stream: TextIO | None = None
) -> logging.Handler:
    """Install a single root handler for ``settings`` and return it.

    Existing root handlers are removed, so repeated calls never duplicate
    output. ``stream`` defaults to stdout.
    """
    static_fields = {
        key: value
        for key, value in (
            (fields.SERVICE, settings.service),
            (fields.ENVIRONMENT, settings.environment),
        )
        if value
    }

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.addFilter(ContextFilter(static_fields))
    handler.setFormatter(RecordFormatter(json_output=settings.json_output))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(settings.level)
    return handler
