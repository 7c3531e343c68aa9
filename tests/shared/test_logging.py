"""Tests for structured logging configuration and context propagation."""

from __future__ import annotations

import io
import json
import logging
from typing import Iterator

import pytest

from packages.ulid_shared.config import LoggingSettings
from packages.ulid_shared.ids import generate
from packages.ulid_shared.logging import configure_logging, log_context

logger = logging.getLogger("ulid.test")


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Keep root handler changes local to each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _json_lines(stream: io.StringIO) -> list[dict[str, str]]:
    return [json.loads(line) for line in stream.getvalue().strip().splitlines()]


def test_json_output_includes_settings_and_scoped_context() -> None:
    """JSON lines carry core fields, settings fields, and block context."""
    stream = io.StringIO()
    configure_logging(
        LoggingSettings(level="DEBUG", json_output=True, environment="test"),
        stream=stream,
    )

    with log_context({"command": "new"}):
        logger.info("generated")
    logger.info("after")

    inside, after = _json_lines(stream)
    assert inside["message"] == "generated"
    assert inside["level"] == "INFO"
    assert inside["logger"] == "ulid.test"
    assert inside["service"] == "ulid"
    assert inside["environment"] == "test"
    assert inside["command"] == "new"
    assert "command" not in after
    assert after["service"] == "ulid"


def test_plain_output_appends_sorted_context() -> None:
    """Plain lines end with key=value context pairs; None values are skipped."""
    stream = io.StringIO()
    configure_logging(
        LoggingSettings(level="INFO", service="", environment=""), stream=stream
    )

    context = {"command": "inspect", "error_code": "INVALID_LENGTH", "ignored": None}
    with log_context(context):
        logger.warning("rejected")

    line = stream.getvalue().strip()
    assert " WARNING ulid.test rejected " in line
    assert line.endswith("command=inspect error_code=INVALID_LENGTH")


def test_nested_context_overrides_then_restores() -> None:
    """Inner blocks win for their duration and unwind on exit."""
    stream = io.StringIO()
    configure_logging(LoggingSettings(level="INFO", json_output=True), stream=stream)

    with log_context({"command": "new", "error_code": "NONE"}):
        with log_context({"error_code": "INVALID_ULID"}):
            logger.info("inner")
        logger.info("outer")

    inner, outer = _json_lines(stream)
    assert (inner["command"], inner["error_code"]) == ("new", "INVALID_ULID")
    assert (outer["command"], outer["error_code"]) == ("new", "NONE")


def test_reconfiguring_replaces_handler() -> None:
    """Repeated configuration never duplicates emitted lines."""
    stream = io.StringIO()
    configure_logging(LoggingSettings(level="INFO"), stream=io.StringIO())
    configure_logging(LoggingSettings(level="INFO"), stream=stream)

    logger.info("once")

    assert len(stream.getvalue().strip().splitlines()) == 1


def test_settings_level_filters_records() -> None:
    """The configured level drops less severe records."""
    stream = io.StringIO()
    configure_logging(LoggingSettings(level="ERROR", json_output=True), stream=stream)

    logger.warning("hidden")
    logger.error("shown")

    assert [line["message"] for line in _json_lines(stream)] == ["shown"]


def test_entropy_failure_is_logged_as_critical() -> None:
    """The generator records random-source failures before raising."""
    stream = io.StringIO()
    configure_logging(LoggingSettings(level="DEBUG", json_output=True), stream=stream)

    def broken(size: int) -> bytes:
        raise OSError("no entropy")

    with pytest.raises(RuntimeError):
        generate(entropy=broken)

    payload = _json_lines(stream)[-1]
    assert payload["level"] == "CRITICAL"
    assert payload["logger"] == "packages.ulid_shared.ids.generator"
    assert "OSError: no entropy" in payload["exception"]
