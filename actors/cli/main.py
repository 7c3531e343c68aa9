"""ULID CLI actor implemented with Typer."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable

import typer
from pydantic import ValidationError

from packages.ulid_shared.config import load_settings
from packages.ulid_shared.errors import (
    EntropyUnavailable,
    UlidError,
    exception_to_error,
)
from packages.ulid_shared.ids import (
    Ulid,
    encode_binary,
    encode_canonical,
    extract_timestamp_ms,
    generate,
    parse_any,
)
from packages.ulid_shared.ids.parse import timestamp_to_datetime
from packages.ulid_shared.logging import configure_logging, log_context
from packages.ulid_shared.logging import fields

logger = logging.getLogger(__name__)

SUCCESS_EXIT_CODE = 0
INVALID_INPUT_EXIT_CODE = 3
ENTROPY_EXIT_CODE = 4


class OutputFormat(str, Enum):
    """Supported renderings for generated ULIDs."""

    CANONICAL = "canonical"
    BINARY = "binary"


@dataclass(frozen=True)
class CliConfig:
    """Global CLI runtime options shared by every command."""

    as_json: bool
    output_format: OutputFormat


def _emit_output(result: Any, as_json: bool) -> None:
    """Render command output in requested format."""
    if as_json:
        typer.echo(json.dumps(result, sort_keys=True, separators=(",", ":")))
        return
    if isinstance(result, dict):
        width = max(len(key) for key in result)
        for key, value in result.items():
            typer.echo(f"{key.ljust(width)}  {value}")
        return
    typer.echo(str(result))


def _emit_error(exc: Exception, as_json: bool) -> None:
    """Render a normalized error to stderr."""
    detail = exception_to_error(exc)
    if as_json:
        payload = {"error": {"code": detail.code, "message": detail.message}}
        typer.echo(json.dumps(payload, sort_keys=True), err=True)
        return
    typer.echo(f"error: {detail.message}", err=True)


def _run_command(cfg: CliConfig, command: str, invoke: Callable[[], Any]) -> None:
    """Execute one command and map outputs/errors to process semantics."""
    with log_context({fields.COMMAND: command}):
        logger.debug("running command")
        try:
            result = invoke()
        except UlidError as exc:
            with log_context({fields.ERROR_CODE: exc.code}):
                logger.info("rejected ULID input")
            _emit_error(exc, cfg.as_json)
            raise typer.Exit(code=INVALID_INPUT_EXIT_CODE) from exc
        except EntropyUnavailable as exc:
            logger.error("entropy unavailable")
            _emit_error(exc, cfg.as_json)
            raise typer.Exit(code=ENTROPY_EXIT_CODE) from exc

    _emit_output(result, cfg.as_json)
    raise typer.Exit(code=SUCCESS_EXIT_CODE)


def _require_config(ctx: typer.Context) -> CliConfig:
    """Return required CLI config from Typer context."""
    config = ctx.obj
    if not isinstance(config, CliConfig):
        raise RuntimeError("CLI configuration not initialized")
    return config


def _parse_at(value: str) -> datetime:
    """Parse an ISO-8601 ``--at`` value."""
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"not an ISO-8601 datetime: {value}") from exc


def _read_value(value: str, as_hex: bool) -> str | bytes:
    """Return CLI input as canonical text or decoded binary."""
    if not as_hex:
        return value
    try:
        return bytes.fromhex(value)
    except ValueError as exc:
        raise typer.BadParameter(f"not a hex string: {value}") from exc


def _render(value: Ulid, output_format: OutputFormat) -> str:
    """Render one ULID in the requested output format."""
    if output_format is OutputFormat.BINARY:
        return encode_binary(value).hex()
    return encode_canonical(value)


def _describe(value: Ulid) -> dict[str, Any]:
    """Return every representation of ``value``."""
    return {
        "canonical": encode_canonical(value),
        "binary": encode_binary(value).hex(),
        "timestamp_ms": value.timestamp,
        "instant": _isoformat(value.timestamp),
    }


def _isoformat(timestamp_ms: int) -> str:
    return timestamp_to_datetime(timestamp_ms).isoformat(timespec="milliseconds")


app = typer.Typer(no_args_is_help=True, help="Generate and inspect ULIDs")


@app.callback()
def main(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Emit JSON output"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level for stderr diagnostics"
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        envvar="ULID_CONFIG_PATH",
        help="Settings YAML file (defaults to ~/.config/ulid/ulid.yaml)",
    ),
) -> None:
    """Resolve settings and configure logging for all commands."""
    try:
        settings = load_settings(
            cli_params={
                "logging": {"level": log_level.upper() if log_level else None},
                "output": {"json_output": True if as_json else None},
            },
            config_path=config,
        )
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    configure_logging(settings.logging, stream=sys.stderr)
    ctx.obj = CliConfig(
        as_json=settings.output.json_output,
        output_format=OutputFormat(settings.output.format),
    )


@app.command("new")
def new_command(
    ctx: typer.Context,
    at: str | None = typer.Option(None, "--at", help="ISO-8601 instant to embed"),
    ms: int | None = typer.Option(None, "--ms", help="Epoch milliseconds to embed"),
    output_format: OutputFormat | None = typer.Option(
        None, "--format", case_sensitive=False, help="Output format"
    ),
) -> None:
    """Generate a new ULID."""
    cfg = _require_config(ctx)
    if at is not None and ms is not None:
        raise typer.BadParameter("use either --at or --ms, not both")

    instant: datetime | int | None = _parse_at(at) if at is not None else ms
    chosen = output_format or cfg.output_format
    _run_command(cfg, "new", lambda: _render(generate(instant), chosen))


@app.command("date")
def date_command(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Canonical ULID, or hex with --hex"),
    as_hex: bool = typer.Option(False, "--hex", help="Read VALUE as binary hex"),
) -> None:
    """Print the instant embedded in a ULID."""
    cfg = _require_config(ctx)
    raw = _read_value(value, as_hex)
    _run_command(cfg, "date", lambda: _isoformat(extract_timestamp_ms(raw)))


@app.command("inspect")
def inspect_command(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Canonical ULID, or hex with --hex"),
    as_hex: bool = typer.Option(False, "--hex", help="Read VALUE as binary hex"),
) -> None:
    """Print every representation of a ULID."""
    cfg = _require_config(ctx)
    raw = _read_value(value, as_hex)
    _run_command(cfg, "inspect", lambda: _describe(parse_any(raw)))


if __name__ == "__main__":
    app()
