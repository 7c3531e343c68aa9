"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/ulid/ulid.yaml
4) Model defaults

Environment variable format:
- Prefix: ``ULID_``
- Nested keys: ``__`` separator
- Example: ``ULID_LOGGING__LEVEL=DEBUG`` -> ``logging.level = "DEBUG"``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from pydantic_settings import SettingsConfigDict

from .models import UlidSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> UlidSettings:
    """Resolve ``UlidSettings`` from every configured source.

    ``config_path`` replaces the default YAML location; a missing file is
    treated as empty.
    """
    settings_cls = UlidSettings
    if config_path is not None:
        settings_cls = _with_yaml_file(Path(config_path))
    return settings_cls(**_drop_none(dict(cli_params or {})))


def _with_yaml_file(path: Path) -> type[UlidSettings]:
    """Return a settings subclass reading YAML from ``path``."""

    class _FileScopedSettings(UlidSettings):
        model_config = SettingsConfigDict(yaml_file=path)

    return _FileScopedSettings


def _drop_none(values: dict[str, Any]) -> dict[str, Any]:
    """Remove unset CLI params so lower-precedence sources still apply."""
    output: dict[str, Any] = {}
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            nested = _drop_none(dict(value))
            if nested:
                output[key] = nested
            continue
        output[key] = value
    return output
