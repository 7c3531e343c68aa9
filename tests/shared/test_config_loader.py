"""Tests for pydantic-settings-backed configuration loading."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from packages.ulid_shared.config import UlidSettings, load_settings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any ULID_ variables inherited from the caller's shell."""
    for key in list(os.environ):
        if key.startswith("ULID_"):
            monkeypatch.delenv(key)


def test_load_settings_uses_precedence_cascade(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Init params should override env, env should override YAML, then defaults."""
    config_file = tmp_path / "ulid.yaml"
    config_file.write_text(
        "\n".join(
            [
                "logging:",
                "  level: WARNING",
                "  environment: staging",
                "output:",
                "  format: binary",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("ULID_LOGGING__LEVEL", "ERROR")
    monkeypatch.setenv("ULID_LOGGING__SERVICE", "ids-worker")

    settings = load_settings(
        cli_params={"logging": {"level": "DEBUG"}},
        config_path=config_file,
    )

    assert isinstance(settings, UlidSettings)
    assert settings.logging.level == "DEBUG"
    assert settings.logging.service == "ids-worker"
    assert settings.logging.environment == "staging"
    assert settings.output.format == "binary"


def test_load_settings_uses_model_defaults_when_sources_missing(tmp_path: Path) -> None:
    """Settings should fall back to model defaults when env and YAML are absent."""
    settings = load_settings(config_path=tmp_path / "ulid.yaml")

    assert settings.logging.level == "WARNING"
    assert settings.logging.service == "ulid"
    assert not settings.logging.json_output
    assert settings.output.format == "canonical"
    assert not settings.output.json_output


def test_load_settings_ignores_unset_cli_params(tmp_path: Path) -> None:
    """None-valued CLI params must not mask lower-precedence sources."""
    config_file = tmp_path / "ulid.yaml"
    config_file.write_text("output:\n  json_output: true\n", encoding="utf-8")

    settings = load_settings(
        cli_params={"logging": {"level": None}, "output": {"json_output": None}},
        config_path=config_file,
    )

    assert settings.output.json_output is True
    assert settings.logging.level == "WARNING"


def test_load_settings_rejects_unknown_log_level(tmp_path: Path) -> None:
    """Log levels are validated against the standard names."""
    with pytest.raises(ValueError):
        load_settings(
            cli_params={"logging": {"level": "CHATTY"}},
            config_path=tmp_path / "ulid.yaml",
        )
