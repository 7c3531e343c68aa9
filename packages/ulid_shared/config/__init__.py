"""Public API for ULID tooling configuration."""

from .loader import load_settings
from .models import DEFAULT_CONFIG_PATH, LoggingSettings, OutputSettings, UlidSettings

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "LoggingSettings",
    "OutputSettings",
    "UlidSettings",
    "load_settings",
]
