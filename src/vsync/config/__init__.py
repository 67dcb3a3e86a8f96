"""Configuration management for vsync."""

from __future__ import annotations

from vsync.config.loader import find_config_file, load_config, load_toml
from vsync.config.models import (
    DEFAULT_AUTOCOMMIT_MESSAGE,
    GeneratorConfig,
    TriggersConfig,
    VersionConfig,
    VSyncConfig,
)

__all__ = [
    "DEFAULT_AUTOCOMMIT_MESSAGE",
    "GeneratorConfig",
    "TriggersConfig",
    "VSyncConfig",
    "VersionConfig",
    "find_config_file",
    "load_config",
    "load_toml",
]
