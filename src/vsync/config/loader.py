"""Configuration loading from vsync.toml.

The file mirrors the layout of :class:`~vsync.config.models.VSyncConfig`::

    changelog_path = "CHANGELOG.md"

    [triggers]
    major = ["break", "major"]
    minor = ["feat"]
    patch = ["fix"]

    [generator]
    tags = true
    changelog = true
    autocommit = false
    autocommit_message = "chore[VSync]: changelog updated"

    [version]
    tag_prefix = "v"

Command line flags are applied on top of the file as overrides.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from vsync.config.models import VSyncConfig
from vsync.exceptions import ConfigNotFoundError, ConfigValidationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "vsync.toml"


def find_config_file(start: Path | None = None) -> Path | None:
    """Find vsync.toml in a directory.

    Args:
        start: Directory to look in (defaults to the current directory)

    Returns:
        Path to the config file, or None if there is none
    """
    directory = start or Path.cwd()
    candidate = directory / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_toml(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Parsed TOML as dictionary

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}", cause=e) from e


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(
    path: Path | None = None,
    *,
    overrides: dict[str, Any] | None = None,
    required: bool = False,
) -> VSyncConfig:
    """Load configuration from vsync.toml.

    A missing config file is not an error unless ``required`` is set; the
    defaults are used instead.

    Args:
        path: Path to the config file (defaults to ./vsync.toml)
        overrides: Nested values applied on top of the file, e.g. CLI flags
        required: Raise if the config file does not exist

    Returns:
        Validated configuration

    Raises:
        ConfigNotFoundError: If ``required`` and the file doesn't exist
        ConfigValidationError: If the configuration is invalid
    """
    config_path = path
    if config_path is None:
        config_path = find_config_file() or Path.cwd() / CONFIG_FILENAME

    data: dict[str, Any] = {}
    if config_path.is_file():
        data = load_toml(config_path)
        logger.debug("Loaded configuration from %s", config_path)
    elif required:
        raise ConfigNotFoundError(f"Config file not found: {config_path}")
    else:
        logger.debug("Config file %s not found, using default values", config_path)

    if overrides:
        data = _deep_merge(data, overrides)

    try:
        return VSyncConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}", cause=e) from e
