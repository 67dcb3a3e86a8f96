"""CLI command implementations."""

from __future__ import annotations

from vsync.cli.commands.config import show_config
from vsync.cli.commands.run import run_release

__all__ = ["run_release", "show_config"]
