"""Implementation of the 'config' command."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rich.console import Console

    from vsync.config.models import VSyncConfig


def show_config(config: VSyncConfig, console: Console) -> None:
    """Print the effective configuration as JSON."""
    console.print_json(config.model_dump_json())
