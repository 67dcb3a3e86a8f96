"""Command line interface for vsync."""

from vsync.cli.main import app

__all__ = ["app"]
