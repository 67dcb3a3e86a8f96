"""CLI entry point for vsync.

Running ``vsync`` without a subcommand performs a release run with the
configured stages. Flags override the values from ``vsync.toml``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from vsync import __version__
from vsync.cli.commands import run_release, show_config
from vsync.config import VSyncConfig, load_config
from vsync.exceptions import ConfigurationError
from vsync.log import setup_logging

app = typer.Typer(
    name="vsync",
    help=(
        "VSync is automatic semantic versioning tool for git.\n\n"
        "It bumps your project's version from conventional commit prefixes, "
        "prepends the release to the changelog and tags it."
    ),
    no_args_is_help=False,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


@dataclass
class CLIState:
    """Options shared by all commands."""

    config_path: Path
    overrides: dict[str, Any]
    dry_run: bool = False

    def load(self) -> VSyncConfig:
        try:
            return load_config(self.config_path, overrides=self.overrides)
        except ConfigurationError as e:
            err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
            raise typer.Exit(1) from e


def _build_overrides(
    changelog_path: Path | None,
    git_path: Path | None,
    tags: bool | None,
    changelog: bool | None,
    autocommit: bool | None,
) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if changelog_path is not None:
        overrides["changelog_path"] = changelog_path
    if git_path is not None:
        overrides["repository_path"] = git_path

    generator = {
        key: value
        for key, value in (("tags", tags), ("changelog", changelog), ("autocommit", autocommit))
        if value is not None
    }
    if generator:
        overrides["generator"] = generator
    return overrides


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_path: Path = typer.Option(
        Path("vsync.toml"),
        "--config-path",
        help="Config file path",
    ),
    changelog_path: Path | None = typer.Option(
        None,
        "--changelog-path",
        help="Changelog file path (default CHANGELOG.md)",
    ),
    git_path: Path | None = typer.Option(
        None,
        "--git",
        help="Git repository path (default .git)",
    ),
    tags: bool | None = typer.Option(
        None,
        "--tags/--no-tags",
        "-t",
        help="Generate tags based on commit messages",
    ),
    changelog: bool | None = typer.Option(
        None,
        "--changelog/--no-changelog",
        "-c",
        help="Generate changelog based on commit messages",
    ),
    autocommit: bool | None = typer.Option(
        None,
        "--autocommit/--no-autocommit",
        "-a",
        help="Autocommit the changelog update",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show what would be done without changing anything",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Bump the version, update the changelog and tag the release."""
    setup_logging(logging.DEBUG if verbose else logging.INFO, console=err_console)

    state = CLIState(
        config_path=config_path,
        overrides=_build_overrides(changelog_path, git_path, tags, changelog, autocommit),
        dry_run=dry_run,
    )
    ctx.obj = state

    if ctx.invoked_subcommand is None:
        run_release(state.load(), console, err_console, dry_run=state.dry_run)


@app.command("run")
def run_command(ctx: typer.Context) -> None:
    """Run the release stages (same as running vsync without a command)."""
    state: CLIState = ctx.obj
    run_release(state.load(), console, err_console, dry_run=state.dry_run)


@app.command("version")
def version_command() -> None:
    """Print the version number of VSync."""
    console.print(f"VSync version: {__version__}")


@app.command("config")
def config_command(ctx: typer.Context) -> None:
    """Print the configuration of VSync with passed flags."""
    state: CLIState = ctx.obj
    show_config(state.load(), console)
