"""Implementation of the release run.

Validates the configuration and repository, runs the enabled stages and
prints a summary of each stage's outcome.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from vsync.core.pipeline import ReleaseOrchestrator
from vsync.exceptions import VSyncError
from vsync.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console

    from vsync.config.models import VSyncConfig
    from vsync.core.pipeline import RunReport
    from vsync.vcs.base import VCSGateway


def run_release(
    config: VSyncConfig,
    console: Console,
    err_console: Console,
    *,
    dry_run: bool = False,
    gateway: VCSGateway | None = None,
) -> RunReport:
    """Run the release pipeline.

    Args:
        config: Effective configuration
        console: Console for standard output
        err_console: Console for error output
        dry_run: Compute every stage without writing anything
        gateway: VCS gateway (defaults to git at config.repository_path)

    Returns:
        Per-stage outcomes

    Raises:
        SystemExit: With status 1 if validation fails or any stage failed
    """
    repo = gateway if gateway is not None else GitRepository(config.repository_path)
    orchestrator = ReleaseOrchestrator(config, repo, dry_run=dry_run)

    mode_str = "[yellow]DRY-RUN[/]" if dry_run else "[green]EXECUTING[/]"
    stage_names = ", ".join(str(stage) for stage in orchestrator.stages) or "none"
    console.print(f"\n{mode_str} - stages: [cyan]{stage_names}[/]\n")

    # Only validation errors escape run(); stage failures are in the report
    try:
        report = orchestrator.run()
    except VSyncError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    table = Table(title="Release stages", show_lines=False)
    table.add_column("Stage", style="cyan")
    table.add_column("Status")
    table.add_column("Details")
    for result in report.results:
        if result.ok:
            table.add_row(str(result.stage), "[green]✓ ok[/]", escape(result.detail or ""))
        else:
            table.add_row(str(result.stage), "[red]✗ failed[/]", escape(str(result.error)))
    console.print(table)

    if not report.ok:
        failed = ", ".join(str(result.stage) for result in report.failed)
        err_console.print(
            Panel(
                f"[red]{len(report.failed)} stage(s) failed:[/] {failed}",
                title="[red]Release incomplete[/]",
                border_style="red",
            )
        )
        raise SystemExit(1)

    if dry_run:
        console.print("\n[dim]Run without [cyan]--dry-run[/] to apply these changes.[/]")
    else:
        console.print(
            Panel(
                "[green]All stages completed.[/]",
                title="[green]Release Complete[/]",
                border_style="green",
            )
        )
    return report
