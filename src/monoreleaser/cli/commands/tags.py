"""Implementation of the 'tags' command."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.table import Table

from monoreleaser.cli.commands import open_project, parse_module
from monoreleaser.core.tags import tag_version
from monoreleaser.exceptions import MonoreleaserError

if TYPE_CHECKING:
    from rich.console import Console


def run_tags(
    module_arg: str,
    path: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """List a module's tags, highest version first."""
    project_path = Path(path) if path else Path.cwd()
    module = parse_module(module_arg)
    _, repository = open_project(project_path, err_console)

    try:
        tags = repository.get_tags(module)
    except MonoreleaserError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    if not tags:
        console.print(f"[yellow]No tags found for {module or 'the repository root'}.[/]")
        return

    table = Table(title=f"Tags of {module or repository.name}")
    table.add_column("Tag", style="cyan")
    table.add_column("Version", style="green")
    table.add_column("Commit", style="dim")
    for tag in tags:
        table.add_row(tag.name, str(tag_version(tag)), tag.hash[:12])
    console.print(table)
