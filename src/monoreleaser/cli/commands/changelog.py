"""Implementation of the 'changelog' command.

Prints the changelog of a module's unreleased changes: everything
after its highest tag, up to its newest commit.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from monoreleaser.cli.commands import open_project, parse_module
from monoreleaser.core.changelog import generate_changelog
from monoreleaser.core.commits import extract
from monoreleaser.exceptions import MonoreleaserError
from monoreleaser.vcs.base import Tag

if TYPE_CHECKING:
    from rich.console import Console


def run_changelog(
    module_arg: str,
    path: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the changelog command.

    Args:
        module_arg: Module directory, ``.`` for the repository root
        path: Optional path to the project directory
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()
    module = parse_module(module_arg)
    _, repository = open_project(project_path, err_console)

    try:
        previous = repository.tags.latest(module)
        newest = repository.tags.resolve_target(module=module)
        commits = repository.diff(Tag(name="HEAD", hash=newest.hash), previous, module=module)
    except MonoreleaserError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    if not commits:
        console.print("[yellow]No unreleased changes.[/]")
        return

    # plain output so it can be redirected into a file
    console.print(generate_changelog(extract(commits)), end="", markup=False, highlight=False)
