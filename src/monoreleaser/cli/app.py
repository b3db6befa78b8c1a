"""Command line interface of monoreleaser."""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from monoreleaser import __version__

app = typer.Typer(
    name="monoreleaser",
    help="A monorepo-aware release CLI with git inside.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"monoreleaser {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Create and view releases of modules in a (mono)repository."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def release(
    module: str = typer.Argument(..., help="Module (directory) to release, '.' for the root"),
    version: str = typer.Argument(..., help="Version to release, e.g. v1.2.0"),
    artifacts: Optional[List[str]] = typer.Option(
        None,
        "--artifacts",
        "-a",
        help="Artifact to upload alongside the changelog (repeatable)",
    ),
    execute: bool = typer.Option(False, "--execute", help="Tag and publish instead of previewing"),
    path: Optional[str] = typer.Option(None, "--path", help="Project directory"),
) -> None:
    """Release a piece of software (module)."""
    from monoreleaser.cli.commands.release import run_release

    run_release(module, version, artifacts or [], execute, path, console, err_console)


@app.command()
def changelog(
    module: str = typer.Argument(".", help="Module (directory), '.' for the root"),
    path: Optional[str] = typer.Option(None, "--path", help="Project directory"),
) -> None:
    """Print the changelog of unreleased changes."""
    from monoreleaser.cli.commands.changelog import run_changelog

    run_changelog(module, path, console, err_console)


@app.command()
def tags(
    module: str = typer.Argument(".", help="Module (directory), '.' for the root"),
    path: Optional[str] = typer.Option(None, "--path", help="Project directory"),
) -> None:
    """List the tags of a module, highest version first."""
    from monoreleaser.cli.commands.tags import run_tags

    run_tags(module, path, console, err_console)


def main() -> None:
    app()
