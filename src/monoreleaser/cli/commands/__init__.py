"""CLI command implementations and their shared helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from monoreleaser.config import load_config
from monoreleaser.core.repository import Repository
from monoreleaser.exceptions import MonoreleaserError

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from monoreleaser.config.models import MonoreleaserConfig


def parse_module(module_arg: str) -> str:
    """Turn a module argument into a module name; ``.`` is the repository root."""
    module = module_arg.strip().strip("/")
    return "" if module in ("", ".") else module


def open_project(
    project_path: Path,
    err_console: Console,
) -> tuple[MonoreleaserConfig, Repository]:
    """Load configuration and open the repository, exiting with status 1 on failure."""
    try:
        config = load_config(project_path)
    except MonoreleaserError as e:
        err_console.print(f"[red]Error loading config:[/] {e}")
        raise SystemExit(1) from e

    try:
        repository = Repository.open(project_path, config.name)
    except MonoreleaserError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    return config, repository
