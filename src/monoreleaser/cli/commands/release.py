"""Implementation of the 'release' command.

The release command tags a module's newest commit with a version and
publishes the changelog of everything since the module's previous tag.
Without ``--execute`` it only previews the release.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markdown import Markdown
from rich.panel import Panel

from monoreleaser.cli.commands import open_project, parse_module
from monoreleaser.core.version import Version
from monoreleaser.exceptions import MalformedVersionError, MonoreleaserError
from monoreleaser.release import (
    Artifact,
    GithubReleaser,
    LocalReleaser,
    ReleaseOptions,
    preview_release,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    import httpx
    from rich.console import Console

    from monoreleaser.config.models import MonoreleaserConfig
    from monoreleaser.core.repository import Repository
    from monoreleaser.release import Releaser


def run_release(
    module_arg: str,
    version: str,
    artifacts: list[str],
    execute: bool,
    path: str | None,
    console: Console,
    err_console: Console,
    transport: httpx.BaseTransport | None = None,
) -> None:
    """Run the release command.

    Args:
        module_arg: Module directory, ``.`` for the repository root
        version: Version to release, e.g. ``v1.2.0``
        artifacts: Files to upload, relative to the module directory
        execute: Whether to actually tag and publish
        path: Optional path to the project directory
        console: Console for standard output
        err_console: Console for error output
        transport: Custom HTTP transport for the GitHub client
    """
    project_path = Path(path) if path else Path.cwd()
    module = parse_module(module_arg)

    try:
        Version.parse(version)
    except MalformedVersionError as e:
        err_console.print(f"[red]Invalid version format:[/] {e}")
        raise SystemExit(1) from e

    config, repository = open_project(project_path, err_console)
    display = f"{module}/{version}" if module else version

    if not execute:
        try:
            draft = preview_release(repository, version, module)
        except MonoreleaserError as e:
            err_console.print(f"[red]Error:[/] {e}")
            raise SystemExit(1) from e

        since = draft.previous.name if draft.previous else "the beginning of history"
        console.print(
            f"\n[yellow]DRY-RUN[/] - Releasing [green]{display}[/] "
            f"({draft.bump} release, {len(draft.changes)} change(s) since {since})"
        )
        if draft.next_version is not None:
            console.print(f"Suggested version from the changes: [cyan]{draft.next_version}[/]")
        console.print()
        console.print(
            Panel(
                Markdown(draft.changelog),
                title="[yellow]Dry Run Preview[/]",
                border_style="yellow",
            )
        )
        console.print("\n[dim]Run with [cyan]--execute[/] to tag and publish this release.[/]")
        return

    module_dir = project_path / module if module else project_path
    try:
        options = ReleaseOptions(
            module=module,
            artifacts=[Artifact.from_path(module_dir / artifact) for artifact in artifacts],
        )
    except MonoreleaserError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    try:
        with _open_releaser(repository, config, transport) as releaser:
            draft = releaser.release(version, options)
    except MonoreleaserError as e:
        err_console.print(f"[red]Error releasing {display}:[/] {e}")
        raise SystemExit(1) from e

    console.print(f"  [green]✓[/] Tagged [cyan]{draft.tag.name}[/] at {draft.tag.hash[:12]}")
    if config.provider == "github":
        console.print(f"  [green]✓[/] Published GitHub release [cyan]{draft.tag.name}[/]")
        for artifact in options.artifacts:
            console.print(f"  [green]✓[/] Uploaded {artifact.name}")

    console.print(
        Panel(
            f"[green]Released {display}![/]",
            title="[green]Release Complete[/]",
            border_style="green",
        )
    )


@contextmanager
def _open_releaser(
    repository: Repository,
    config: MonoreleaserConfig,
    transport: httpx.BaseTransport | None,
) -> Iterator[Releaser]:
    """Yield the configured releaser, closing its HTTP client afterwards."""
    if config.provider == "local":
        yield LocalReleaser(repository)
        return
    with GithubReleaser.from_config(repository, config, transport=transport) as releaser:
        yield releaser
