"""Release workflow shared by all release providers.

A release of ``version`` for ``module``:

1. looks up the previous tag of the module (highest version),
2. tags the newest commit of the module,
3. diffs the new tag against the previous one,
4. classifies the commits and renders the changelog.

Providers then publish the result (e.g. as a GitHub release).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from monoreleaser.core.changelog import generate_changelog
from monoreleaser.core.commits import Semantic, calculate_bump, extract
from monoreleaser.core.tags import tag_version
from monoreleaser.exceptions import ArtifactError, TagExistsError
from monoreleaser.vcs.base import Tag, tag_name

if TYPE_CHECKING:
    from monoreleaser.core.commits import Change
    from monoreleaser.core.repository import Repository
    from monoreleaser.core.version import Version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Artifact:
    """A file released alongside the changelog."""

    name: str
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> Artifact:
        """Create an artifact named after the file.

        Raises:
            ArtifactError: If the file does not exist
        """
        if not path.is_file():
            raise ArtifactError(f"Artifact not found: {path}")
        return cls(name=path.name, path=path)

    @property
    def size(self) -> int:
        """Size of the artifact in bytes.

        Raises:
            ArtifactError: If the file is gone
        """
        try:
            return self.path.stat().st_size
        except OSError as e:
            raise ArtifactError(f"Cannot read artifact {self.path}: {e}") from e

    def read(self) -> bytes:
        """Read the artifact content.

        Raises:
            ArtifactError: If the file cannot be read
        """
        try:
            return self.path.read_bytes()
        except OSError as e:
            raise ArtifactError(f"Cannot read artifact {self.path}: {e}") from e


@dataclass(frozen=True)
class ReleaseOptions:
    """Optional parameters for releasing a version."""

    # A module is a directory inside a monorepo; empty for the repository root
    module: str = ""
    artifacts: list[Artifact] = field(default_factory=list)


@dataclass(frozen=True)
class ReleaseDraft:
    """Everything known about a release before it is published."""

    tag: Tag
    previous: Tag | None
    changes: list[Change]
    changelog: str

    @property
    def bump(self) -> Semantic:
        """Strongest impact among the released changes."""
        return calculate_bump(self.changes)

    @property
    def next_version(self) -> Version | None:
        """Version the changes call for, counted from the previous tag.

        ``None`` for a first release, which has nothing to count from.
        """
        if self.previous is None:
            return None
        return tag_version(self.previous).bump(self.bump)


class Releaser(Protocol):
    """Creates a release of a version and publishes it somewhere."""

    def release(self, version: str, options: ReleaseOptions) -> ReleaseDraft:
        """Tag ``version`` and publish its changelog.

        Returns:
            The published release
        """
        ...


def plan_release(repository: Repository, version: str, module: str = "") -> ReleaseDraft:
    """Tag a new version and compute its changelog.

    The previous tag is looked up before tagging so the new tag is never
    its own predecessor.

    Raises:
        MalformedVersionError: If an existing tag of the module is not a version
        EndOfHistoryError: If the module has no commits
        TagExistsError: If the version is already tagged
    """
    tags = repository.get_tags(module)
    previous = tags[0] if tags else None

    tag = repository.tag(version, module=module)
    return _draft(repository, tag, previous, module)


def preview_release(repository: Repository, version: str, module: str = "") -> ReleaseDraft:
    """Compute the changelog ``plan_release`` would produce, without tagging.

    The draft's tag is not stored in the repository.

    Raises:
        TagExistsError: If the version is already tagged
    """
    name = tag_name(version, module)
    if any(existing.name == name for existing in repository.source.list_tags()):
        raise TagExistsError(name)

    previous = repository.tags.latest(module)
    target = repository.tags.resolve_target(module=module)
    tag = Tag(name=name, hash=target.hash)
    return _draft(repository, tag, previous, module)


def _draft(repository: Repository, tag: Tag, previous: Tag | None, module: str) -> ReleaseDraft:
    commits = repository.diff(tag, previous, module=module)
    changes = extract(commits)
    logger.info(
        "%d change(s) since %s",
        len(changes),
        previous.name if previous else "the beginning of history",
    )
    return ReleaseDraft(
        tag=tag,
        previous=previous,
        changes=changes,
        changelog=generate_changelog(changes),
    )


class LocalReleaser:
    """Releaser that only tags the repository and publishes nothing."""

    def __init__(self, repository: Repository) -> None:
        self.repository = repository

    def release(self, version: str, options: ReleaseOptions) -> ReleaseDraft:
        if options.artifacts:
            logger.warning(
                "Local releases do not upload artifacts, ignoring %d", len(options.artifacts)
            )
        return plan_release(self.repository, version, options.module)
