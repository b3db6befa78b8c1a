"""Repository facade used by the release workflow."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from monoreleaser.core.diff import diff
from monoreleaser.core.history import HistoryIterator
from monoreleaser.core.tags import TagRegistry
from monoreleaser.vcs.git import GitHistorySource

if TYPE_CHECKING:
    from monoreleaser.vcs.base import Commit, HistorySource, Tag


class Repository:
    """A (mono)repository: its history, its tags and diffs between them.

    Args:
        source: History source backing the repository
        name: Short repository name, e.g. ``name`` in ``github.com/owner/name``
    """

    def __init__(self, source: HistorySource, name: str) -> None:
        self.source = source
        self.name = name
        self.tags = TagRegistry(source)

    @classmethod
    def open(cls, path: Path | str = ".", name: str | None = None) -> Repository:
        """Open the git repository containing ``path``.

        The name defaults to the directory name of the working tree.
        """
        source = GitHistorySource.open(path)
        return cls(source, name or source.path.name)

    def head(self) -> str:
        """Hash of the most recent commit on the current branch."""
        return self.source.resolve_head()

    def history(self, hash: str | None = None, module: str = "") -> HistoryIterator:
        """Iterate commits from ``hash`` (default: head), newest first."""
        return HistoryIterator(self.source, hash=hash, module=module)

    def tag(self, version: str, hash: str | None = None, module: str = "") -> Tag:
        """See :meth:`TagRegistry.tag`."""
        return self.tags.tag(version, hash=hash, module=module)

    def get_tag(self, version: str, module: str = "") -> Tag:
        """See :meth:`TagRegistry.get_tag`."""
        return self.tags.get_tag(version, module=module)

    def get_tags(self, module: str = "") -> list[Tag]:
        """See :meth:`TagRegistry.get_tags`."""
        return self.tags.get_tags(module=module)

    def diff(self, newer: Tag, older: Tag | None = None, module: str = "") -> list[Commit]:
        """See :func:`monoreleaser.core.diff.diff`."""
        return diff(self.source, newer, older, module=module)
