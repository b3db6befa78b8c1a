"""Git history source backed by GitPython.

Commits are read with ``git rev-list`` (through ``Repo.iter_commits``)
so the log is streamed lazily from the git process instead of being
loaded up front. Tags are lightweight tags.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from git import Repo
from git.exc import BadName, BadObject, GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from monoreleaser.exceptions import (
    EndOfHistoryError,
    HashUnresolvableError,
    HistoryError,
    TagExistsError,
    TagNotFoundError,
)
from monoreleaser.vcs.base import Commit, Tag

if TYPE_CHECKING:
    from collections.abc import Iterator

    from git.objects import Commit as GitCommit
    from git.refs import TagReference

logger = logging.getLogger(__name__)


class GitHistorySource:
    """History source over a git working tree.

    Args:
        repo: An opened GitPython repository
    """

    def __init__(self, repo: Repo) -> None:
        self._repo = repo

    @classmethod
    def open(cls, path: Path | str = ".") -> GitHistorySource:
        """Open the git repository containing ``path``.

        Raises:
            HistoryError: If ``path`` is not inside a git repository
        """
        try:
            repo = Repo(path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise HistoryError(f"Not a git repository: {path}") from e
        return cls(repo)

    @property
    def path(self) -> Path:
        """Root of the working tree."""
        return Path(self._repo.working_tree_dir or self._repo.git_dir)

    def resolve_head(self) -> str:
        try:
            return self._repo.head.commit.hexsha
        except ValueError as e:
            # GitPython raises ValueError when HEAD points at an unborn branch
            raise EndOfHistoryError("Repository has no commits") from e

    def log_from(self, hash: str, path_filter: str | None = None) -> Iterator[Commit]:
        start = self._resolve(hash)
        logger.debug("Reading log from %s (paths: %s)", start.hexsha, path_filter or "*")
        return (
            Commit(hash=commit.hexsha, message=_message(commit))
            for commit in self._repo.iter_commits(start, paths=path_filter or "")
        )

    def create_tag(self, name: str, hash: str) -> Tag:
        if self._find_tag(name) is not None:
            raise TagExistsError(name)
        commit = self._resolve(hash)
        try:
            ref = self._repo.create_tag(name, ref=commit)
        except GitCommandError as e:
            raise HistoryError(f"Failed to create tag {name}: {e.stderr.strip()}") from e
        return Tag(name=ref.name, hash=ref.commit.hexsha)

    def lookup_tag(self, name: str) -> Tag:
        ref = self._find_tag(name)
        if ref is None:
            raise TagNotFoundError(name)
        return Tag(name=ref.name, hash=ref.commit.hexsha)

    def list_tags(self) -> list[Tag]:
        return [Tag(name=ref.name, hash=ref.commit.hexsha) for ref in self._repo.tags]

    def _find_tag(self, name: str) -> TagReference | None:
        for ref in self._repo.tags:
            if ref.name == name:
                return ref
        return None

    def _resolve(self, hash: str) -> GitCommit:
        try:
            return self._repo.commit(hash)
        except (BadName, BadObject, ValueError) as e:
            raise HashUnresolvableError(hash) from e


def _message(commit: GitCommit) -> str:
    message = commit.message
    if isinstance(message, bytes):
        return message.decode("utf-8", errors="replace")
    return message
