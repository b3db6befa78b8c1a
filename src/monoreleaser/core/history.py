"""Lazy, forward-only traversal of a (possibly module-scoped) history."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from monoreleaser.exceptions import EndOfHistoryError
from monoreleaser.vcs.base import module_prefix

if TYPE_CHECKING:
    from collections.abc import Iterator

    from monoreleaser.vcs.base import Commit, HistorySource

logger = logging.getLogger(__name__)


class HistoryIterator:
    """Cursor over the commits reachable from a starting point, newest first.

    The starting hash is resolved when the iterator is created, so an
    unknown hash fails immediately with ``HashUnresolvableError`` while an
    empty history only shows up as an exhausted iterator. Once exhausted,
    every further ``next()`` keeps raising ``StopIteration``.

    Args:
        source: History source to read from
        hash: Commit to start from; defaults to the current head
        module: Restrict the history to commits touching ``<module>/``
    """

    def __init__(
        self,
        source: HistorySource,
        hash: str | None = None,
        module: str = "",
    ) -> None:
        self.module = module
        self._commits: Iterator[Commit] | None = None

        if not hash:
            try:
                hash = source.resolve_head()
            except EndOfHistoryError:
                logger.debug("History is empty, nothing to iterate")
                return

        path_filter = module_prefix(module) if module else None
        self._commits = source.log_from(hash, path_filter)

    @property
    def exhausted(self) -> bool:
        """Whether the end of history has been reached."""
        return self._commits is None

    def __iter__(self) -> HistoryIterator:
        return self

    def __next__(self) -> Commit:
        if self._commits is None:
            raise StopIteration
        try:
            return next(self._commits)
        except StopIteration:
            self._commits = None
            raise


def first_commit(history: HistoryIterator) -> Commit:
    """Pull the first commit of a history that must not be empty.

    Raises:
        EndOfHistoryError: If the history has no commits
    """
    for commit in history:
        return commit
    scope = f" in module {history.module!r}" if history.module else ""
    raise EndOfHistoryError(f"No commits available{scope}")
