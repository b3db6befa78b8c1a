"""Commit diffs between two tags.

The diff walks the history of the newer tag until it meets the
*boundary commit*: the newest commit of the older tag's history, seen
through the same module filter. Comparing against the filtered view
matters in a monorepo, because the older tag usually points at a
commit that touched another module.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from monoreleaser.core.history import HistoryIterator

if TYPE_CHECKING:
    from monoreleaser.vcs.base import Commit, HistorySource, Tag

logger = logging.getLogger(__name__)


def diff(
    source: HistorySource,
    newer: Tag,
    older: Tag | None = None,
    *,
    module: str = "",
) -> list[Commit]:
    """Return the commits after ``older`` up to and including ``newer``, newest first.

    Args:
        source: History source to read from
        newer: Tag to start walking back from
        older: Tag marking the previous release; without it the whole
            history reachable from ``newer`` is returned
        module: Only consider commits touching this module

    Returns:
        Commits in the diff, newest first. The boundary commit is excluded.

    Raises:
        HashUnresolvableError: If either tag's hash does not resolve
    """
    newer_history = HistoryIterator(source, hash=newer.hash, module=module)

    boundary: Commit | None = None
    if older is not None:
        # An older tag that never touched the module has no boundary
        boundary = next(HistoryIterator(source, hash=older.hash, module=module), None)

    logger.debug(
        "Diffing %s..%s (module: %s, boundary: %s)",
        older.name if older else "",
        newer.name,
        module or ".",
        boundary.hash if boundary else None,
    )

    commits: list[Commit] = []
    for commit in newer_history:
        if boundary is not None and commit.hash == boundary.hash:
            break
        commits.append(commit)
    return commits
