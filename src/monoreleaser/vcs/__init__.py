"""Version control backends."""

from __future__ import annotations

from monoreleaser.vcs.base import Commit, HistorySource, Tag, module_prefix, tag_name
from monoreleaser.vcs.git import GitHistorySource
from monoreleaser.vcs.memory import InMemoryHistorySource

__all__ = [
    "Commit",
    "GitHistorySource",
    "HistorySource",
    "InMemoryHistorySource",
    "Tag",
    "module_prefix",
    "tag_name",
]
