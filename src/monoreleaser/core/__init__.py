"""Core business logic for monoreleaser.

This module contains the release-history engine:
- Lazy, module-scoped history traversal
- Tag creation, lookup and version ordering
- Commit diffs between two tags
- Conventional commit classification
- Changelog generation
"""

from __future__ import annotations

from monoreleaser.core.changelog import generate_changelog
from monoreleaser.core.commits import Change, Semantic, calculate_bump, classify, extract
from monoreleaser.core.diff import diff
from monoreleaser.core.history import HistoryIterator
from monoreleaser.core.repository import Repository
from monoreleaser.core.tags import TagRegistry, sort_tags
from monoreleaser.core.version import Version, parse_version

__all__ = [
    # Commits
    "Change",
    # History
    "HistoryIterator",
    "Repository",
    "Semantic",
    # Tags
    "TagRegistry",
    # Version
    "Version",
    "calculate_bump",
    "classify",
    "diff",
    "extract",
    # Changelog
    "generate_changelog",
    "parse_version",
    "sort_tags",
]
