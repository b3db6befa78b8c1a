"""Conventional commit classification.

Parses commit headers of the form ``type(scope)!: description`` and
assigns each commit a semantic versioning impact:

- ``!`` before the colon -> major (breaking change), whatever the type
- ``fix`` -> patch
- ``feat``, ``build``, ``chore``, ``ci``, ``docs``, ``style``,
  ``refactor``, ``perf``, ``test`` -> minor
- anything else, or no colon at all -> unknown

Only the first line of a message is inspected; the full message is
kept on the resulting :class:`Change` for rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from monoreleaser.vcs.base import Commit

COMMIT_SEPARATOR = ":"
SCOPE_START = "("
BREAKING_INDICATOR = "!"


class Semantic(str, Enum):
    """Release impact of a change."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


TYPE_SEMANTICS: dict[str, Semantic] = {
    "fix": Semantic.PATCH,
    "feat": Semantic.MINOR,
    "build": Semantic.MINOR,
    "chore": Semantic.MINOR,
    "ci": Semantic.MINOR,
    "docs": Semantic.MINOR,
    "style": Semantic.MINOR,
    "refactor": Semantic.MINOR,
    "perf": Semantic.MINOR,
    "test": Semantic.MINOR,
}

# Strongest first
SEMANTIC_PRECEDENCE: list[Semantic] = [
    Semantic.MAJOR,
    Semantic.MINOR,
    Semantic.PATCH,
    Semantic.UNKNOWN,
]


@dataclass(frozen=True)
class Change:
    """A commit interpreted by its conventional commit header."""

    message: str
    hash: str
    semantic: Semantic


def message_lines(message: str) -> list[str]:
    """Split a commit message into lines on ``\\n`` (and ``\\r\\n``).

    Other characters ``str.splitlines`` treats as breaks stay part of the
    line. The newline git appends to a message does not add an empty line.
    """
    lines = [line.removesuffix("\r") for line in message.split("\n")]
    if len(lines) > 1 and not lines[-1]:
        lines.pop()
    return lines


def classify(message: str) -> Semantic:
    """Classify a commit message by its conventional commit header.

    Args:
        message: Full commit message

    Returns:
        The semantic impact of the commit
    """
    header = message_lines(message)[0]
    type_and_scope, separator, _ = header.partition(COMMIT_SEPARATOR)
    if not separator:
        return Semantic.UNKNOWN

    if BREAKING_INDICATOR in type_and_scope:
        return Semantic.MAJOR

    commit_type = type_and_scope.split(SCOPE_START, 1)[0]
    return TYPE_SEMANTICS.get(commit_type, Semantic.UNKNOWN)


def extract(commits: Iterable[Commit]) -> list[Change]:
    """Turn commits into changes, keeping their order."""
    return [
        Change(message=commit.message, hash=commit.hash, semantic=classify(commit.message))
        for commit in commits
    ]


def calculate_bump(changes: Iterable[Change]) -> Semantic:
    """Return the strongest impact among changes.

    An empty sequence, or one with only unknown changes, yields ``unknown``.
    """
    strongest = len(SEMANTIC_PRECEDENCE) - 1
    for change in changes:
        strongest = min(strongest, SEMANTIC_PRECEDENCE.index(change.semantic))
    return SEMANTIC_PRECEDENCE[strongest]


def group_changes_by_semantic(changes: Iterable[Change]) -> dict[Semantic, list[Change]]:
    """Group changes by impact, every tier present, input order preserved within a tier."""
    groups: dict[Semantic, list[Change]] = {semantic: [] for semantic in SEMANTIC_PRECEDENCE}
    for change in changes:
        # any tier outside the known ones counts as uncategorized
        semantic = change.semantic if change.semantic in groups else Semantic.UNKNOWN
        groups[semantic].append(change)
    return groups
