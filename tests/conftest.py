"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from monoreleaser.core.repository import Repository
from monoreleaser.vcs.base import Commit
from monoreleaser.vcs.memory import InMemoryHistorySource

# Oldest first. The first and the last commit touch "subdir/", all others the root.
COMMIT_MESSAGES = [
    "feat: oldest",
    "feat!: major change",
    "fix: patch change",
    "style: change",
    "chore: change",
    "test: change",
    "refactor: change",
    "ci: change",
    "build: change",
    "docs: newest",
]


@dataclass(frozen=True)
class SampleCommit:
    path: str
    message: str
    tag: str


@dataclass
class SampleHistory:
    """A history of the sample commits, each tagged ``[subdir/]v<index>``."""

    source: InMemoryHistorySource
    commits: list[Commit]  # oldest first

    @property
    def repository(self) -> Repository:
        return Repository(self.source, "myrepo")


@pytest.fixture
def sample_layout() -> list[SampleCommit]:
    """File, message and tag of every sample commit, oldest first."""
    layout = []
    for index, message in enumerate(COMMIT_MESSAGES):
        directory = "subdir/" if index in (0, len(COMMIT_MESSAGES) - 1) else ""
        layout.append(SampleCommit(f"{directory}{index}", message, f"{directory}v{index}"))
    return layout


@pytest.fixture
def sample(sample_layout: list[SampleCommit]) -> SampleHistory:
    """A fresh in-memory sample history per test."""
    source = InMemoryHistorySource()
    commits = []
    for entry in sample_layout:
        commit = source.commit(entry.message, paths=[entry.path])
        source.create_tag(entry.tag, commit.hash)
        commits.append(commit)
    return SampleHistory(source, commits)


@pytest.fixture
def empty_source() -> InMemoryHistorySource:
    return InMemoryHistorySource()


@pytest.fixture
def sample_commits() -> list[Commit]:
    """Commits covering every semantic tier, newest first."""
    return [
        Commit("f6", "docs: update readme"),
        Commit("f5", "Merge branch 'main'"),
        Commit("f4", "feat(api)!: drop v1 endpoints"),
        Commit("f3", "fix(core): handle empty config"),
        Commit("f2", "chore: bump dependencies"),
        Commit("f1", "feat: add user authentication"),
    ]


@pytest.fixture
def feat_commit() -> Commit:
    return Commit("feat123", "feat: add user authentication")


@pytest.fixture
def fix_commit() -> Commit:
    return Commit("fix456", "fix(core): handle null pointer")


@pytest.fixture
def breaking_commit() -> Commit:
    return Commit("break789", "feat!: redesign API\n\nThe old API is gone.")
