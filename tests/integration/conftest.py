"""Fixtures for tests against real git repositories."""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path

import pytest
from git import Actor, Repo

AUTHOR = Actor("orca", "orca-dev@mail.com")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    if shutil.which("git") is None:
        skip = pytest.mark.skip(reason="git is not installed")
        for item in items:
            if "integration" in item.nodeid:
                item.add_marker(skip)


@pytest.fixture
def add_commit() -> Callable[[Repo, str, str], str]:
    """Return a helper that writes a file, commits it and returns the commit hash."""

    def _add_commit(repo: Repo, relative: str, message: str) -> str:
        path = Path(repo.working_tree_dir) / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"{relative}\n{message}\n")
        repo.index.add([relative])
        return repo.index.commit(message, author=AUTHOR, committer=AUTHOR).hexsha

    return _add_commit


@pytest.fixture
def git_repo(tmp_path: Path, sample_layout, add_commit) -> tuple[Repo, list[str]]:
    """A git repository with the sample history; returns it with its hashes, oldest first."""
    repo = Repo.init(tmp_path / "myrepo")
    hashes = []
    for entry in sample_layout:
        hexsha = add_commit(repo, entry.path, entry.message)
        repo.create_tag(entry.tag, ref=hexsha)
        hashes.append(hexsha)
    return repo, hashes


@pytest.fixture
def empty_git_repo(tmp_path: Path) -> Repo:
    return Repo.init(tmp_path / "empty")
