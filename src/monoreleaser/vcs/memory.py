"""In-memory history source.

Models a commit graph with the touched paths of every commit, which is
enough to exercise path-filtered history walks without a git binary.
Each instance is independent; build a fresh one per test.
"""

from __future__ import annotations

import hashlib
import heapq
from dataclasses import dataclass
from typing import TYPE_CHECKING

from monoreleaser.exceptions import (
    EndOfHistoryError,
    HashUnresolvableError,
    TagExistsError,
    TagNotFoundError,
)
from monoreleaser.vcs.base import Commit, Tag

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True)
class _Node:
    commit: Commit
    paths: tuple[str, ...]
    parents: tuple[str, ...]
    sequence: int


class InMemoryHistorySource:
    """A commit graph held in memory.

    Commits are ordered newest-first by creation order, like
    ``git log --topo-order`` on a history built one commit at a time.

    Example::

        source = InMemoryHistorySource()
        first = source.commit("feat: oldest", paths=["sub/a"])
        source.commit("fix: newest", paths=["b"])
        source.create_tag("sub/v1.0.0", first.hash)
    """

    def __init__(self) -> None:
        self._nodes: dict[str, _Node] = {}
        self._tags: dict[str, Tag] = {}
        self._head: str | None = None

    def commit(
        self,
        message: str,
        paths: Iterable[str] = (),
        parents: Iterable[str] | None = None,
    ) -> Commit:
        """Record a commit on top of the head (or on explicit parents) and move the head to it."""
        if parents is None:
            parent_hashes = (self._head,) if self._head is not None else ()
        else:
            parent_hashes = tuple(self._resolve(parent) for parent in parents)

        sequence = len(self._nodes)
        digest = hashlib.sha1(f"{sequence}\0{message}\0{parent_hashes}".encode()).hexdigest()
        commit = Commit(hash=digest, message=message)
        self._nodes[digest] = _Node(commit, tuple(paths), parent_hashes, sequence)
        self._head = digest
        return commit

    def checkout(self, hash: str) -> None:
        """Move the head to an existing commit."""
        self._head = self._resolve(hash)

    def resolve_head(self) -> str:
        if self._head is None:
            raise EndOfHistoryError("Repository has no commits")
        return self._head

    def log_from(self, hash: str, path_filter: str | None = None) -> Iterator[Commit]:
        return self._walk(self._resolve(hash), path_filter)

    def create_tag(self, name: str, hash: str) -> Tag:
        if name in self._tags:
            raise TagExistsError(name)
        tag = Tag(name=name, hash=self._resolve(hash))
        self._tags[name] = tag
        return tag

    def lookup_tag(self, name: str) -> Tag:
        try:
            return self._tags[name]
        except KeyError:
            raise TagNotFoundError(name) from None

    def list_tags(self) -> list[Tag]:
        return list(self._tags.values())

    def _walk(self, start: str, path_filter: str | None) -> Iterator[Commit]:
        seen = {start}
        queue = [(-self._nodes[start].sequence, start)]
        while queue:
            _, current = heapq.heappop(queue)
            node = self._nodes[current]
            for parent in node.parents:
                if parent not in seen:
                    seen.add(parent)
                    heapq.heappush(queue, (-self._nodes[parent].sequence, parent))
            if path_filter is None or any(p.startswith(path_filter) for p in node.paths):
                yield node.commit

    def _resolve(self, hash: str) -> str:
        if hash in self._nodes:
            return hash
        # unique abbreviated hashes resolve like in git
        matches = [h for h in self._nodes if hash and h.startswith(hash)]
        if len(matches) != 1:
            raise HashUnresolvableError(hash)
        return matches[0]
