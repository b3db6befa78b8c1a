"""History source abstraction.

A history source is the capability monoreleaser consumes from version
control: resolving the head, walking the commit log newest-first
(optionally restricted to a path prefix), and reading/writing tags.

Two implementations exist:

- :class:`~monoreleaser.vcs.git.GitHistorySource` over a real git repository
- :class:`~monoreleaser.vcs.memory.InMemoryHistorySource` for tests
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True)
class Commit:
    """An immutable, hash-identified change record."""

    hash: str
    message: str


@dataclass(frozen=True)
class Tag:
    """A named pointer to a commit.

    Module tags carry the module as a ``"<module>/"`` prefix on their name.
    """

    name: str
    hash: str


@runtime_checkable
class HistorySource(Protocol):
    """Protocol for version control backends."""

    def resolve_head(self) -> str:
        """Return the hash of the most recent commit on the current branch.

        Raises:
            EndOfHistoryError: If the repository has no commits
        """
        ...

    def log_from(self, hash: str, path_filter: str | None = None) -> Iterator[Commit]:
        """Return commits reachable from ``hash``, newest first.

        The hash is resolved eagerly; the returned iterator is lazy.

        Args:
            hash: Commit to start from
            path_filter: Only yield commits touching paths under this prefix

        Raises:
            HashUnresolvableError: If ``hash`` does not resolve to a commit
        """
        ...

    def create_tag(self, name: str, hash: str) -> Tag:
        """Create a tag named ``name`` pointing at ``hash``.

        Raises:
            TagExistsError: If a tag with that name already exists
        """
        ...

    def lookup_tag(self, name: str) -> Tag:
        """Return the tag named ``name``.

        Raises:
            TagNotFoundError: If no such tag exists
        """
        ...

    def list_tags(self) -> Iterable[Tag]:
        """Return all tags, in no particular order."""
        ...


def module_prefix(module: str) -> str:
    """Return the path/tag prefix of a module (``"sub"`` -> ``"sub/"``)."""
    return f"{module}/"


def tag_name(version: str, module: str = "") -> str:
    """Compose the stored tag name for a version within a module.

    >>> tag_name("v1.0.0")
    'v1.0.0'
    >>> tag_name("v1.0.0", "sub")
    'sub/v1.0.0'
    """
    if not module:
        return version
    return module_prefix(module) + version
