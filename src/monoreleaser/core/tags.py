"""Module-scoped tag creation, lookup and version ordering."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from monoreleaser.core.history import HistoryIterator, first_commit
from monoreleaser.core.version import Version
from monoreleaser.vcs.base import module_prefix, tag_name

if TYPE_CHECKING:
    from monoreleaser.vcs.base import Commit, HistorySource, Tag

logger = logging.getLogger(__name__)


def tag_version(tag: Tag) -> Version:
    """Parse the version of a tag, ignoring any module prefix on its name.

    Raises:
        MalformedVersionError: If the unprefixed name is not a version
    """
    return Version.parse(tag.name.rsplit("/", 1)[-1])


def sort_tags(tags: list[Tag]) -> list[Tag]:
    """Sort tags by version, highest first.

    Tags with equal versions keep their relative order. Every tag is
    parsed before sorting, so a single malformed name fails the whole call.

    Raises:
        MalformedVersionError: If any tag name is not a version
    """
    versions = [tag_version(tag) for tag in tags]
    ordered = sorted(range(len(tags)), key=versions.__getitem__, reverse=True)
    return [tags[index] for index in ordered]


class TagRegistry:
    """Creates and reads tags of a history source, scoped by module.

    Args:
        source: History source the tags live in
    """

    def __init__(self, source: HistorySource) -> None:
        self.source = source

    def resolve_target(self, hash: str | None = None, module: str = "") -> Commit:
        """Return the commit a new tag would point at.

        With an explicit hash that commit is used as is; otherwise the
        newest commit touching the module, starting from the head.

        Raises:
            HashUnresolvableError: If ``hash`` does not resolve
            EndOfHistoryError: If the (module-scoped) history is empty
        """
        if hash:
            return first_commit(HistoryIterator(self.source, hash=hash))
        return first_commit(HistoryIterator(self.source, module=module))

    def tag(self, version: str, hash: str | None = None, module: str = "") -> Tag:
        """Tag a commit with ``version`` within ``module``.

        Args:
            version: Version name, e.g. ``"v1.2.0"``
            hash: Commit to tag; defaults to the newest commit of the module
            module: Module (directory) inside the repository, empty for the root

        Returns:
            The created tag

        Raises:
            HashUnresolvableError: If ``hash`` does not resolve
            EndOfHistoryError: If there is no commit to tag
            TagExistsError: If the tag already exists
        """
        target = self.resolve_target(hash, module)
        name = tag_name(version, module)
        tag = self.source.create_tag(name, target.hash)
        logger.info("Tagged %s as %s", target.hash[:12], tag.name)
        return tag

    def get_tag(self, version: str, module: str = "") -> Tag:
        """Look up the tag of ``version`` within ``module``.

        Raises:
            TagNotFoundError: If no such tag exists
        """
        return self.source.lookup_tag(tag_name(version, module))

    def get_tags(self, module: str = "") -> list[Tag]:
        """Return the tags of ``module`` (all tags for the root), highest version first.

        Raises:
            MalformedVersionError: If a matching tag name is not a version
        """
        prefix = module_prefix(module) if module else ""
        tags = [tag for tag in self.source.list_tags() if tag.name.startswith(prefix)]
        return sort_tags(tags)

    def latest(self, module: str = "") -> Tag | None:
        """Return the highest-versioned tag of ``module``, or ``None`` if it has none."""
        tags = self.get_tags(module)
        return tags[0] if tags else None
