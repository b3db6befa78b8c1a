"""Version values parsed from tag names.

Only the minimal ``[v]MAJOR[.MINOR[.PATCH]]`` grammar is supported;
missing components default to 0. This is enough to order release tags,
it is not a full semantic versioning implementation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace

from monoreleaser.core.commits import Semantic
from monoreleaser.exceptions import MalformedVersionError

VERSION_PATTERN = re.compile(
    r"^(?P<prefix>v?)(?P<major>\d+)(?:\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?)?$",
    re.ASCII,
)


@dataclass(frozen=True, order=True)
class Version:
    """A comparable ``MAJOR.MINOR.PATCH`` version.

    Ordering compares ``(major, minor, patch)`` numerically; the ``v``
    prefix is kept for rendering only.
    """

    major: int
    minor: int = 0
    patch: int = 0
    prefix: str = field(default="", compare=False)

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string.

        Args:
            text: Version string like ``"v1.2.3"``, ``"1.2"`` or ``"3"``

        Returns:
            Parsed Version

        Raises:
            MalformedVersionError: If the string does not match the grammar
        """
        match = VERSION_PATTERN.fullmatch(text)
        if match is None:
            raise MalformedVersionError(text)
        return cls(
            major=int(match["major"]),
            minor=int(match["minor"] or 0),
            patch=int(match["patch"] or 0),
            prefix=match["prefix"],
        )

    def bump(self, semantic: Semantic) -> Version:
        """Return the next version for a release of the given impact.

        An ``unknown`` impact leaves the version unchanged.
        """
        if semantic == Semantic.MAJOR:
            return replace(self, major=self.major + 1, minor=0, patch=0)
        if semantic == Semantic.MINOR:
            return replace(self, minor=self.minor + 1, patch=0)
        if semantic == Semantic.PATCH:
            return replace(self, patch=self.patch + 1)
        return self

    def __str__(self) -> str:
        return f"{self.prefix}{self.major}.{self.minor}.{self.patch}"


def parse_version(text: str) -> Version:
    """Parse a version string. See :meth:`Version.parse`."""
    return Version.parse(text)
