"""Tests for version parsing and ordering."""

from __future__ import annotations

import pytest

from monoreleaser.core.commits import Semantic
from monoreleaser.core.version import Version, parse_version
from monoreleaser.exceptions import MalformedVersionError


class TestVersionParse:
    """Tests for Version.parse()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1.2.3", (1, 2, 3)),
            ("v1.2.3", (1, 2, 3)),
            ("v1.2", (1, 2, 0)),
            ("v7", (7, 0, 0)),
            ("0", (0, 0, 0)),
            ("v10.20.30", (10, 20, 30)),
        ],
    )
    def test_parse(self, text: str, expected: tuple[int, int, int]):
        """Missing minor and patch default to 0."""
        version = Version.parse(text)

        assert (version.major, version.minor, version.patch) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "v", "latest", "v1.x", "1.2.3.4", "1.2.3-rc1", "V1.0.0", "-1.0.0", "1..2", "mytag"],
    )
    def test_malformed(self, text: str):
        """Anything outside the grammar is an error, not a value."""
        with pytest.raises(MalformedVersionError):
            Version.parse(text)

    def test_parse_version_alias(self):
        assert parse_version("v2") == Version(2, 0, 0)


class TestVersionOrdering:
    """Tests for Version comparison."""

    def test_numeric_not_lexicographic(self):
        """Components compare as integers."""
        assert Version.parse("v10.0.0") > Version.parse("v9.0.0")
        assert Version.parse("1.10") > Version.parse("1.9")

    def test_major_most_significant(self):
        assert Version.parse("2.0.0") > Version.parse("1.99.99")

    def test_prefix_ignored(self):
        """The v prefix does not affect equality or ordering."""
        assert Version.parse("v1.2") == Version.parse("1.2.0")

    def test_sorting(self):
        versions = [Version.parse(v) for v in ["v1.0.0", "v2.0.0", "v1.5.0"]]

        assert [str(v) for v in sorted(versions, reverse=True)] == ["v2.0.0", "v1.5.0", "v1.0.0"]


class TestVersionBump:
    """Tests for Version.bump()."""

    def test_major(self):
        assert Version.parse("v1.2.3").bump(Semantic.MAJOR) == Version(2, 0, 0)

    def test_minor(self):
        assert Version.parse("v1.2.3").bump(Semantic.MINOR) == Version(1, 3, 0)

    def test_patch(self):
        assert Version.parse("v1.2.3").bump(Semantic.PATCH) == Version(1, 2, 4)

    def test_unknown_keeps_version(self):
        assert Version.parse("v1.2.3").bump(Semantic.UNKNOWN) == Version(1, 2, 3)

    def test_keeps_prefix(self):
        assert str(Version.parse("v1.2").bump(Semantic.PATCH)) == "v1.2.1"
        assert str(Version.parse("1.2").bump(Semantic.PATCH)) == "1.2.1"
