"""Exception hierarchy for monoreleaser.

All exceptions raised by monoreleaser derive from ``MonoreleaserError``
so callers (the CLI in particular) can catch them in one place.
"""

from __future__ import annotations


class MonoreleaserError(Exception):
    """Base exception for all monoreleaser errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# =============================================================================
# History source errors
# =============================================================================


class HistoryError(MonoreleaserError):
    """Base exception for history source failures."""


class HashUnresolvableError(HistoryError):
    """A commit hash does not resolve to any commit in the history source."""

    def __init__(self, hash: str) -> None:
        super().__init__(f"Unrecognized hash provided: {hash!r}")
        self.hash = hash


class EndOfHistoryError(HistoryError):
    """A history that had to contain at least one commit was empty."""


class TagNotFoundError(HistoryError):
    """No tag exists under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Tag not found: {name}")
        self.name = name


class TagExistsError(HistoryError):
    """A tag with the requested name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Tag already exists: {name}")
        self.name = name


# =============================================================================
# Version errors
# =============================================================================


class MalformedVersionError(MonoreleaserError):
    """A tag name does not follow the ``[v]MAJOR[.MINOR[.PATCH]]`` grammar."""

    def __init__(self, version: str) -> None:
        super().__init__(f"Malformed version: {version!r}")
        self.version = version


# =============================================================================
# Configuration errors
# =============================================================================


class ConfigError(MonoreleaserError):
    """Base exception for configuration problems."""


class ConfigNotFoundError(ConfigError):
    """A configuration file could not be found or read."""


class ConfigValidationError(ConfigError):
    """Configuration values are invalid."""


# =============================================================================
# Release errors
# =============================================================================


class ReleaseError(MonoreleaserError):
    """Base exception for release sink failures."""


class ReleaseRequestError(ReleaseError):
    """The release hosting API answered with a non-success status."""

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        super().__init__(f"{message}: {status_code} {body}".rstrip())
        self.status_code = status_code
        self.body = body


class ArtifactError(ReleaseError):
    """A release artifact could not be read."""
