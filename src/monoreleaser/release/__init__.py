"""Release providers and the release workflow."""

from __future__ import annotations

from monoreleaser.release.base import (
    Artifact,
    LocalReleaser,
    ReleaseDraft,
    Releaser,
    ReleaseOptions,
    plan_release,
    preview_release,
)
from monoreleaser.release.github import GithubReleaser

__all__ = [
    "Artifact",
    "GithubReleaser",
    "LocalReleaser",
    "ReleaseDraft",
    "ReleaseOptions",
    "Releaser",
    "plan_release",
    "preview_release",
]
