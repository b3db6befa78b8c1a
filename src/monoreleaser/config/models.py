"""Configuration models.

Configuration lives either in a ``.monoreleaser.toml`` file or in the
``[tool.monoreleaser]`` table of ``pyproject.toml``::

    owner = "kharf"
    name = "myrepo"
    provider = "github"

    [github]
    api_url = "https://api.github.com"
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class GitHubConfig(BaseModel):
    """GitHub release provider settings."""

    model_config = ConfigDict(extra="forbid")

    token: str | None = Field(default=None, description="API token, prefer MR_GITHUB_TOKEN")
    api_url: str = Field(default="https://api.github.com", description="REST API base URL")
    uploads_url: str = Field(
        default="https://uploads.github.com",
        description="Release asset upload base URL",
    )
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")


class MonoreleaserConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid")

    owner: str | None = Field(default=None, description="Owner of the hosted repository")
    name: str | None = Field(
        default=None,
        description="Short repository name, defaults to the working tree directory name",
    )
    provider: Literal["github", "local"] = Field(
        default="github",
        description="Where releases are published; 'local' only tags",
    )
    github: GitHubConfig = Field(default_factory=GitHubConfig)
