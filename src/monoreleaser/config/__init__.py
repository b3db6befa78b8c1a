"""Configuration management for monoreleaser."""

from __future__ import annotations

from monoreleaser.config.loader import load_config
from monoreleaser.config.models import GitHubConfig, MonoreleaserConfig

__all__ = [
    "GitHubConfig",
    "MonoreleaserConfig",
    "load_config",
]
