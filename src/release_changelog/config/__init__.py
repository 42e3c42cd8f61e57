"""Configuration management for release-changelog."""

from __future__ import annotations

from release_changelog.config.loader import load_config
from release_changelog.config.models import GitHubConfig, ReleaseChangelogConfig

__all__ = [
    "GitHubConfig",
    "ReleaseChangelogConfig",
    "load_config",
]
