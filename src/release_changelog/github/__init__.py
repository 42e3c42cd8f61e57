"""GitHub integration."""

from __future__ import annotations

from release_changelog.github.client import GitHubClient, GitHubRelease, get_token

__all__ = [
    "GitHubClient",
    "GitHubRelease",
    "get_token",
]
