"""Exception hierarchy for release-changelog.

All exceptions raised by the library derive from ReleaseChangelogError,
so callers can catch one type at the CLI boundary.
"""

from __future__ import annotations


class ReleaseChangelogError(Exception):
    """Base exception for release-changelog."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# Changelog


class ChangelogError(ReleaseChangelogError):
    """Changelog could not be read or parsed."""


class ChangelogNotFoundError(ChangelogError):
    """Changelog file does not exist."""


class MalformedDocumentError(ChangelogError):
    """The changelog as a whole cannot be turned into release entries."""


class MalformedEntryError(ChangelogError):
    """A single entry lacks its version tag or release title.

    Only raised by the entry extractor; parse_changelog folds it into
    MalformedDocumentError.
    """


# Configuration


class ConfigError(ReleaseChangelogError):
    """Configuration problem."""


class ConfigNotFoundError(ConfigError):
    """pyproject.toml could not be located."""


class ConfigValidationError(ConfigError):
    """Configuration values are invalid."""


# Project manifest


class ProjectError(ReleaseChangelogError):
    """Project manifest problem."""


class VersionNotFoundError(ProjectError):
    """No version declared in the project manifest."""


class RepositoryNotFoundError(ProjectError):
    """Repository full name is missing or not in owner/repo form."""


class VersionMismatchError(ProjectError):
    """Manifest version differs from the newest changelog entry."""

    def __init__(self, expected: str, found: str) -> None:
        super().__init__(
            f"Version in pyproject.toml ({expected}) does not match "
            f"the latest CHANGELOG.md entry ({found})."
        )
        self.expected = expected
        self.found = found


# GitHub


class GitHubError(ReleaseChangelogError):
    """GitHub API request failed."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class GitHubAuthError(GitHubError):
    """Missing or rejected GitHub token."""
