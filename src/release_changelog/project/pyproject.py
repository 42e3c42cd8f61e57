"""Project metadata from pyproject.toml.

This module reads the two facts a release needs from the project
manifest: the version being released and the GitHub repository it
belongs to.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from release_changelog.config.loader import load_pyproject_toml, resolve_pyproject_path
from release_changelog.exceptions import (
    RepositoryNotFoundError,
    VersionMismatchError,
    VersionNotFoundError,
)

if TYPE_CHECKING:
    from pathlib import Path

    from release_changelog.core.parser import ReleaseEntry

# [project.urls] keys checked for the repository, in order
REPOSITORY_URL_KEYS = ("repository", "source", "source code", "homepage")

GITHUB_URL_RE = re.compile(
    r"^(?:https?://|git@)github\.com[/:](?P<owner>[\w.-]+)/(?P<repo>[\w.-]+?)(?:\.git)?/?$"
)


def get_project_version(path: Path | None = None) -> str:
    """Get the version from pyproject.toml.

    Args:
        path: Path to pyproject.toml or directory to search from

    Returns:
        Version string

    Raises:
        VersionNotFoundError: If version cannot be found
    """
    pyproject_path = resolve_pyproject_path(path)
    data = load_pyproject_toml(pyproject_path)

    # PEP 621 first, then Poetry
    for version in (
        data.get("project", {}).get("version"),
        data.get("tool", {}).get("poetry", {}).get("version"),
    ):
        if isinstance(version, str) and version:
            return version

    raise VersionNotFoundError(
        f"Could not find version in {pyproject_path}. "
        "Expected [project].version or [tool.poetry].version."
    )


def parse_github_url(url: str) -> str | None:
    """Turn a GitHub URL into "owner/repo", or None for non-GitHub URLs."""
    match = GITHUB_URL_RE.match(url.strip())
    if match is None:
        return None
    return f"{match.group('owner')}/{match.group('repo')}"


def get_repository_fullname(path: Path | None = None) -> str:
    """Get "owner/repo" from the [project.urls] table.

    Args:
        path: Path to pyproject.toml or directory to search from

    Returns:
        Repository full name

    Raises:
        RepositoryNotFoundError: If no GitHub URL is declared
    """
    pyproject_path = resolve_pyproject_path(path)
    data = load_pyproject_toml(pyproject_path)
    urls = {key.lower(): value for key, value in data.get("project", {}).get("urls", {}).items()}

    for key in REPOSITORY_URL_KEYS:
        url = urls.get(key)
        if url and (fullname := parse_github_url(url)):
            return fullname

    raise RepositoryNotFoundError(
        f"Could not find a GitHub repository URL in {pyproject_path}. "
        'Add Repository = "https://github.com/<owner>/<repo>" under [project.urls].'
    )


def split_repository_fullname(fullname: str | None) -> tuple[str, str]:
    """Split "owner/repo" into its parts.

    Raises:
        RepositoryNotFoundError: If fullname is not exactly owner/repo
    """
    if not fullname:
        raise RepositoryNotFoundError("Repository full name is missing.")

    parts = fullname.split("/")
    if len(parts) != 2 or not all(parts):
        raise RepositoryNotFoundError(
            f"Invalid repository full name {fullname!r}. Expected owner/repo."
        )
    return parts[0], parts[1]


def check_version_matches(expected: str, entry: ReleaseEntry) -> None:
    """Ensure the manifest version is the one the changelog describes.

    Versions are compared as plain strings.

    Raises:
        VersionMismatchError: If they differ
    """
    if expected != entry.version:
        raise VersionMismatchError(expected=expected, found=entry.version)
