"""Project manifest access."""

from __future__ import annotations

from release_changelog.project.pyproject import (
    check_version_matches,
    get_project_version,
    get_repository_fullname,
    split_repository_fullname,
)

__all__ = [
    "check_version_matches",
    "get_project_version",
    "get_repository_fullname",
    "split_repository_fullname",
]
