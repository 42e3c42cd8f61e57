"""Shared fixtures for release-changelog tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

CHANGELOG = """\
# Changelog

All notable changes to this project are documented here.

# v1.1.0-rc.1
## Release candidate

- Faster parsing

# v1.0.0
## First release
Initial version.
"""

PYPROJECT = """\
[project]
name = "test-project"
version = "1.1.0-rc.1"

[project.urls]
Homepage = "https://example.com"
Repository = "https://github.com/octo/test-project"
"""


@pytest.fixture
def changelog_text() -> str:
    """A well-formed changelog with a preamble and two entries."""
    return CHANGELOG


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a project directory with pyproject.toml and CHANGELOG.md."""
    (tmp_path / "pyproject.toml").write_text(PYPROJECT)
    (tmp_path / "CHANGELOG.md").write_text(CHANGELOG)
    return tmp_path
