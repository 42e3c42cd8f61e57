"""Tests for reading release metadata from pyproject.toml."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from release_changelog.core.parser import ReleaseEntry
from release_changelog.exceptions import (
    RepositoryNotFoundError,
    VersionMismatchError,
    VersionNotFoundError,
)
from release_changelog.project.pyproject import (
    check_version_matches,
    get_project_version,
    get_repository_fullname,
    parse_github_url,
    split_repository_fullname,
)

if TYPE_CHECKING:
    from pathlib import Path


def make_entry(version: str) -> ReleaseEntry:
    return ReleaseEntry(
        version=version,
        release_title="Title",
        release_description="",
        prerelease=False,
    )


class TestGetProjectVersion:
    """Tests for get_project_version()."""

    def test_pep621_version(self, temp_project: Path):
        """Read [project].version."""
        assert get_project_version(temp_project) == "1.1.0-rc.1"

    def test_pep621_version_after_arrays(self, tmp_path: Path):
        """Arrays before the version don't confuse the lookup."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\nkeywords = ["a", "b"]\nversion = "2.0.0"\n')

        assert get_project_version(path) == "2.0.0"

    def test_poetry_version(self, tmp_path: Path):
        """Fall back to [tool.poetry].version."""
        (tmp_path / "pyproject.toml").write_text('[tool.poetry]\nname = "x"\nversion = "0.4.2"\n')

        assert get_project_version(tmp_path) == "0.4.2"

    def test_missing_version_raises(self, tmp_path: Path):
        """Raise VersionNotFoundError without a version."""
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\ndynamic = ["version"]\n')

        with pytest.raises(VersionNotFoundError):
            get_project_version(tmp_path)


class TestParseGithubUrl:
    """Tests for parse_github_url()."""

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://github.com/octo/cat", "octo/cat"),
            ("https://github.com/octo/cat/", "octo/cat"),
            ("https://github.com/octo/cat.git", "octo/cat"),
            ("git@github.com:octo/cat.git", "octo/cat"),
            ("http://github.com/my-org/my.repo", "my-org/my.repo"),
        ],
    )
    def test_github_urls(self, url: str, expected: str):
        """Recognize common GitHub URL forms."""
        assert parse_github_url(url) == expected

    @pytest.mark.parametrize(
        "url",
        [
            "https://gitlab.com/octo/cat",
            "https://github.com/octo",
            "https://github.com/octo/cat/issues",
            "https://example.com",
        ],
    )
    def test_other_urls(self, url: str):
        """Anything else is not a repository."""
        assert parse_github_url(url) is None


class TestGetRepositoryFullname:
    """Tests for get_repository_fullname()."""

    def test_from_repository_url(self, temp_project: Path):
        """Non-GitHub Homepage is skipped in favor of Repository."""
        assert get_repository_fullname(temp_project) == "octo/test-project"

    def test_keys_case_insensitive(self, tmp_path: Path):
        """URL keys match regardless of case."""
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "x"\n\n[project.urls]\nsource = "https://github.com/a/b"\n'
        )

        assert get_repository_fullname(tmp_path) == "a/b"

    def test_missing_urls_raises(self, tmp_path: Path):
        """Raise RepositoryNotFoundError without a GitHub URL."""
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')

        with pytest.raises(RepositoryNotFoundError, match=r"\[project.urls\]"):
            get_repository_fullname(tmp_path)


class TestSplitRepositoryFullname:
    """Tests for split_repository_fullname()."""

    def test_valid(self):
        """owner/repo splits into two parts."""
        assert split_repository_fullname("foo/bar") == ("foo", "bar")

    @pytest.mark.parametrize("fullname", [None, "", "eeee", "foo/", "/bar", "a/b/c"])
    def test_invalid(self, fullname: str | None):
        """Anything but owner/repo is rejected."""
        with pytest.raises(RepositoryNotFoundError):
            split_repository_fullname(fullname)


class TestCheckVersionMatches:
    """Tests for check_version_matches()."""

    def test_match(self):
        """Equal versions pass."""
        check_version_matches("0.0.1", make_entry("0.0.1"))

    def test_mismatch_raises(self):
        """Different versions raise with both values attached."""
        with pytest.raises(VersionMismatchError) as exc_info:
            check_version_matches("0.0.2", make_entry("0.0.3"))

        assert exc_info.value.expected == "0.0.2"
        assert exc_info.value.found == "0.0.3"

    def test_compared_as_text(self):
        """No normalization happens before comparing."""
        with pytest.raises(VersionMismatchError):
            check_version_matches("1.0", make_entry("1.0.0"))
