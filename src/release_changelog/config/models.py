"""Configuration models.

Configuration is read from the [tool.release-changelog] table of
pyproject.toml. Every field has a default, so an empty table (or no
table at all) yields a working configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class GitHubConfig(BaseModel):
    """GitHub release settings."""

    model_config = ConfigDict(extra="forbid")

    api_url: str = "https://api.github.com"
    owner: str | None = None
    repo: str | None = None
    token_env: str = "GITHUB_TOKEN"
    timeout: float = Field(default=30.0, gt=0)
    draft: bool = False

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @model_validator(mode="after")
    def _owner_and_repo_together(self) -> GitHubConfig:
        if bool(self.owner) != bool(self.repo):
            raise ValueError("owner and repo must be set together")
        return self

    @property
    def repository_fullname(self) -> str | None:
        """owner/repo when both are configured."""
        if self.owner and self.repo:
            return f"{self.owner}/{self.repo}"
        return None


class ReleaseChangelogConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid")

    changelog_path: Path = Path("CHANGELOG.md")
    check_version: bool = True
    include_description: bool = True
    github: GitHubConfig = Field(default_factory=GitHubConfig)
