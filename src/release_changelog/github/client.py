"""GitHub REST API client for creating releases.

Only the two release endpoints this tool needs are wrapped. Requests
go through a single httpx.Client, so the client should be used as a
context manager or closed explicitly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

import httpx

from release_changelog.exceptions import GitHubAuthError, GitHubError

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
API_VERSION = "2022-11-28"


@dataclass(frozen=True)
class GitHubRelease:
    """A release as returned by the GitHub API."""

    id: int
    tag_name: str
    name: str | None
    html_url: str
    prerelease: bool = False
    draft: bool = False

    @classmethod
    def from_api(cls, data: Any) -> GitHubRelease:
        """Build a release from an API payload.

        Raises:
            GitHubError: If the payload lacks the release id or tag
        """
        try:
            return cls(
                id=data["id"],
                tag_name=data["tag_name"],
                name=data.get("name"),
                html_url=data.get("html_url", ""),
                prerelease=data.get("prerelease", False),
                draft=data.get("draft", False),
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise GitHubError(f"Unexpected release payload from GitHub: {data!r}") from e


def get_token(env_name: str = "GITHUB_TOKEN") -> str:
    """Read the GitHub token from the environment.

    Raises:
        GitHubAuthError: If the variable is unset or empty
    """
    token = os.environ.get(env_name, "").strip()
    if not token:
        raise GitHubAuthError(f"{env_name} is not set. Export a GitHub token to publish releases.")
    return token


class GitHubClient:
    """Minimal GitHub releases client."""

    def __init__(
        self,
        owner: str,
        repo: str,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        self._client = httpx.Client(
            base_url=api_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
            },
            timeout=timeout,
            transport=transport,
        )

    @property
    def releases_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}/releases"

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise GitHubError(f"Request to GitHub failed: {e}") from e

        logger.debug("%s %s -> %d", method, path, response.status_code)
        return response

    def _raise_for_status(self, response: httpx.Response, action: str) -> None:
        if response.is_success:
            return

        detail = response.text
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("message"):
            detail = data["message"]

        error_cls = GitHubAuthError if response.status_code in (401, 403) else GitHubError
        raise error_cls(
            f"Failed to {action}: {response.status_code} {detail}",
            status_code=response.status_code,
            response_body=response.text,
        )

    def _parse_release(self, response: httpx.Response) -> GitHubRelease:
        try:
            data = response.json()
        except ValueError as e:
            raise GitHubError(
                f"GitHub returned a non-JSON response ({response.status_code})",
                status_code=response.status_code,
                response_body=response.text,
            ) from e
        return GitHubRelease.from_api(data)

    def get_release_by_tag(self, tag_name: str) -> GitHubRelease | None:
        """Return the release for tag_name, or None if there is none."""
        response = self._request("GET", f"{self.releases_path}/tags/{tag_name}")
        if response.status_code == 404:
            return None
        self._raise_for_status(response, f"look up release {tag_name}")
        return self._parse_release(response)

    def create_release(
        self,
        tag_name: str,
        name: str,
        body: str | None = None,
        *,
        prerelease: bool = False,
        draft: bool = False,
    ) -> GitHubRelease:
        """Create a release (and its tag, if missing) on the default branch.

        Args:
            tag_name: Tag to release, e.g. "v1.0.0"
            name: Release title
            body: Release notes; omitted from the request when empty
            prerelease: Mark as a prerelease
            draft: Create as a draft

        Returns:
            The created release

        Raises:
            GitHubAuthError: If the token is missing permissions
            GitHubError: If the request fails
        """
        payload: dict[str, Any] = {
            "tag_name": tag_name,
            "name": name,
            "prerelease": prerelease,
            "draft": draft,
        }
        if body:
            payload["body"] = body

        logger.info("Creating release %s in %s/%s", tag_name, self.owner, self.repo)
        response = self._request("POST", self.releases_path, json=payload)
        self._raise_for_status(response, f"create release {tag_name}")
        return self._parse_release(response)
