"""Implementation of the 'publish' command.

The publish command turns the newest CHANGELOG.md entry into a
GitHub release.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel

from release_changelog.config import load_config
from release_changelog.config.loader import find_pyproject_toml
from release_changelog.core import latest_entry, read_changelog
from release_changelog.exceptions import ReleaseChangelogError
from release_changelog.github import GitHubClient, get_token
from release_changelog.project import (
    check_version_matches,
    get_project_version,
    get_repository_fullname,
    split_repository_fullname,
)

if TYPE_CHECKING:
    from rich.console import Console

    from release_changelog.config import ReleaseChangelogConfig
    from release_changelog.core import ReleaseEntry

logger = logging.getLogger(__name__)


def run_publish(
    path: str | None,
    dry_run: bool,
    changelog: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the publish command.

    Args:
        path: Optional path to project directory
        dry_run: Only show what would be published
        changelog: Optional changelog path overriding the configured one
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    # Load configuration
    try:
        pyproject_path = find_pyproject_toml(project_path)
        config = load_config(pyproject_path)
    except ReleaseChangelogError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    project_root = pyproject_path.parent
    changelog_path = Path(changelog) if changelog else project_root / config.changelog_path
    logger.debug("Using changelog %s", changelog_path)

    # Parse changelog
    try:
        entry = latest_entry(read_changelog(changelog_path))
    except ReleaseChangelogError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    # Manifest version must match the newest entry
    if config.check_version:
        try:
            check_version_matches(get_project_version(pyproject_path), entry)
        except ReleaseChangelogError as e:
            err_console.print(f"[red]Error:[/] {escape(str(e))}")
            raise SystemExit(1) from e

    # Resolve target repository
    try:
        fullname = config.github.repository_fullname or get_repository_fullname(pyproject_path)
        owner, repo = split_repository_fullname(fullname)
    except ReleaseChangelogError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    body = entry.release_description if config.include_description else None

    mode_str = "[yellow]DRY-RUN[/]" if dry_run else "[green]EXECUTING[/]"
    kind = "prerelease" if entry.prerelease else "release"
    console.print(
        f"\n{mode_str} - Publishing {kind} [green]{entry.tag_name}[/] to [cyan]{owner}/{repo}[/]\n"
    )

    if dry_run:
        console.print(
            Panel(
                _format_preview(entry, body, config),
                title="[yellow]Dry Run Preview[/]",
                border_style="yellow",
            )
        )
        console.print("\n[dim]Run without [cyan]--dry-run[/] to publish this release.[/]")
        return

    try:
        token = get_token(config.github.token_env)
    except ReleaseChangelogError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    try:
        with GitHubClient(
            owner,
            repo,
            token,
            api_url=config.github.api_url,
            timeout=config.github.timeout,
        ) as client:
            existing = client.get_release_by_tag(entry.tag_name)
            if existing is not None:
                console.print(
                    f"[yellow]Release {entry.tag_name} already exists:[/] {existing.html_url}"
                )
                return

            release = client.create_release(
                entry.tag_name,
                entry.release_title,
                body,
                prerelease=entry.prerelease,
                draft=config.github.draft,
            )
    except ReleaseChangelogError as e:
        err_console.print(f"[red]Error publishing release:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    console.print(
        Panel(
            f"[green]Published {release.tag_name}![/]\n\n{release.html_url}",
            title="[green]Release Complete[/]",
            border_style="green",
        )
    )


def _format_preview(entry: ReleaseEntry, body: str | None, config: ReleaseChangelogConfig) -> str:
    lines = [
        "[bold]Would create the following release:[/]\n",
        f"  • Tag: [cyan]{entry.tag_name}[/]",
        f"  • Title: [cyan]{escape(entry.release_title)}[/]",
        f"  • Prerelease: {'yes' if entry.prerelease else 'no'}",
        f"  • Draft: {'yes' if config.github.draft else 'no'}",
    ]
    if body:
        lines.extend(["", escape(body)])
    return "\n".join(lines)
