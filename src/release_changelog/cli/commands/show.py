"""Implementation of the 'show' command.

Prints the entries parsed from CHANGELOG.md, which is handy for
checking the file before publishing.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from release_changelog.config import load_config
from release_changelog.config.loader import find_pyproject_toml
from release_changelog.core import read_changelog
from release_changelog.exceptions import ConfigNotFoundError, ReleaseChangelogError

if TYPE_CHECKING:
    from rich.console import Console


def run_show(
    path: str | None,
    changelog: str | None,
    show_all: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the show command.

    Args:
        path: Optional path to project directory
        changelog: Optional changelog path overriding the configured one
        show_all: Show every entry instead of only the newest
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    if changelog:
        changelog_path = Path(changelog)
    else:
        try:
            pyproject_path = find_pyproject_toml(project_path)
            config = load_config(pyproject_path)
            changelog_path = pyproject_path.parent / config.changelog_path
        except ConfigNotFoundError:
            # Not a Python project; look for the changelog right here
            changelog_path = project_path / "CHANGELOG.md"
        except ReleaseChangelogError as e:
            err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
            raise SystemExit(1) from e

    try:
        entries = read_changelog(changelog_path)
    except ReleaseChangelogError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    if not show_all:
        entries = entries[:1]

    table = Table(title=f"Releases in {changelog_path.name}")
    table.add_column("Tag", style="cyan", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Prerelease", justify="center")
    table.add_column("Description", style="dim")

    for entry in entries:
        table.add_row(
            entry.tag_name,
            escape(entry.release_title),
            "yes" if entry.prerelease else "",
            escape(entry.release_description),
        )

    console.print(table)
