"""Entry point for the release-changelog command."""

from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from release_changelog import __version__
from release_changelog.cli.commands import run_publish, run_show

if TYPE_CHECKING:
    from collections.abc import Sequence

console = Console()
err_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="release-changelog",
        description="Publish GitHub releases from CHANGELOG.md",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Preview the release for the newest changelog entry
  %(prog)s publish --dry-run

  # Publish it (needs GITHUB_TOKEN)
  %(prog)s publish

  # List every entry in the changelog
  %(prog)s show --all
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    publish = subparsers.add_parser("publish", help="Create a GitHub release from the changelog")
    publish.add_argument("path", nargs="?", help="Project directory (defaults to cwd)")
    publish.add_argument("--dry-run", action="store_true", help="Show what would be published")
    publish.add_argument("--changelog", help="Changelog file (overrides configuration)")

    show = subparsers.add_parser("show", help="Show releases parsed from the changelog")
    show.add_argument("path", nargs="?", help="Project directory (defaults to cwd)")
    show.add_argument("--changelog", help="Changelog file (overrides configuration)")
    show.add_argument("--all", dest="show_all", action="store_true", help="Show every entry")

    return parser


def setup_logging(verbose: bool) -> None:
    """Route package logs through rich on stderr."""
    logger = logging.getLogger("release_changelog")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def main(argv: Sequence[str] | None = None) -> None:
    """Run the CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "publish":
        run_publish(args.path, args.dry_run, args.changelog, console, err_console)
    elif args.command == "show":
        run_show(args.path, args.changelog, args.show_all, console, err_console)


if __name__ == "__main__":
    main()
