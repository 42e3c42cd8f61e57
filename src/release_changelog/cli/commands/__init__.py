"""CLI command implementations."""

from __future__ import annotations

from release_changelog.cli.commands.publish import run_publish
from release_changelog.cli.commands.show import run_show

__all__ = ["run_publish", "run_show"]
