"""Reading release entries from a CHANGELOG.md file on disk."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from release_changelog.core.parser import parse_changelog
from release_changelog.exceptions import ChangelogError, ChangelogNotFoundError

if TYPE_CHECKING:
    from pathlib import Path

    from release_changelog.core.parser import ReleaseEntry

logger = logging.getLogger(__name__)


def read_changelog(path: Path) -> list[ReleaseEntry]:
    """Read and parse a changelog file.

    Args:
        path: Path to the changelog file

    Returns:
        Release entries, newest first

    Raises:
        ChangelogNotFoundError: If the file does not exist
        ChangelogError: If the file cannot be read as UTF-8 text
        MalformedDocumentError: If the file is badly formatted
    """
    if not path.is_file():
        raise ChangelogNotFoundError(f"Changelog not found: {path}")

    logger.debug("Reading changelog from %s", path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ChangelogError(f"Could not read changelog {path}: {e}") from e

    return parse_changelog(content)
