"""Core business logic for release-changelog.

This module contains the changelog parser:
- Segmenting a changelog document into release entries
- Extracting version, title and description from each entry
"""

from __future__ import annotations

from release_changelog.core.changelog import read_changelog
from release_changelog.core.parser import (
    BADLY_FORMATTED_CHANGELOG,
    ReleaseEntry,
    extract,
    latest_entry,
    parse_changelog,
    segment,
)

__all__ = [
    "BADLY_FORMATTED_CHANGELOG",
    "ReleaseEntry",
    "extract",
    "latest_entry",
    "parse_changelog",
    "read_changelog",
    "segment",
]
