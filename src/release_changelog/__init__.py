"""release-changelog: publish GitHub releases from CHANGELOG.md."""

from __future__ import annotations

__version__ = "0.3.0"
