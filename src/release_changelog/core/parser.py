"""CHANGELOG.md parsing.

A changelog is a sequence of entries, newest first. Every entry starts
with a version heading immediately followed by a title heading:

    # v1.1.0-beta.2
    ## Release title
    Free text description...

Parsing happens in two steps. The segmenter finds the offset of every
version heading and slices the document into one substring per entry.
The extractor then pulls the tag, title and description out of each
substring. Both steps share the same version tag grammar.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from release_changelog.exceptions import MalformedDocumentError, MalformedEntryError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

BADLY_FORMATTED_CHANGELOG = """Your CHANGELOG.md seems to be badly formatted.
Every item should start with:
# v1.0.0
## Release title"""

# v<major>.<minor>[.<patch>][-(beta|alpha|rc).<n>]
TAG_PATTERN = r"v\d+\.\d+(?:\.\d+)?(?P<prerelease>-(?:beta|alpha|rc)\.\d+)?"

# A line starting with "#", an optional space, then a version tag
BOUNDARY_RE = re.compile(rf"^#[ ]?(?P<tag>{TAG_PATTERN})", re.MULTILINE)

ENTRY_RE = re.compile(
    rf"#[ ]?(?P<tag>{TAG_PATTERN})[ \t]*\r?\n"
    r"##[ ]?(?P<title>[^\r\n]*)"
    r"(?P<description>[\s\S]*)"
)


@dataclass(frozen=True)
class ReleaseEntry:
    """One release parsed from the changelog.

    Attributes:
        version: Version without the leading "v" (e.g. "1.0.0-beta.2")
        release_title: Title line of the release, never empty
        release_description: Body text after the title, stripped; may be empty
        prerelease: True if the tag carries an alpha/beta/rc suffix
    """

    version: str
    release_title: str
    release_description: str
    prerelease: bool

    @property
    def tag_name(self) -> str:
        """Git tag for this release."""
        return f"v{self.version}"


def find_boundaries(document: str) -> tuple[int, ...]:
    """Return the start offset of every entry heading, in document order."""
    return tuple(match.start() for match in BOUNDARY_RE.finditer(document))


def segment(document: str) -> list[str]:
    """Split a changelog document into one substring per entry.

    Each substring runs from its heading up to the next heading, or to
    the end of the document for the last entry. Anything before the
    first heading is dropped.

    Args:
        document: Full changelog text

    Returns:
        Entry substrings in document order

    Raises:
        MalformedDocumentError: If the document has no entry headings
    """
    offsets = find_boundaries(document)
    if not offsets:
        raise MalformedDocumentError(BADLY_FORMATTED_CHANGELOG)

    ends = (*offsets[1:], len(document))
    items = [document[start:end] for start, end in zip(offsets, ends, strict=True)]

    logger.debug("Found %d changelog entries", len(items))
    return items


def extract(entry_text: str) -> ReleaseEntry:
    """Parse a single changelog entry.

    Args:
        entry_text: Entry substring, starting at its version heading

    Returns:
        Parsed release entry

    Raises:
        MalformedEntryError: If the version tag or the title is missing
    """
    match = ENTRY_RE.match(entry_text)
    if match is None:
        raise MalformedEntryError(BADLY_FORMATTED_CHANGELOG)

    tag_name = match.group("tag")
    release_title = match.group("title").strip()
    if not tag_name or not release_title:
        raise MalformedEntryError(BADLY_FORMATTED_CHANGELOG)

    return ReleaseEntry(
        version=tag_name.removeprefix("v"),
        release_title=release_title,
        release_description=match.group("description").strip(),
        prerelease=bool(match.group("prerelease")),
    )


def parse_changelog(document: str) -> list[ReleaseEntry]:
    """Parse a whole changelog into release entries, newest first.

    The document is accepted or rejected as a whole: if any entry is
    malformed, no entries are returned.

    Args:
        document: Full changelog text

    Returns:
        Release entries in document order

    Raises:
        MalformedDocumentError: If there are no entries or any entry is malformed
    """
    try:
        return [extract(item) for item in segment(document)]
    except MalformedEntryError as e:
        raise MalformedDocumentError(BADLY_FORMATTED_CHANGELOG) from e


def latest_entry(entries: Sequence[ReleaseEntry]) -> ReleaseEntry:
    """Return the most recent release, which is the first in the changelog."""
    if not entries:
        raise MalformedDocumentError(BADLY_FORMATTED_CHANGELOG)
    return entries[0]
