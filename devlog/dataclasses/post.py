#!/usr/bin/env python3
"""
post.py
-------------------
Dataclass representing one devlog post.

A post is a markdown file named `YYYY-MM-DD.md` (or `YYYY-MM-DD-N.md` for
further posts on the same day). Its first line becomes the title when it
starts with `# `; everything else is body.

    # Cow riding

    Cows can be ridden now.

    [video 1280x720](https://example.com/cows.mp4)

The date comes from the filename, never from the content. A filename that
does not start with a valid date still produces a Post; its display date
falls back to the raw identifier.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

# --- Local imports ---
from devlog.core.exceptions import PostParseError
from devlog.utils.fs import identifier_from_path


TITLE_PREFIX = "# "
DATE_PREFIX = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")

# Fixed English names so output does not depend on the process locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def parse_post_date(identifier: str) -> Optional[date]:
    """
    Parse the date from the leading 10 characters of an identifier.

    Args:
        identifier: Post identifier, e.g. '2026-02-15-2'

    Returns:
        The date, or None when the prefix is missing or not a real date

    Examples:
        >>> parse_post_date("2026-02-15-2")
        datetime.date(2026, 2, 15)
        >>> parse_post_date("2026-02-30") is None
        True
    """
    match = DATE_PREFIX.match(identifier)
    if not match:
        return None
    year, month, day = (int(g) for g in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_post_date(d: date) -> str:
    """
    Format a date as 'Month D, YYYY' with no zero padding.

    Examples:
        >>> format_post_date(date(2026, 2, 5))
        'February 5, 2026'
    """
    return f"{MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"


@dataclass
class Post:
    """
    One devlog entry.

    Attributes:
        identifier: Filename stem, e.g. '2026-02-15' or '2026-02-15-2'
        date: Date parsed from the identifier, None if unparseable
        title: Title text without the '# ' marker, None if absent
        body: Raw body lines, title line excluded
    """

    identifier: str
    date: Optional[date] = None
    title: Optional[str] = None
    body: List[str] = field(default_factory=list)

    @classmethod
    def from_lines(cls, identifier: str, lines: Iterable[str]) -> Post:
        """
        Build a Post from an identifier and the raw content lines.

        The first line is consumed as the title iff it starts with '# '.
        """
        body = list(lines)
        title = None
        if body and body[0].startswith(TITLE_PREFIX):
            title = body.pop(0)[len(TITLE_PREFIX):]

        return cls(
            identifier=identifier,
            date=parse_post_date(identifier),
            title=title,
            body=body,
        )

    @classmethod
    def from_text(cls, identifier: str, text: str) -> Post:
        """
        Build a Post from file content, splitting on newlines only.

        Form feeds, U+2028 and other characters str.splitlines() treats
        as breaks stay inside their line. A final newline does not add
        an empty trailing line.
        """
        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        if lines[-1] == "":
            lines.pop()
        return cls.from_lines(identifier, lines)

    @classmethod
    def from_file(cls, path: Path) -> Post:
        """
        Read a post from a markdown file.

        Args:
            path: Path to a YYYY-MM-DD[-N].md file

        Returns:
            Parsed Post

        Raises:
            PostParseError: If the file cannot be read or is not UTF-8
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PostParseError(f"Cannot read post {path}: {e}") from e
        return cls.from_text(identifier_from_path(path), text)

    @property
    def display_date(self) -> str:
        """'Month D, YYYY', or the raw identifier when the date is unknown."""
        if self.date is None:
            return self.identifier
        return format_post_date(self.date)

    @property
    def sort_key(self) -> Tuple[int, date, str]:
        """
        Key for newest-first ordering with reverse=True.

        Dated posts rank above undated ones; same-day posts fall back to
        the identifier, so '2026-02-15-2' precedes '2026-02-15'.
        """
        if self.date is None:
            return (0, date.min, self.identifier)
        return (1, self.date, self.identifier)


def sort_posts(posts: Iterable[Post]) -> List[Post]:
    """Return posts in publication order: newest date first."""
    return sorted(posts, key=lambda p: p.sort_key, reverse=True)
