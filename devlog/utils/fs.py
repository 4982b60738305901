#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for locating devlog posts.

Posts live flat in one directory and are named after their publication
day, with a numeric suffix for additional posts on the same day:

    posts/
    ├── 2026-02-14.md
    ├── 2026-02-15.md
    └── 2026-02-15-2.md

Functions:
    find_post_files: Discover post files in a directory
    is_valid_identifier: Check an identifier against YYYY-MM-DD[-N]
    identifier_from_path: Derive a post identifier from its filename

Usage:
    from devlog.utils.fs import find_post_files

    for path in find_post_files(Path("posts")):
        ...
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from pathlib import Path
from typing import List


IDENTIFIER_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}(-\d+)?$")


def find_post_files(posts_dir: Path, pattern: str = "*.md") -> List[Path]:
    """
    Find post files directly inside `posts_dir`.

    Args:
        posts_dir: Directory holding the markdown posts
        pattern: Glob pattern (default: '*.md')

    Returns:
        Regular files matching the pattern, sorted by name; an empty list
        when the directory does not exist
    """
    if not posts_dir.is_dir():
        return []
    return sorted(p for p in posts_dir.glob(pattern) if p.is_file())


def identifier_from_path(path: Path) -> str:
    """Post identifier for a file: its name without the .md extension."""
    return path.stem


def is_valid_identifier(identifier: str) -> bool:
    """
    Check whether an identifier follows YYYY-MM-DD with an optional -N suffix.

    Only the shape is checked; '2026-13-40' is well-formed but its date
    will not parse.

    Examples:
        >>> is_valid_identifier("2026-02-15")
        True
        >>> is_valid_identifier("2026-02-15-2")
        True
        >>> is_valid_identifier("notes")
        False
    """
    return bool(IDENTIFIER_PATTERN.match(identifier))
