"""
Utilities package for devlog.

- fs: Post file discovery and identifier checks
- html: Escaping for code blocks and attribute values

Import commonly-used utilities directly from this package:
    from devlog.utils import find_post_files, escape_code
"""

from .fs import (
    find_post_files,
    identifier_from_path,
    is_valid_identifier,
)

from .html import (
    escape_attr,
    escape_code,
)

__all__ = [
    # Filesystem
    "find_post_files",
    "identifier_from_path",
    "is_valid_identifier",
    # HTML
    "escape_attr",
    "escape_code",
]
