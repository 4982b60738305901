"""
Data structures for devlog posts.
"""

from devlog.dataclasses.post import (
    Post,
    format_post_date,
    parse_post_date,
    sort_posts,
)

__all__ = [
    "Post",
    "format_post_date",
    "parse_post_date",
    "sort_posts",
]
