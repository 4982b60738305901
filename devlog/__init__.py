"""
devlog
======

Static page builder for a game devlog.

Dated markdown posts (posts/YYYY-MM-DD[-N].md) are rendered newest first
into a single index.html. The markdown dialect is deliberately small:
titles, ## / ### sub-headers, code fences, video and image embeds, inline
links and inline code. Anything else is shown as plain text.

Main Components:
    - render: Line classifier, inline transformer, entry and page renderers
    - dataclasses: Post model and publication ordering
    - builders: SiteBuilder (posts -> index.html)
    - validators: Post lint
    - pipeline: build_site() and the `devlog` CLI
    - core: Paths, configuration, logging, exceptions

Example Usage:
    >>> from devlog import Post, render_post
    >>> post = Post.from_text("2026-02-15", "# Hello\\n\\nFirst post")
    >>> print(render_post(post))
"""

__version__ = "1.0.0"

from devlog.dataclasses.post import Post, sort_posts
from devlog.render.entry import EntryRenderer, render_post
from devlog.pipeline.build import build_site

__all__ = [
    "Post",
    "sort_posts",
    "EntryRenderer",
    "render_post",
    "build_site",
]
