"""
Rendering for devlog posts.

- classifier: Line categories and the ordered rule table
- inline: Links and inline code inside plain-text lines
- entry: Post -> HTML fragment
- page: Fragments -> full HTML page (Jinja2)
"""

from devlog.render.classifier import Classification, LineKind, classify
from devlog.render.entry import EntryRenderer, render_post
from devlog.render.inline import transform_inline
from devlog.render.page import PageRenderer

__all__ = [
    "Classification",
    "LineKind",
    "classify",
    "transform_inline",
    "EntryRenderer",
    "render_post",
    "PageRenderer",
]
