#!/usr/bin/env python3
"""
html.py
-------
HTML escaping helpers for the entry renderer.

Two escapers:
- escape_code: for code fence content. Only &, < and > are replaced so
  quotes in source excerpts stay readable.
- escape_attr: for values placed inside double-quoted attributes.

Plain paragraph text is not escaped at all; post authors may write raw
HTML in a paragraph.
"""
from __future__ import annotations


def escape_code(text: str) -> str:
    """
    Escape &, < and > (in that order) for display inside <pre><code>.

    The ampersand goes first so the entities produced for < and > are not
    escaped a second time.

    Examples:
        >>> escape_code("if a < b && c > d")
        'if a &lt; b &amp;&amp; c &gt; d'
        >>> escape_code("&lt;")
        '&amp;lt;'
    """
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def escape_attr(text: str) -> str:
    """
    Escape text for a double-quoted HTML attribute value.

    Examples:
        >>> escape_attr('a "quoted" <alt>')
        'a &quot;quoted&quot; &lt;alt&gt;'
    """
    return escape_code(text).replace('"', "&quot;")
