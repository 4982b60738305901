#!/usr/bin/env python3
"""
inline.py
---------
Inline markdown for plain-text lines: links and code spans.

Substitutions run in a fixed order:
    1. [label](url)  ->  <a href="url">label</a>
    2. `code`        ->  <code>code</code>

Links go first, so a backticked label becomes <code> inside the <a>.
Text is otherwise left untouched: no escaping of &, < or > happens here.
"""
from __future__ import annotations

import re


LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
CODE_PATTERN = re.compile(r"`([^`]+)`")


def transform_inline(text: str) -> str:
    """
    Rewrite links and inline code in a line of plain text.

    Examples:
        >>> transform_inline("See [docs](http://a) for `code`.")
        'See <a href="http://a">docs</a> for <code>code</code>.'
        >>> transform_inline("[`x`](u)")
        '<a href="u"><code>x</code></a>'
    """
    text = LINK_PATTERN.sub(r'<a href="\2">\1</a>', text)
    return CODE_PATTERN.sub(r"<code>\1</code>", text)
