#!/usr/bin/env python3
"""
entry.py
--------
Render one Post into a self-contained HTML fragment.

The renderer walks the body once, classifying each line and keeping a
two-state fence machine (OUTSIDE_FENCE / INSIDE_FENCE) that is reset for
every post. Output shape:

    <div class="entry">
      <h2>Cow riding</h2>
      <div class="date">February 15, 2026</div>
      <p>Cows can be ridden now.</p>
      <video controls playsinline muted loop style="aspect-ratio: 1280/720">
        <source src="https://example.com/cows.mp4" type="video/mp4">
      </video>
    </div>

Code blocks are emitted as `<pre><code>...</code></pre>` with the markers
attached to the first and last content line, so no stray whitespace ends
up inside the block.

A post that ends with its fence still open is closed automatically and a
warning is logged; in strict mode UnbalancedFenceError is raised instead.

Usage:
    from devlog.render.entry import EntryRenderer, render_post

    html = render_post(post)

    renderer = EntryRenderer(logger=logger)
    fragments = [renderer.render(p) for p in posts]
    renderer.unclosed_fences   # identifiers whose fence was auto-closed
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import Callable, Dict, List, Optional

# --- Local imports ---
from devlog.core.exceptions import UnbalancedFenceError
from devlog.core.logging_manager import DevlogLogger, safe_logger
from devlog.dataclasses.post import Post
from devlog.render.classifier import Classification, LineKind, classify
from devlog.render.inline import transform_inline
from devlog.utils.html import escape_attr, escape_code


ENTRY_INDENT = "    "
CHILD_INDENT = "      "
NESTED_INDENT = "        "

CODE_OPEN = "<pre><code>"
CODE_CLOSE = "</code></pre>"


class FenceState(Enum):
    OUTSIDE_FENCE = "outside"
    INSIDE_FENCE = "inside"


class _PostRender:
    """Mutable state for rendering a single post."""

    def __init__(self, post: Post) -> None:
        self.post = post
        self.lines: List[str] = []
        self.state = FenceState.OUTSIDE_FENCE
        self.fence_lines: List[str] = []
        self.fence_opened_at = 0

    @property
    def inside_code_fence(self) -> bool:
        return self.state is FenceState.INSIDE_FENCE

    def emit(self, line: str) -> None:
        self.lines.append(line)


class EntryRenderer:
    """
    Turn Posts into HTML fragments.

    Attributes:
        strict: Raise on unbalanced fences instead of closing them
        logger: Optional logger for warnings
        unclosed_fences: Identifiers of posts whose fence was auto-closed
    """

    def __init__(
        self,
        strict: bool = False,
        logger: Optional[DevlogLogger] = None,
    ) -> None:
        self.strict = strict
        self.logger = logger
        self.unclosed_fences: List[str] = []
        self._handlers: Dict[LineKind, Callable[[_PostRender, Classification, int], None]] = {
            LineKind.BLANK: self._render_blank,
            LineKind.FENCE_DELIMITER: self._render_fence_delimiter,
            LineKind.FENCE_CONTENT: self._render_fence_content,
            LineKind.SUB_HEADER_3: self._render_sub_header,
            LineKind.SUB_HEADER_4: self._render_sub_header,
            LineKind.VIDEO_EMBED: self._render_video,
            LineKind.IMAGE_EMBED: self._render_image,
            LineKind.PLAIN_TEXT: self._render_plain,
        }

    def render(self, post: Post) -> str:
        """
        Render a post.

        Args:
            post: Post to render

        Returns:
            HTML fragment, lines joined by newlines, no trailing newline

        Raises:
            UnbalancedFenceError: In strict mode, if the body ends inside a fence
        """
        ctx = _PostRender(post)
        ctx.emit(f'{ENTRY_INDENT}<div class="entry">')
        if post.title is not None:
            ctx.emit(f"{CHILD_INDENT}<h2>{post.title}</h2>")
        ctx.emit(f'{CHILD_INDENT}<div class="date">{post.display_date}</div>')

        for line_number, line in enumerate(post.body, 1):
            classification = classify(line, ctx.inside_code_fence)
            self._handlers[classification.kind](ctx, classification, line_number)

        if ctx.inside_code_fence:
            self._handle_unclosed_fence(ctx)

        ctx.emit(f"{ENTRY_INDENT}</div>")
        return "\n".join(ctx.lines)

    # ----- Line handlers -----

    def _render_blank(self, ctx: _PostRender, c: Classification, line_number: int) -> None:
        pass

    def _render_fence_delimiter(
        self, ctx: _PostRender, c: Classification, line_number: int
    ) -> None:
        if ctx.inside_code_fence:
            self._close_fence(ctx)
        else:
            ctx.state = FenceState.INSIDE_FENCE
            ctx.fence_lines = []
            ctx.fence_opened_at = line_number

    def _render_fence_content(
        self, ctx: _PostRender, c: Classification, line_number: int
    ) -> None:
        ctx.fence_lines.append(escape_code(c.text))

    def _render_sub_header(
        self, ctx: _PostRender, c: Classification, line_number: int
    ) -> None:
        tag = "h3" if c.kind is LineKind.SUB_HEADER_3 else "h4"
        ctx.emit(f"{CHILD_INDENT}<{tag}>{c.text}</{tag}>")

    def _render_video(self, ctx: _PostRender, c: Classification, line_number: int) -> None:
        style = ""
        if c.width is not None and c.height is not None:
            style = f' style="aspect-ratio: {c.width}/{c.height}"'
        ctx.emit(f"{CHILD_INDENT}<video controls playsinline muted loop{style}>")
        ctx.emit(f'{NESTED_INDENT}<source src="{c.url}" type="video/mp4">')
        ctx.emit(f"{CHILD_INDENT}</video>")

    def _render_image(self, ctx: _PostRender, c: Classification, line_number: int) -> None:
        ctx.emit(f'{CHILD_INDENT}<img src="{c.url}" alt="{escape_attr(c.alt)}">')

    def _render_plain(self, ctx: _PostRender, c: Classification, line_number: int) -> None:
        ctx.emit(f"{CHILD_INDENT}<p>{transform_inline(c.text)}</p>")

    # ----- Fence helpers -----

    def _close_fence(self, ctx: _PostRender) -> None:
        body = "\n".join(ctx.fence_lines)
        ctx.emit(f"{CHILD_INDENT}{CODE_OPEN}{body}{CODE_CLOSE}")
        ctx.state = FenceState.OUTSIDE_FENCE
        ctx.fence_lines = []

    def _handle_unclosed_fence(self, ctx: _PostRender) -> None:
        identifier = ctx.post.identifier
        if self.strict:
            raise UnbalancedFenceError(identifier, ctx.fence_opened_at)

        safe_logger(self.logger).log_warning(
            "Closing unterminated code fence",
            {"post": identifier, "opened_at_line": ctx.fence_opened_at},
        )
        self.unclosed_fences.append(identifier)
        self._close_fence(ctx)


def render_post(
    post: Post,
    strict: bool = False,
    logger: Optional[DevlogLogger] = None,
) -> str:
    """Render a single post with a throwaway EntryRenderer."""
    return EntryRenderer(strict=strict, logger=logger).render(post)
