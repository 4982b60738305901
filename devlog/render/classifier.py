#!/usr/bin/env python3
"""
classifier.py
-------------
Line classification for the devlog markdown dialect.

Every body line falls into exactly one category. Rules are kept in an
ordered table (RULES) and evaluated top to bottom; the first rule whose
matcher accepts the line wins. Inside a code fence every line except a
fence delimiter is fence content, whatever it looks like.

Rules, in priority order:
    1. fence content       (only while inside a fence)
    2. ```[lang]           fence delimiter
    3. ""                  blank (whitespace-only lines are NOT blank)
    4. ### text            sub-header rendered as <h4>
    5. ## text             sub-header rendered as <h3>
    6. [video WxH](url)    video embed; also [video](url) and [videoWxH](url)
    7. ![alt](url)         image embed
    8. anything else       plain text

Embeds are anchored: `![a](b) trailing` is plain text, not an image.

Usage:
    from devlog.render.classifier import classify, LineKind

    c = classify("[video 1280x720](http://x/y.mp4)", inside_code_fence=False)
    c.kind    # LineKind.VIDEO_EMBED
    c.width   # 1280
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple


class LineKind(Enum):
    """Syntactic category of a body line."""

    BLANK = "blank"
    FENCE_DELIMITER = "fence-delimiter"
    FENCE_CONTENT = "fence-content"
    SUB_HEADER_3 = "sub-header-3"
    SUB_HEADER_4 = "sub-header-4"
    VIDEO_EMBED = "video-embed"
    IMAGE_EMBED = "image-embed"
    PLAIN_TEXT = "plain-text"


@dataclass(frozen=True)
class Classification:
    """
    Result of classifying one line.

    Attributes:
        kind: Line category
        text: Heading text, fence content or plain text (raw, unescaped)
        url: Embed source URL
        alt: Image alt text
        width: Video width when dimensions were given
        height: Video height when dimensions were given
    """

    kind: LineKind
    text: str = ""
    url: str = ""
    alt: str = ""
    width: Optional[int] = None
    height: Optional[int] = None


FENCE_PATTERN = re.compile(r"^```[^`]*$")
VIDEO_PATTERN = re.compile(r"^\[video(?:\s*([1-9]\d*)x([1-9]\d*))?\]\(([^)]*)\)$")
IMAGE_PATTERN = re.compile(r"^!\[([^\]]*)\]\(([^)]*)\)$")

H4_PREFIX = "### "
H3_PREFIX = "## "


# ----- Matchers -----
# Each takes the raw line and returns a Classification or None.

def _match_fence(line: str) -> Optional[Classification]:
    if FENCE_PATTERN.match(line):
        return Classification(LineKind.FENCE_DELIMITER)
    return None


def _match_blank(line: str) -> Optional[Classification]:
    if line == "":
        return Classification(LineKind.BLANK)
    return None


def _match_h4(line: str) -> Optional[Classification]:
    if line.startswith(H4_PREFIX):
        return Classification(LineKind.SUB_HEADER_4, text=line[len(H4_PREFIX):])
    return None


def _match_h3(line: str) -> Optional[Classification]:
    if line.startswith(H3_PREFIX):
        return Classification(LineKind.SUB_HEADER_3, text=line[len(H3_PREFIX):])
    return None


def _match_video(line: str) -> Optional[Classification]:
    match = VIDEO_PATTERN.match(line)
    if not match:
        return None
    width, height, url = match.groups()
    return Classification(
        LineKind.VIDEO_EMBED,
        url=url,
        width=int(width) if width else None,
        height=int(height) if height else None,
    )


def _match_image(line: str) -> Optional[Classification]:
    match = IMAGE_PATTERN.match(line)
    if not match:
        return None
    alt, url = match.groups()
    return Classification(LineKind.IMAGE_EMBED, url=url, alt=alt)


def _match_plain(line: str) -> Optional[Classification]:
    return Classification(LineKind.PLAIN_TEXT, text=line)


Matcher = Callable[[str], Optional[Classification]]

# Outside-fence rules in priority order; the last one always matches.
RULES: List[Tuple[LineKind, Matcher]] = [
    (LineKind.FENCE_DELIMITER, _match_fence),
    (LineKind.BLANK, _match_blank),
    (LineKind.SUB_HEADER_4, _match_h4),
    (LineKind.SUB_HEADER_3, _match_h3),
    (LineKind.VIDEO_EMBED, _match_video),
    (LineKind.IMAGE_EMBED, _match_image),
    (LineKind.PLAIN_TEXT, _match_plain),
]


def classify(line: str, inside_code_fence: bool) -> Classification:
    """
    Classify one raw body line.

    Args:
        line: Line without its trailing newline
        inside_code_fence: Whether a fence is currently open

    Returns:
        Classification of the line (never raises)
    """
    if inside_code_fence:
        delimiter = _match_fence(line)
        return delimiter or Classification(LineKind.FENCE_CONTENT, text=line)

    for _kind, matcher in RULES:
        result = matcher(line)
        if result is not None:
            return result

    # Unreachable: _match_plain accepts everything
    return Classification(LineKind.PLAIN_TEXT, text=line)
