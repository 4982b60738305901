#!/usr/bin/env python3
"""
test_post.py
------------
Tests for the Post dataclass, date handling and publication order.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date

# --- Third-party imports ---
import pytest

# --- Local imports ---
from devlog.core.exceptions import PostParseError
from devlog.dataclasses.post import (
    Post,
    format_post_date,
    parse_post_date,
    sort_posts,
)
from devlog.render.entry import render_post


# ==================== Dates ====================

class TestParsePostDate:
    """Date prefix parsing."""

    @pytest.mark.parametrize(
        "identifier,expected",
        [
            ("2026-02-15", date(2026, 2, 15)),
            ("2026-02-15-2", date(2026, 2, 15)),
            ("2024-02-29", date(2024, 2, 29)),
        ],
    )
    def test_valid(self, identifier: str, expected: date) -> None:
        assert parse_post_date(identifier) == expected

    @pytest.mark.parametrize(
        "identifier",
        ["2026-02-30", "2026-13-01", "2025-02-29", "notes", "26-02-15", ""],
    )
    def test_invalid(self, identifier: str) -> None:
        assert parse_post_date(identifier) is None


class TestFormatPostDate:
    """'Month D, YYYY' formatting."""

    def test_no_zero_padding(self) -> None:
        assert format_post_date(date(2026, 2, 5)) == "February 5, 2026"

    def test_two_digit_day(self) -> None:
        assert format_post_date(date(2025, 12, 31)) == "December 31, 2025"

    def test_january(self) -> None:
        assert format_post_date(date(2026, 1, 1)) == "January 1, 2026"


# ==================== Parsing ====================

class TestFromLines:
    """Title extraction and body handling."""

    def test_title_consumed(self) -> None:
        post = Post.from_lines("2026-02-15", ["# Cow riding", "", "Body"])
        assert post.title == "Cow riding"
        assert post.body == ["", "Body"]

    def test_no_title(self) -> None:
        post = Post.from_lines("2026-02-15", ["Body", "# Later"])
        assert post.title is None
        assert post.body == ["Body", "# Later"]

    def test_title_needs_space(self) -> None:
        post = Post.from_lines("2026-02-15", ["#Hashtag"])
        assert post.title is None

    def test_sub_header_first_is_not_title(self) -> None:
        post = Post.from_lines("2026-02-15", ["## Section"])
        assert post.title is None
        assert post.body == ["## Section"]

    def test_empty(self) -> None:
        post = Post.from_lines("2026-02-15", [])
        assert post.title is None
        assert post.body == []

    def test_date_from_identifier(self) -> None:
        post = Post.from_lines("2026-02-15-2", ["x"])
        assert post.date == date(2026, 2, 15)


class TestFromText:
    def test_splits_lines(self) -> None:
        post = Post.from_text("2026-02-15", "# T\n\nA\nB\n")
        assert post.title == "T"
        assert post.body == ["", "A", "B"]

    def test_crlf(self) -> None:
        post = Post.from_text("2026-02-15", "# T\r\nA\r\n")
        assert post.title == "T"
        assert post.body == ["A"]

    def test_trailing_blank_line_kept(self) -> None:
        post = Post.from_text("2026-02-15", "A\n\n")
        assert post.body == ["A", ""]

    def test_no_final_newline(self) -> None:
        assert Post.from_text("2026-02-15", "A\nB").body == ["A", "B"]

    def test_empty_text(self) -> None:
        assert Post.from_text("2026-02-15", "").body == []

    def test_form_feed_in_fence_stays_on_one_line(self) -> None:
        post = Post.from_text("2026-02-15", "```\nint a;\x0cint b;\n```\n")
        assert post.body == ["```", "int a;\x0cint b;", "```"]

        html = render_post(post)
        assert "<pre><code>int a;\x0cint b;</code></pre>" in html

    def test_line_separator_in_paragraph(self) -> None:
        post = Post.from_text("2026-02-15", "one\u2028two\n")
        assert post.body == ["one\u2028two"]

        html = render_post(post)
        assert html.count("<p>") == 1
        assert "<p>one\u2028two</p>" in html


class TestFromFile:
    """Reading posts from disk."""

    def test_reads_file(self, posts_dir, titled_post_content) -> None:
        path = posts_dir / "2026-02-15.md"
        path.write_text(titled_post_content, encoding="utf-8")

        post = Post.from_file(path)

        assert post.identifier == "2026-02-15"
        assert post.title == "Cow riding"
        assert "## How it works" in post.body

    def test_missing_file(self, posts_dir) -> None:
        with pytest.raises(PostParseError):
            Post.from_file(posts_dir / "2026-01-01.md")

    def test_invalid_utf8(self, posts_dir) -> None:
        path = posts_dir / "2026-01-01.md"
        path.write_bytes(b"\xff\xfe\xfa broken")
        with pytest.raises(PostParseError):
            Post.from_file(path)


class TestDisplayDate:
    def test_dated(self) -> None:
        assert Post.from_lines("2026-02-15", []).display_date == "February 15, 2026"

    def test_undated_falls_back_to_identifier(self) -> None:
        assert Post.from_lines("2026-02-30", []).display_date == "2026-02-30"


# ==================== Ordering ====================

class TestSortPosts:
    """Newest first, with same-day and undated rules."""

    @staticmethod
    def _ids(posts) -> list:
        return [p.identifier for p in posts]

    def test_newest_first(self) -> None:
        posts = [Post.from_lines(i, []) for i in ("2026-02-14", "2026-02-16", "2026-02-15")]
        assert self._ids(sort_posts(posts)) == ["2026-02-16", "2026-02-15", "2026-02-14"]

    def test_same_day_suffix_first(self) -> None:
        posts = [Post.from_lines(i, []) for i in ("2026-02-15", "2026-02-15-2", "2026-02-14")]
        assert self._ids(sort_posts(posts)) == ["2026-02-15-2", "2026-02-15", "2026-02-14"]

    def test_undated_last(self) -> None:
        posts = [Post.from_lines(i, []) for i in ("notes", "2020-01-01", "2026-02-15")]
        assert self._ids(sort_posts(posts)) == ["2026-02-15", "2020-01-01", "notes"]

    def test_does_not_mutate_input(self) -> None:
        posts = [Post.from_lines(i, []) for i in ("2026-02-14", "2026-02-15")]
        sort_posts(posts)
        assert self._ids(posts) == ["2026-02-14", "2026-02-15"]

    def test_empty(self) -> None:
        assert sort_posts([]) == []
