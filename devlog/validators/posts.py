#!/usr/bin/env python3
"""
posts.py
--------
Lint devlog posts before publishing.

Validates:
- Filenames follow YYYY-MM-DD or YYYY-MM-DD-N
- The date in the filename is a real calendar date
- Every opening code fence has a closing one
- The post has some content

Nothing is modified; problems are collected in a PostValidationReport.

Usage:
    validator = PostValidator(Path("posts"), logger=logger)
    report = validator.validate_all()
    if report.has_errors:
        ...
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

# --- Local imports ---
from devlog.core.exceptions import PostParseError, ValidationError
from devlog.core.logging_manager import DevlogLogger, safe_logger
from devlog.dataclasses.post import Post
from devlog.render.classifier import LineKind, classify
from devlog.utils.fs import find_post_files, is_valid_identifier


@dataclass
class PostIssue:
    """A single problem found in a post file."""

    file_path: Path
    line_number: Optional[int]
    severity: str  # error, warning
    category: str  # filename, date, fence, content, file
    message: str
    suggestion: Optional[str] = None


@dataclass
class PostValidationReport:
    """Results of validating a posts directory."""

    files_checked: int = 0
    total_errors: int = 0
    total_warnings: int = 0
    issues: List[PostIssue] = field(default_factory=list)

    def add_issue(self, issue: PostIssue) -> None:
        self.issues.append(issue)
        if issue.severity == "error":
            self.total_errors += 1
        elif issue.severity == "warning":
            self.total_warnings += 1

    @property
    def has_errors(self) -> bool:
        return self.total_errors > 0

    @property
    def has_warnings(self) -> bool:
        return self.total_warnings > 0

    @property
    def is_healthy(self) -> bool:
        return not self.has_errors


def find_unclosed_fence(body: List[str]) -> Optional[int]:
    """
    Locate a code fence left open at the end of a post body.

    Args:
        body: Post body lines

    Returns:
        1-based line number of the unmatched opening delimiter, or None
        when all fences are balanced
    """
    inside = False
    opened_at = 0
    for line_number, line in enumerate(body, 1):
        if classify(line, inside).kind is LineKind.FENCE_DELIMITER:
            inside = not inside
            if inside:
                opened_at = line_number
    return opened_at if inside else None


class PostValidator:
    """Validates devlog post files."""

    def __init__(
        self,
        posts_dir: Path,
        logger: Optional[DevlogLogger] = None,
    ):
        """
        Args:
            posts_dir: Directory containing the posts
            logger: Optional logger instance
        """
        self.posts_dir = posts_dir
        self.logger = logger
        self.report = PostValidationReport()

    def validate_post(self, post: Post, file_path: Path) -> None:
        """Check one parsed post and add any issues to the report."""
        if not is_valid_identifier(post.identifier):
            self.report.add_issue(
                PostIssue(
                    file_path=file_path,
                    line_number=None,
                    severity="warning",
                    category="filename",
                    message=f"Filename '{file_path.name}' is not YYYY-MM-DD[-N].md",
                    suggestion="Rename to e.g. 2026-02-15.md or 2026-02-15-2.md",
                )
            )
        elif post.date is None:
            self.report.add_issue(
                PostIssue(
                    file_path=file_path,
                    line_number=None,
                    severity="warning",
                    category="date",
                    message=f"'{post.identifier[:10]}' is not a valid calendar date",
                    suggestion="The raw filename will be shown instead of a date",
                )
            )

        opened_at = find_unclosed_fence(post.body)
        if opened_at is not None:
            # Report in file coordinates, accounting for a consumed title line
            file_line = opened_at + (1 if post.title is not None else 0)
            self.report.add_issue(
                PostIssue(
                    file_path=file_path,
                    line_number=file_line,
                    severity="error",
                    category="fence",
                    message="Code fence is never closed",
                    suggestion="Add a closing ``` line",
                )
            )

        if post.title is None and not any(line.strip() for line in post.body):
            self.report.add_issue(
                PostIssue(
                    file_path=file_path,
                    line_number=None,
                    severity="warning",
                    category="content",
                    message="Post is empty",
                )
            )

    def validate_all(self) -> PostValidationReport:
        """
        Validate every post in the directory.

        Returns:
            PostValidationReport

        Raises:
            ValidationError: If the posts directory does not exist
        """
        if not self.posts_dir.is_dir():
            raise ValidationError(f"Posts directory not found: {self.posts_dir}")

        self.report = PostValidationReport()
        for path in find_post_files(self.posts_dir):
            self.report.files_checked += 1
            try:
                post = Post.from_file(path)
            except PostParseError as e:
                safe_logger(self.logger).log_error(
                    e, {"operation": "validate_post", "file": str(path)}
                )
                self.report.add_issue(
                    PostIssue(
                        file_path=path,
                        line_number=None,
                        severity="error",
                        category="file",
                        message=str(e),
                    )
                )
                continue
            self.validate_post(post, path)

        safe_logger(self.logger).log_operation(
            "validate_posts_complete",
            {
                "files_checked": self.report.files_checked,
                "errors": self.report.total_errors,
                "warnings": self.report.total_warnings,
            },
        )
        return self.report
