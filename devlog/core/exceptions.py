#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the devlog toolchain.

Exception Hierarchy:
    Exception (built-in)
    └── DevlogError - Base for everything raised by this package
        ├── ConfigError - Site configuration could not be loaded
        ├── ValidationError - Post lint failures
        ├── PostParseError - A post file could not be read or parsed
        │   └── UnbalancedFenceError - Code fence left open at end of post
        └── PageBuildError - The HTML page could not be assembled or written

Only one failure is recovered silently: a post whose identifier does not
start with a valid date is displayed with its raw identifier. Everything
below is raised to the caller.

Usage:
    from devlog.core.exceptions import PageBuildError, PostParseError

    try:
        stats = builder.build()
    except PageBuildError as e:
        logger.log_error(e, {"operation": "build"})
"""


class DevlogError(Exception):
    """Base exception for all devlog errors."""

    pass


class ConfigError(DevlogError):
    """
    Exception for site configuration failures.

    Raised when the YAML site configuration exists but cannot be used:
    - Malformed YAML syntax
    - Top-level value is not a mapping
    - Navigation links missing a label or URL

    Examples:
        >>> raise ConfigError("devlog.yaml: expected a mapping, got list")
        >>> raise ConfigError("nav[1] missing 'url'")
    """

    pass


class ValidationError(DevlogError):
    """
    Exception for post validation failures.

    Examples:
        >>> raise ValidationError("Invalid identifier: 2024-1-5")
    """

    pass


class PostParseError(DevlogError):
    """
    Exception for post parsing failures.

    Raised when a post file cannot be turned into a Post:
    - File not found or not readable
    - Content not valid UTF-8

    Examples:
        >>> raise PostParseError("Cannot read post: posts/2026-02-15.md")
    """

    pass


class UnbalancedFenceError(PostParseError):
    """
    Exception for a code fence still open when a post body ends.

    Only raised in strict rendering mode; by default the fence is closed
    at the end of the post and a warning is logged.

    Attributes:
        identifier: Identifier of the offending post
        line_number: 1-based body line of the unmatched opening delimiter
    """

    def __init__(self, identifier: str, line_number: int) -> None:
        self.identifier = identifier
        self.line_number = line_number
        super().__init__(
            f"Unclosed code fence in post {identifier} "
            f"(opened at body line {line_number})"
        )


class PageBuildError(DevlogError):
    """
    Exception for page assembly errors.

    Raised while building index.html:
    - Posts directory missing
    - Page template missing or broken
    - Output file not writable

    Examples:
        >>> raise PageBuildError("Posts directory not found: posts/")
        >>> raise PageBuildError("Cannot write index.html: permission denied")
    """

    pass
