"""
Validation tools for devlog posts.

Run through the CLI (`devlog validate`) or programmatically:

    from devlog.validators import PostValidator

    report = PostValidator(Path("posts")).validate_all()
"""

from devlog.validators.posts import (
    PostIssue,
    PostValidationReport,
    PostValidator,
    find_unclosed_fence,
)

__all__ = [
    "PostIssue",
    "PostValidationReport",
    "PostValidator",
    "find_unclosed_fence",
]
