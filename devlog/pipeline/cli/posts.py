"""
Post Inspection Commands
------------------------

Commands:
    - validate: Lint posts and exit non-zero on errors
    - list: Show posts in publication order
"""
from __future__ import annotations

import sys

import click
from pathlib import Path

from devlog.core.exceptions import PostParseError
from devlog.core.logging_manager import DevlogLogger, handle_cli_error, safe_logger
from devlog.core.paths import POSTS_DIR
from devlog.dataclasses.post import Post, sort_posts
from devlog.utils.fs import find_post_files
from devlog.validators.posts import PostValidator


SEVERITY_ICONS = {"error": "❌", "warning": "⚠️ "}


@click.command("validate")
@click.option(
    "-i",
    "--input",
    type=click.Path(),
    default=str(POSTS_DIR),
    help="Directory with markdown posts",
)
@click.pass_context
def validate(ctx: click.Context, input: str) -> None:
    """Check post filenames, dates and code fences."""
    logger: DevlogLogger = ctx.obj["logger"]

    try:
        report = PostValidator(Path(input), logger=logger).validate_all()
    except Exception as e:
        handle_cli_error(ctx, e, "validate", additional_context={"posts_dir": input})
        return

    for issue in report.issues:
        location = issue.file_path.name
        if issue.line_number is not None:
            location += f":{issue.line_number}"
        icon = SEVERITY_ICONS.get(issue.severity, "")
        click.echo(f"{icon} {location} [{issue.category}] {issue.message}")
        if issue.suggestion:
            click.echo(f"    💡 {issue.suggestion}")

    click.echo(
        f"\n{report.files_checked} posts checked, "
        f"{report.total_errors} errors, {report.total_warnings} warnings"
    )

    if report.has_errors:
        sys.exit(1)


@click.command("list")
@click.option(
    "-i",
    "--input",
    type=click.Path(),
    default=str(POSTS_DIR),
    help="Directory with markdown posts",
)
@click.pass_context
def list_posts(ctx: click.Context, input: str) -> None:
    """List posts newest first, as they appear on the page."""
    logger: DevlogLogger = ctx.obj["logger"]

    posts = []
    for path in find_post_files(Path(input)):
        try:
            posts.append(Post.from_file(path))
        except PostParseError as e:
            safe_logger(logger).log_error(e, {"operation": "list", "file": str(path)})
            click.echo(f"❌ {path.name}: {e}", err=True)

    if not posts:
        click.echo(f"No posts found in {input}")
        return

    for post in sort_posts(posts):
        title = post.title or "(untitled)"
        click.echo(f"{post.identifier:<14} {post.display_date:<20} {title}")


__all__ = ["validate", "list_posts"]
