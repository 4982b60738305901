"""
Build Command
-------------

    devlog build [-i POSTS_DIR] [-o OUTPUT] [--strict]
"""
from __future__ import annotations

import click
from pathlib import Path

from devlog.core.logging_manager import DevlogLogger, handle_cli_error
from devlog.core.paths import OUTPUT_PATH, POSTS_DIR
from devlog.pipeline.build import build_site


@click.command("build")
@click.option(
    "-i",
    "--input",
    type=click.Path(),
    default=str(POSTS_DIR),
    help="Directory with markdown posts",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=str(OUTPUT_PATH),
    help="HTML file to write",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on an unclosed code fence instead of closing it",
)
@click.pass_context
def build(ctx: click.Context, input: str, output: str, strict: bool) -> None:
    """
    Build index.html from all posts, newest first.

    The file is only rewritten when its content changes.
    """
    logger: DevlogLogger = ctx.obj["logger"]

    click.echo(f"🔨 Building {output} from {input}...")

    try:
        stats = build_site(
            posts_dir=Path(input),
            output_path=Path(output),
            config_path=ctx.obj.get("config_path"),
            strict=strict,
            logger=logger,
        )
    except Exception as e:
        handle_cli_error(ctx, e, "build", additional_context={"posts_dir": input})
        return

    click.echo("\n✅ Build complete:")
    click.echo(f"  Posts rendered: {stats.posts_rendered}")
    if stats.unclosed_fences:
        click.echo(f"  ⚠️  Unclosed code fences: {stats.unclosed_fences}")
    if stats.errors:
        click.echo(f"  ⚠️  Unreadable posts: {stats.errors}")
    click.echo(f"  Page: {'written' if stats.page_written else 'unchanged'}")
    click.echo(f"  Duration: {stats.duration():.2f}s")


__all__ = ["build"]
