#!/usr/bin/env python3
"""
devlog CLI
----------

Command-line interface for building and checking the devlog.

Commands:
    - build: Render posts/*.md into index.html
    - validate: Lint posts (filenames, dates, code fences)
    - list: Show posts in publication order

Usage:
    devlog build
    devlog build -i posts -o public/index.html --strict
    devlog validate
    devlog --config site.yaml list
"""
from __future__ import annotations

import click
from pathlib import Path

from devlog.core.cli import setup_logger
from devlog.core.paths import CONFIG_PATH, LOG_DIR


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(CONFIG_PATH),
    help="Site configuration YAML (optional)",
)
@click.option("-v", "--verbose", is_flag=True, help="Show tracebacks on errors")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, config_path: str, verbose: bool) -> None:
    """devlog - Static page builder for dated markdown posts"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["config_path"] = Path(config_path)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "devlog")


from .build import build
from .posts import list_posts, validate

cli.add_command(build)
cli.add_command(validate)
cli.add_command(list_posts)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
