#!/usr/bin/env python3
"""
build.py
-------------------
Generate the devlog page from markdown posts.

    posts/2026-02-15.md  ┐
    posts/2026-02-15-2.md├──>  index.html
    posts/2026-02-14.md  ┘

Programmatic API:
    from devlog.pipeline.build import build_site

    stats = build_site(posts_dir, output_path, config_path, logger=logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional

# --- Local imports ---
from devlog.builders.sitebuilder import SiteBuilder
from devlog.core.cli import BuildStats
from devlog.core.config import SiteConfig, load_site_config
from devlog.core.logging_manager import DevlogLogger


def build_site(
    posts_dir: Path,
    output_path: Path,
    config_path: Optional[Path] = None,
    site: Optional[SiteConfig] = None,
    strict: bool = False,
    logger: Optional[DevlogLogger] = None,
) -> BuildStats:
    """
    Build the devlog page.

    Used by the CLI (`devlog build`) and callable directly.

    Args:
        posts_dir: Directory of YYYY-MM-DD[-N].md posts
        output_path: HTML file to write
        config_path: YAML site configuration (ignored when `site` is given)
        site: Already-loaded site configuration
        strict: Fail on unbalanced code fences instead of closing them
        logger: Optional logger instance

    Returns:
        BuildStats for the run

    Raises:
        ConfigError: If the configuration file is malformed
        PageBuildError: If the page cannot be built
        UnbalancedFenceError: In strict mode
    """
    if site is None:
        site = load_site_config(config_path)

    builder = SiteBuilder(
        posts_dir=posts_dir,
        output_path=output_path,
        site=site,
        strict=strict,
        logger=logger,
    )
    return builder.build()
