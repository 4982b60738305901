#!/usr/bin/env python3
"""
sitebuilder.py
-------------------
Build index.html from a directory of dated markdown posts.

Steps:
1. Discover posts/*.md
2. Parse each file into a Post (unreadable files are logged and counted)
3. Sort newest first
4. Render each post to an HTML fragment
5. Insert the fragments into the page shell and write the output file
   (only when its content changed)

Usage:
    builder = SiteBuilder(
        posts_dir=Path("posts"),
        output_path=Path("index.html"),
        site=load_site_config(Path("devlog.yaml")),
        logger=logger,
    )
    stats = builder.build()
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from devlog.builders.base import BaseBuilder
from devlog.core.cli import BuildStats
from devlog.core.config import SiteConfig
from devlog.core.exceptions import PageBuildError, PostParseError
from devlog.core.logging_manager import DevlogLogger
from devlog.dataclasses.post import Post, sort_posts
from devlog.render.entry import EntryRenderer
from devlog.render.page import PageRenderer
from devlog.utils.fs import find_post_files


class SiteBuilder(BaseBuilder):
    """
    Render all posts into a single static page.

    Attributes:
        posts_dir: Directory containing YYYY-MM-DD[-N].md posts
        output_path: Destination HTML file
        site: Page shell configuration
        strict: Abort on an unbalanced code fence instead of closing it
        page_renderer: PageRenderer used for the shell
    """

    def __init__(
        self,
        posts_dir: Path,
        output_path: Path,
        site: Optional[SiteConfig] = None,
        strict: bool = False,
        page_renderer: Optional[PageRenderer] = None,
        logger: Optional[DevlogLogger] = None,
    ):
        super().__init__(logger)
        self.posts_dir = posts_dir
        self.output_path = output_path
        self.site = site if site is not None else SiteConfig()
        self.strict = strict
        self.page_renderer = page_renderer if page_renderer is not None else PageRenderer()

    def load_posts(self, stats: BuildStats) -> List[Post]:
        """
        Parse every post file, skipping the ones that cannot be read.

        Args:
            stats: Stats updated with files_processed and errors

        Returns:
            Posts in publication order
        """
        posts: List[Post] = []
        for path in find_post_files(self.posts_dir):
            stats.files_processed += 1
            try:
                posts.append(Post.from_file(path))
            except PostParseError as e:
                stats.errors += 1
                self._log_error(e, {"operation": "parse_post", "file": str(path)})
        return sort_posts(posts)

    def build(self) -> BuildStats:
        """
        Execute the build.

        Returns:
            BuildStats with results

        Raises:
            PageBuildError: If the posts directory is missing or the page
                cannot be written
            UnbalancedFenceError: In strict mode, for a post ending inside
                a code fence
        """
        stats = BuildStats()

        self._log_operation(
            "site_build_start",
            {"posts_dir": str(self.posts_dir), "output": str(self.output_path)},
        )

        if not self.posts_dir.is_dir():
            raise PageBuildError(f"Posts directory not found: {self.posts_dir}")

        posts = self.load_posts(stats)
        if not posts:
            self._log_warning(f"No posts found in {self.posts_dir}")

        renderer = EntryRenderer(strict=self.strict, logger=self.logger)
        fragments = []
        for post in posts:
            fragments.append(renderer.render(post))
            stats.posts_rendered += 1
            self._log_debug(f"Rendered {post.identifier}", {"title": post.title})
        stats.unclosed_fences = len(renderer.unclosed_fences)

        stats.page_written = self.page_renderer.render_to_file(
            fragments, self.site, self.output_path
        )

        self._log_operation("site_build_complete", stats.to_dict())
        return stats
