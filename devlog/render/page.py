#!/usr/bin/env python3
"""
page.py
-------
Jinja2 page shell for the devlog index.

The shell is a single template (devlog/templates/page.jinja2) holding the
<head>, styles, site header and the video autoplay script. Post fragments
are inserted in the order given, immediately after <main>.

Usage:
    from devlog.render.page import PageRenderer

    renderer = PageRenderer()
    html = renderer.render(fragments, site_config)
    changed = renderer.render_to_file(fragments, site_config, Path("index.html"))

    # Testing: supply templates as dict
    renderer = PageRenderer(templates={"page.jinja2": "{{ fragments | join }}"})
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Dict, Optional, Sequence

# --- Third-party imports ---
from jinja2 import BaseLoader, DictLoader, Environment, FileSystemLoader, TemplateError

# --- Local imports ---
from devlog.core.config import SiteConfig
from devlog.core.exceptions import PageBuildError
from devlog.core.paths import PAGE_TEMPLATE, TEMPLATES_DIR


class PageRenderer:
    """
    Assemble post fragments into a full HTML page.

    Attributes:
        env: Configured Jinja2 Environment
        template_name: Name of the page shell template
    """

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        templates: Optional[Dict[str, str]] = None,
        template_name: str = PAGE_TEMPLATE,
    ) -> None:
        """
        Args:
            templates_dir: Directory with page templates (FileSystemLoader)
            templates: Dict of template name to source (DictLoader)
            template_name: Template used by render()

        Raises:
            ValueError: If both templates_dir and templates are provided
        """
        if templates_dir and templates:
            raise ValueError("Provide either templates_dir or templates, not both")

        loader: BaseLoader
        if templates is not None:
            loader = DictLoader(templates)
        else:
            loader = FileSystemLoader(str(templates_dir or TEMPLATES_DIR))

        # Fragments are already HTML; autoescape stays off
        self.env = Environment(
            loader=loader,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template_name = template_name

    def render(self, fragments: Sequence[str], site: SiteConfig) -> str:
        """
        Render the page.

        Args:
            fragments: Post fragments, newest first
            site: Site configuration for the header

        Returns:
            Complete HTML document

        Raises:
            PageBuildError: If the template is missing or fails to render
        """
        try:
            template = self.env.get_template(self.template_name)
            return template.render(fragments=list(fragments), site=site)
        except TemplateError as e:
            raise PageBuildError(
                f"Cannot render page template '{self.template_name}': {e}"
            ) from e

    def render_to_file(
        self,
        fragments: Sequence[str],
        site: SiteConfig,
        output_path: Path,
    ) -> bool:
        """
        Render the page and write it only if the content changed.

        Returns:
            True if the file was written, False if it was already identical

        Raises:
            PageBuildError: If rendering or writing fails
        """
        content = self.render(fragments, site)

        try:
            if output_path.exists():
                if output_path.read_text(encoding="utf-8") == content:
                    return False
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PageBuildError(f"Cannot write {output_path}: {e}") from e

        return True
