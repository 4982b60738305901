"""
Tests for SiteBuilder.
"""
import pytest
from unittest.mock import MagicMock

from devlog.builders.sitebuilder import SiteBuilder
from devlog.core.config import SiteConfig
from devlog.core.exceptions import PageBuildError, UnbalancedFenceError
from devlog.core.logging_manager import DevlogLogger
from devlog.render.page import PageRenderer


@pytest.fixture
def page_renderer(simple_templates):
    return PageRenderer(templates=simple_templates)


def make_builder(posts_dir, output, page_renderer, **kwargs):
    return SiteBuilder(
        posts_dir=posts_dir,
        output_path=output,
        site=SiteConfig(title="Test Log"),
        page_renderer=page_renderer,
        **kwargs,
    )


class TestSiteBuilder:
    """Test the posts -> page build."""

    def test_build_writes_page(self, populated_posts_dir, tmp_dir, page_renderer):
        output = tmp_dir / "index.html"
        stats = make_builder(populated_posts_dir, output, page_renderer).build()

        assert stats.files_processed == 3
        assert stats.posts_rendered == 3
        assert stats.errors == 0
        assert stats.page_written is True
        assert output.exists()

    def test_posts_newest_first(self, populated_posts_dir, tmp_dir, page_renderer):
        output = tmp_dir / "index.html"
        make_builder(populated_posts_dir, output, page_renderer).build()
        html = output.read_text(encoding="utf-8")

        second = html.index("Second post of the day")
        cow = html.index("<h2>Cow riding</h2>")
        tiles = html.index("Tile lookup got faster:")
        assert second < cow < tiles

    def test_rendered_content(self, populated_posts_dir, tmp_dir, page_renderer):
        output = tmp_dir / "index.html"
        make_builder(populated_posts_dir, output, page_renderer).build()
        html = output.read_text(encoding="utf-8")

        assert "<title>Test Log</title>" in html
        assert '<a href="https://example.com/play">the build</a>' in html
        assert "<code>ride()</code>" in html
        assert "<h3>How it works</h3>" in html
        assert 'style="aspect-ratio: 1280/720"' in html
        assert "if (a &lt; b &amp;&amp; c &gt; d) {\n\n" in html
        assert "return &quot;" not in html

    def test_second_build_unchanged(self, populated_posts_dir, tmp_dir, page_renderer):
        output = tmp_dir / "index.html"
        make_builder(populated_posts_dir, output, page_renderer).build()
        stats = make_builder(populated_posts_dir, output, page_renderer).build()
        assert stats.page_written is False

    def test_missing_posts_dir(self, tmp_dir, page_renderer):
        builder = make_builder(tmp_dir / "missing", tmp_dir / "index.html", page_renderer)
        with pytest.raises(PageBuildError, match="Posts directory not found"):
            builder.build()

    def test_empty_posts_dir(self, posts_dir, tmp_dir, page_renderer):
        logger = MagicMock(spec=DevlogLogger)
        output = tmp_dir / "index.html"
        stats = make_builder(posts_dir, output, page_renderer, logger=logger).build()

        assert stats.posts_rendered == 0
        assert stats.page_written is True
        logger.log_warning.assert_called_once()

    def test_unreadable_post_skipped(self, populated_posts_dir, tmp_dir, page_renderer):
        (populated_posts_dir / "2026-02-16.md").write_bytes(b"\xff\xfe bad")
        logger = MagicMock(spec=DevlogLogger)

        stats = make_builder(
            populated_posts_dir, tmp_dir / "index.html", page_renderer, logger=logger
        ).build()

        assert stats.files_processed == 4
        assert stats.posts_rendered == 3
        assert stats.errors == 1
        logger.log_error.assert_called_once()

    def test_unclosed_fence_counted(
        self, posts_dir, tmp_dir, page_renderer, unclosed_fence_content
    ):
        (posts_dir / "2026-02-15.md").write_text(unclosed_fence_content, encoding="utf-8")
        output = tmp_dir / "index.html"

        stats = make_builder(posts_dir, output, page_renderer).build()

        assert stats.unclosed_fences == 1
        assert "<pre><code>let x = 1;</code></pre>" in output.read_text(encoding="utf-8")

    def test_strict_unclosed_fence(
        self, posts_dir, tmp_dir, page_renderer, unclosed_fence_content
    ):
        (posts_dir / "2026-02-15.md").write_text(unclosed_fence_content, encoding="utf-8")
        output = tmp_dir / "index.html"

        with pytest.raises(UnbalancedFenceError):
            make_builder(posts_dir, output, page_renderer, strict=True).build()
        assert not output.exists()

    def test_logs_operations(self, populated_posts_dir, tmp_dir, page_renderer):
        logger = MagicMock(spec=DevlogLogger)
        make_builder(
            populated_posts_dir, tmp_dir / "index.html", page_renderer, logger=logger
        ).build()

        operations = [c.args[0] for c in logger.log_operation.call_args_list]
        assert operations == ["site_build_start", "site_build_complete"]
