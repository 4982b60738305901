"""
conftest.py
-----------
Shared pytest fixtures for devlog tests.

Provides fixtures for:
- Temporary directories
- Sample post content and post directories
- A dict-backed page template
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def posts_dir(tmp_dir):
    """Empty posts directory."""
    path = tmp_dir / "posts"
    path.mkdir()
    return path


# ----- Sample Post Content Fixtures -----

@pytest.fixture
def titled_post_content():
    """Post with title, sub-header, video and inline markup."""
    return """# Cow riding

Cows can be ridden now. See [the build](https://example.com/play) and `ride()`.

## How it works

[video 1280x720](https://example.com/cows.mp4)
"""


@pytest.fixture
def code_post_content():
    """Post with a code fence containing HTML-significant characters."""
    return """Tile lookup got faster:

```ts
if (a < b && c > d) {

  return "<tile>";
}
```
"""


@pytest.fixture
def unclosed_fence_content():
    """Post whose code fence is never closed."""
    return """# Broken

```
let x = 1;
"""


@pytest.fixture
def populated_posts_dir(posts_dir, titled_post_content, code_post_content):
    """Posts directory with three posts over two days."""
    (posts_dir / "2026-02-14.md").write_text(code_post_content, encoding="utf-8")
    (posts_dir / "2026-02-15.md").write_text(titled_post_content, encoding="utf-8")
    (posts_dir / "2026-02-15-2.md").write_text("Second post of the day\n", encoding="utf-8")
    return posts_dir


# ----- Template Fixtures -----

@pytest.fixture
def simple_templates():
    """Minimal page shell that only lists fragments."""
    return {
        "page.jinja2": (
            "<title>{{ site.title }}</title>\n"
            "<main>\n"
            "{% for fragment in fragments %}\n"
            "{{ fragment }}\n"
            "{% endfor %}\n"
            "</main>\n"
        )
    }
