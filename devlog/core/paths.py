#!/usr/bin/env python3
"""
paths.py
-------------------
Default path constants for the devlog toolchain.

A devlog project looks like:
    <project>/
    ├── posts/         # Dated markdown posts: YYYY-MM-DD[-N].md
    ├── logs/          # Application logs
    ├── devlog.yaml    # Optional site configuration
    └── index.html     # Generated page

Project paths are relative, so the `devlog` command resolves them against
the directory it is run from. Templates ship inside the package.

These are defaults for the CLI only. Builders receive the posts directory
and output path as explicit arguments and never read these constants.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


# ----- Package -----
PACKAGE_DIR: Path = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
PAGE_TEMPLATE = "page.jinja2"

# ---- Content (relative to the working directory) ----
POSTS_DIR = Path("posts")
OUTPUT_PATH = Path("index.html")
CONFIG_PATH = Path("devlog.yaml")

# ---- Logs ----
LOG_DIR = Path("logs")
