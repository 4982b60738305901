"""
Builders package for devlog.

- BaseBuilder: Common interface and null-safe logging helpers
- SiteBuilder: posts/*.md -> index.html
"""

from devlog.builders.base import BaseBuilder
from devlog.builders.sitebuilder import SiteBuilder

__all__ = [
    "BaseBuilder",
    "SiteBuilder",
]
