#!/usr/bin/env python3
"""
config.py
---------
Site configuration for the generated devlog page.

The page shell (title, tagline, navigation links) is read from an optional
YAML file. A missing file yields the defaults below; a file that exists
but cannot be used raises ConfigError.

Example devlog.yaml:

    title: Tilefun Devlog
    tagline: Building a creative-mode 2D tile game
    lang: en
    nav:
      - label: Play
        url: https://kyle.graehl.org/tilefun/
      - label: GitHub
        url: https://github.com/kzahel/tilefun

Usage:
    from devlog.core.config import load_site_config

    site = load_site_config(Path("devlog.yaml"))
    site.title
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from devlog.core.exceptions import ConfigError


@dataclass(frozen=True)
class NavLink:
    """A single header navigation link."""

    label: str
    url: str


DEFAULT_NAV = (
    NavLink("Play", "https://kyle.graehl.org/tilefun/"),
    NavLink("GitHub", "https://github.com/kzahel/tilefun"),
    NavLink("Graehl Arts", "https://graehlarts.com/"),
)


@dataclass
class SiteConfig:
    """
    Values injected into the page shell.

    Attributes:
        title: Page <title> and header heading
        tagline: Line shown under the heading
        lang: <html lang> attribute
        nav: Header navigation links, in display order
    """

    title: str = "Tilefun Devlog"
    tagline: str = "Building a creative-mode 2D tile game"
    lang: str = "en"
    nav: List[NavLink] = field(default_factory=lambda: list(DEFAULT_NAV))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SiteConfig":
        """
        Build a SiteConfig from parsed YAML, keeping defaults for absent keys.

        Raises:
            ConfigError: If a nav entry is not a mapping with 'label' and 'url'
        """
        defaults = cls()
        nav = defaults.nav
        if "nav" in data:
            raw_nav = data["nav"] or []
            if not isinstance(raw_nav, list):
                raise ConfigError(f"'nav' must be a list, got {type(raw_nav).__name__}")
            nav = []
            for i, item in enumerate(raw_nav):
                if not isinstance(item, dict):
                    raise ConfigError(f"nav[{i}] must be a mapping")
                for key in ("label", "url"):
                    if not item.get(key):
                        raise ConfigError(f"nav[{i}] missing '{key}'")
                nav.append(NavLink(str(item["label"]), str(item["url"])))

        return cls(
            title=str(data.get("title", defaults.title)),
            tagline=str(data.get("tagline", defaults.tagline)),
            lang=str(data.get("lang", defaults.lang)),
            nav=nav,
        )


def load_site_config(path: Optional[Path]) -> SiteConfig:
    """
    Load the site configuration from a YAML file.

    Args:
        path: Config file path; None or a missing file gives defaults

    Returns:
        SiteConfig instance

    Raises:
        ConfigError: If the file is unreadable, malformed, or not a mapping
    """
    if path is None or not path.exists():
        return SiteConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return SiteConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name}: expected a mapping, got {type(data).__name__}")

    return SiteConfig.from_dict(data)
