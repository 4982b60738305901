#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers and statistics for devlog commands.

Functions:
    setup_logger: Initialize a DevlogLogger for a CLI component

Classes:
    OperationStats: Base statistics (files processed, errors, duration)
    BuildStats: Statistics for a page build

Usage:
    from devlog.core.cli import setup_logger, BuildStats

    logger = setup_logger(log_dir, "build")
    stats = BuildStats()
    stats.posts_rendered += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from devlog.core.logging_manager import DevlogLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> DevlogLogger:
    """
    Create the logger for a CLI component under `log_dir/operations/`.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier ('build', 'validate', ...)

    Returns:
        Configured DevlogLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return DevlogLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        files_processed: Number of files read
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Seconds elapsed since start_time (frozen after the first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        return (
            f"{self.files_processed} files processed, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class BuildStats(OperationStats):
    """
    Statistics for a page build.

    Attributes:
        posts_rendered: Posts turned into HTML fragments
        unclosed_fences: Posts whose code fence was closed automatically
        page_written: Whether the output file changed on disk
    """
    posts_rendered: int = 0
    unclosed_fences: int = 0
    page_written: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.posts_rendered < 0:
            raise ValueError(f"posts_rendered must be non-negative, got {self.posts_rendered}")
        if self.unclosed_fences < 0:
            raise ValueError(f"unclosed_fences must be non-negative, got {self.unclosed_fences}")

    def summary(self) -> str:
        parts = [
            f"{self.files_processed} files processed",
            f"{self.posts_rendered} posts rendered",
        ]
        if self.unclosed_fences:
            parts.append(f"{self.unclosed_fences} unclosed fences")
        parts.append(f"{self.errors} errors")
        parts.append("page written" if self.page_written else "page unchanged")
        parts.append(f"{self.duration():.2f}s")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "posts_rendered": self.posts_rendered,
            "unclosed_fences": self.unclosed_fences,
            "page_written": self.page_written,
        })
        return d
