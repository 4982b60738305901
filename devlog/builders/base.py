#!/usr/bin/env python3
"""
base.py
-------------------
Base class for devlog builders.

BaseBuilder holds the optional logger and the null-safe logging helpers
shared by every builder; subclasses implement build().
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from devlog.core.cli import OperationStats
from devlog.core.logging_manager import DevlogLogger, safe_logger


class BaseBuilder(ABC):
    """
    Abstract base class for builder implementations.

    Attributes:
        logger: Optional logger for operation tracking
    """

    def __init__(self, logger: Optional[DevlogLogger] = None):
        self.logger = logger

    @abstractmethod
    def build(self) -> OperationStats:
        """
        Execute the build.

        Returns:
            OperationStats subclass instance with build results
        """
        pass

    def _log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        safe_logger(self.logger).log_operation(operation, details or {})

    def _log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        safe_logger(self.logger).log_debug(message, details)

    def _log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        safe_logger(self.logger).log_info(message, details)

    def _log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        safe_logger(self.logger).log_warning(message, details)

    def _log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        safe_logger(self.logger).log_error(error, context or {})
