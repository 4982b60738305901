#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Centralized logging for devlog builds and checks.

Each component writes a rotating `<component>.log` with everything from
DEBUG up, and all components share a rotating `errors.log`. Warnings are
also echoed to the console so a build run shows skipped posts and
auto-closed fences without opening the log.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


FILE_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
)
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class DevlogLogger:
    """
    Component logger with rotating file output.

    Attributes:
        log_dir: Directory for log files
        component_name: Component identifier ('build', 'validate', ...)
        main_logger: Logger receiving every message for the component
        error_logger: Logger receiving errors only
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "devlog",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        """
        Initialize the logger and its handlers.

        Args:
            log_dir: Directory for log files (created if missing)
            component_name: Component identifier, also the log file stem
            max_bytes: Size at which a log file is rotated (default: 5MB)
            backup_count: Number of rotated files to keep (default: 3)
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = logging.getLogger(f"devlog.{self.component_name}")
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.handlers = []

        self.error_logger = logging.getLogger(f"devlog.{self.component_name}.errors")
        self.error_logger.setLevel(logging.ERROR)
        self.error_logger.handlers = []

        self._add_file_handler(
            self.main_logger,
            self.log_dir / f"{self.component_name}.log",
            logging.DEBUG,
        )
        self._add_file_handler(
            self.error_logger, self.log_dir / "errors.log", logging.ERROR
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(
            logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S")
        )
        self.main_logger.addHandler(console_handler)

    def _add_file_handler(
        self, logger: logging.Logger, file_path: Path, level: int
    ) -> None:
        handler = RotatingFileHandler(
            file_path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)

    @staticmethod
    def _with_details(prefix: str, message: str, details: Optional[Dict[str, Any]]) -> str:
        if details:
            return f"{prefix} - {message}: {json.dumps(details, default=str)}"
        return f"{prefix} - {message}"

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Record a named operation and its details as JSON.

        Args:
            operation: Operation name (e.g. 'site_build_start')
            details: Optional details dictionary
        """
        self.main_logger.info(
            f"OPERATION - {operation}: {json.dumps(details or {}, default=str)}"
        )

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Write an error, its context and the current traceback to errors.log.

        Args:
            error: Exception that occurred
            context: Optional context (operation, file, identifier, ...)
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {context_str}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(self._with_details("DEBUG", message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(self._with_details("INFO", message, details))

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        self.main_logger.warning(self._with_details("WARNING", message, details))

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log full error details to file and return a short message for the terminal.

        Args:
            error: Exception to report
            context: Optional context information
            show_traceback: Append the traceback to the returned message

        Returns:
            One-line message, e.g. '❌ PageBuildError: Posts directory not found'
        """
        self.log_error(error, context or {"source": "cli"})
        message = f"❌ {type(error).__name__}: {error}"
        if show_traceback:
            return f"{message}\n\n{traceback.format_exc()}"
        return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed CLI command and exit.

    Logs the error with its context through the logger stored on the
    click context, echoes a one-line message to stderr (with traceback
    when --verbose was given) and exits with `exit_code`.

    Args:
        ctx: Click context holding 'logger' and 'verbose'
        error: Exception that occurred
        operation: Name of the failed command ('build', 'validate', ...)
        additional_context: Extra context such as the posts directory
        exit_code: Process exit code (default: 1)
    """
    obj = ctx.obj or {}
    logger: Optional[DevlogLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context: Dict[str, Any] = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    message = safe_logger(logger).log_cli_error(error, context, show_traceback=verbose)
    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """Logger with the DevlogLogger interface that discards everything."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return f"❌ {type(error).__name__}: {error}"


_null_logger = NullLogger()


def safe_logger(logger: Optional[DevlogLogger]) -> DevlogLogger:
    """
    Return `logger`, or the shared NullLogger when it is None.

    Lets callers write `safe_logger(self.logger).log_info(...)` instead of
    guarding every call with `if self.logger:`.
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
