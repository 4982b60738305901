"""
Tests for logging_manager module.

Covers DevlogLogger file output, the null-safe logging helpers and the
CLI error handler.
"""
import click
import pytest
from pathlib import Path
from unittest.mock import MagicMock

from devlog.core.logging_manager import (
    DevlogLogger,
    NullLogger,
    handle_cli_error,
    safe_logger,
)


def flush(logger: DevlogLogger) -> None:
    for handler in logger.main_logger.handlers + logger.error_logger.handlers:
        handler.flush()


class TestDevlogLogger:
    """Tests for DevlogLogger file output."""

    def test_creates_log_dir(self, tmp_path):
        log_dir = tmp_path / "logs" / "nested"
        DevlogLogger(log_dir, "build")
        assert log_dir.is_dir()

    def test_component_log_file(self, tmp_path):
        logger = DevlogLogger(tmp_path, "build")
        logger.log_info("Rendered post", {"post": "2026-02-15"})
        flush(logger)

        content = (tmp_path / "build.log").read_text(encoding="utf-8")
        assert "INFO - Rendered post" in content
        assert '"post": "2026-02-15"' in content

    def test_operation_logged_as_json(self, tmp_path):
        logger = DevlogLogger(tmp_path, "build")
        logger.log_operation("site_build_start", {"posts_dir": "posts"})
        flush(logger)

        content = (tmp_path / "build.log").read_text(encoding="utf-8")
        assert 'OPERATION - site_build_start: {"posts_dir": "posts"}' in content

    def test_debug_reaches_file(self, tmp_path):
        logger = DevlogLogger(tmp_path, "build")
        logger.log_debug("details here")
        flush(logger)
        assert "DEBUG - details here" in (tmp_path / "build.log").read_text(encoding="utf-8")

    def test_errors_go_to_errors_log(self, tmp_path):
        logger = DevlogLogger(tmp_path, "build")
        logger.log_error(ValueError("bad post"), {"file": "2026-02-15.md"})
        flush(logger)

        content = (tmp_path / "errors.log").read_text(encoding="utf-8")
        assert "ValueError: bad post" in content
        assert "file=2026-02-15.md" in content

    def test_log_cli_error_message(self, tmp_path):
        logger = DevlogLogger(tmp_path, "build")
        message = logger.log_cli_error(ValueError("nope"))
        assert message == "❌ ValueError: nope"

    def test_recreating_logger_does_not_duplicate_handlers(self, tmp_path):
        DevlogLogger(tmp_path, "build")
        logger = DevlogLogger(tmp_path, "build")
        assert len(logger.main_logger.handlers) == 2
        assert len(logger.error_logger.handlers) == 1


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_all_methods_are_no_ops(self):
        logger = NullLogger()
        logger.log_operation("op", {"key": "value"})
        logger.log_error(ValueError("x"), {"context": "test"})
        logger.log_debug("debug", {"key": "value"})
        logger.log_info("info")
        logger.log_warning("warning")

    def test_log_cli_error_returns_formatted(self):
        result = NullLogger().log_cli_error(ValueError("test error"))
        assert "ValueError" in result
        assert "test error" in result


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_returns_logger_when_provided(self):
        mock_logger = MagicMock(spec=DevlogLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_returns_null_logger_when_none(self):
        assert isinstance(safe_logger(None), NullLogger)

    def test_null_logger_is_singleton(self):
        assert safe_logger(None) is safe_logger(None)

    def test_forwards_calls(self):
        mock_logger = MagicMock(spec=DevlogLogger)
        details = {"post": "2026-02-15"}

        safe_logger(mock_logger).log_warning("Closing unterminated code fence", details)
        mock_logger.log_warning.assert_called_once_with(
            "Closing unterminated code fence", details
        )


class TestHandleCliError:
    """Tests for the CLI error handler."""

    def _ctx(self, obj):
        ctx = click.Context(click.Command("build"))
        ctx.obj = obj
        return ctx

    def test_exits_with_code(self, capsys):
        ctx = self._ctx({"logger": None, "verbose": False})
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, ValueError("boom"), "build")
        assert exc_info.value.code == 1
        assert "❌ ValueError: boom" in capsys.readouterr().err

    def test_custom_exit_code(self):
        ctx = self._ctx({})
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, ValueError("boom"), "build", exit_code=2)
        assert exc_info.value.code == 2

    def test_logs_with_context(self):
        mock_logger = MagicMock(spec=DevlogLogger)
        mock_logger.log_cli_error.return_value = "❌ ValueError: boom"
        ctx = self._ctx({"logger": mock_logger, "verbose": True})
        error = ValueError("boom")

        with pytest.raises(SystemExit):
            handle_cli_error(ctx, error, "build", additional_context={"posts_dir": "posts"})

        mock_logger.log_cli_error.assert_called_once_with(
            error,
            {"operation": "build", "posts_dir": "posts"},
            show_traceback=True,
        )
