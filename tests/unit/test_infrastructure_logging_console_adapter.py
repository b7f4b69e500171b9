"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods pass message and context through
- error()/critical() expand exceptions into error_type/error_message
- bind() returns a new adapter over the bound logger
- Renderer selection (JSON vs console)
"""

from unittest.mock import MagicMock, patch

import pytest

from src.domain.protocols import LoggerProtocol
from src.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    def test_info_logs_message_with_context(self):
        """Test info() passes message and context through."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.info("login_logs_listed", row_count=3)

            mock_logger.info.assert_called_once_with("login_logs_listed", row_count=3)

    def test_warning_and_debug(self):
        """Test warning() and debug() pass through."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.warning("geolocation_lookup_timeout", ip_address="8.8.8.8")
            adapter.debug("login_vanished", log_id="x")

            mock_logger.warning.assert_called_once_with(
                "geolocation_lookup_timeout", ip_address="8.8.8.8"
            )
            mock_logger.debug.assert_called_once_with("login_vanished", log_id="x")

    def test_error_expands_exception(self):
        """Test error() adds error_type and error_message."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("query_failed", error=ValueError("bad"), table="login_logs")

            mock_logger.error.assert_called_once_with(
                "query_failed",
                table="login_logs",
                error_type="ValueError",
                error_message="bad",
            )

    def test_critical_without_exception(self):
        """Test critical() without an exception adds nothing."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("database_unreachable")

            mock_logger.critical.assert_called_once_with("database_unreachable")


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter(self):
        """Test bind() wraps the bound structlog logger."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(trace_id="t-1")
            bound.info("hello")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(trace_id="t-1")
            bound_logger.info.assert_called_once_with("hello")

    def test_with_context_is_bind(self):
        """Test with_context() behaves like bind()."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().with_context(user_id="u")

            mock_logger.bind.assert_called_once_with(user_id="u")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test renderer selection and protocol compliance."""

    def test_json_renderer_when_requested(self):
        """Test use_json=True configures the JSON renderer."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert mock_structlog.processors.JSONRenderer.return_value in processors

    def test_console_renderer_by_default(self):
        """Test default configuration renders for humans."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert mock_structlog.dev.ConsoleRenderer.return_value in processors

    def test_satisfies_logger_protocol(self):
        """Test structural compliance with LoggerProtocol."""
        adapter = ConsoleAdapter(use_json=True, level="WARNING")

        for name in ("debug", "info", "warning", "error", "critical", "bind"):
            assert callable(getattr(adapter, name))
        logger: LoggerProtocol = adapter
        assert logger is adapter
