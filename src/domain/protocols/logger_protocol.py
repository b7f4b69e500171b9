"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured logs. Every call is a short message plus
key-value context; implementations decide rendering (console or JSON).

Security:
    - NEVER log passwords, WiFi credentials or tokens
    - Truncate raw user input (user agents) before logging

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("login_log_enriched", log_id=str(log_id), source="remote")

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("geolocation_lookup_failed", ip_address=ip)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Used for degraded-but-continuing paths: failed geolocation lookups,
        failed location write-backs, unparseable user agents.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or short message.
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message (process-wide failure)."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Example:
            handler_logger = logger.bind(handler="list_login_logs")
            handler_logger.info("query_started", filter_count=2)
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
