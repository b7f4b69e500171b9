"""Login log queries (CQRS read operations).

Queries are immutable data containers. Raw filter strings are carried as
received; the handler decides how to interpret them.
"""

from dataclasses import dataclass

from src.domain.value_objects import SessionContext


@dataclass(frozen=True, kw_only=True)
class ListLoginLogs:
    """List the most recent login attempts with enrichment.

    Attributes:
        context: Caller's session (must be an administrator).
        start_date: Inclusive lower date bound ("2024-03-01" or ISO datetime).
        end_date: Inclusive upper date bound; a date-only value covers the
            whole day.
        email: Case-insensitive email substring.
        ip_address: Case-insensitive IP address substring.
        device_type: Case-insensitive device type substring.
        country: Case-insensitive country substring.

    Example:
        >>> query = ListLoginLogs(
        ...     context=session,
        ...     start_date="2024-03-01",
        ...     country="india",
        ... )
        >>> result = await handler.handle(query)
    """

    context: SessionContext
    start_date: str | None = None
    end_date: str | None = None
    email: str | None = None
    ip_address: str | None = None
    device_type: str | None = None
    country: str | None = None
