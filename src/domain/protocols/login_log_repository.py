"""LoginLogRepository protocol for login audit persistence.

Port (interface) for hexagonal architecture.

The log store is append-only apart from one operation: backfilling the
location fields of a single row after a successful remote lookup.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.login_log import LoginLog
from src.domain.entities.user import User


@dataclass(frozen=True, slots=True, kw_only=True)
class LoginLogFilter:
    """Filter predicates for login log queries.

    Every predicate is optional; set predicates are combined with AND.
    Text predicates are case-insensitive substring matches.

    Attributes:
        start_date: Inclusive lower bound on created_at.
        end_date: Inclusive upper bound on created_at.
        email: Matches the account email, or the raw log email when the
            log has no account.
        ip_address: Matches the raw IP address.
        device_type: Matches the stored device type.
        country: Matches the stored country. Rows without a stored city or
            country are kept as well; the caller resolves their location
            and matches the displayed country.
    """

    start_date: datetime | None = None
    end_date: datetime | None = None
    email: str | None = None
    ip_address: str | None = None
    device_type: str | None = None
    country: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class LoginLogRecord:
    """A login log joined with its subject account (if it still exists)."""

    log: LoginLog
    subject: User | None = None


class LoginLogRepository(Protocol):
    """Login log repository protocol (port)."""

    async def record(self, log: LoginLog) -> None:
        """Append a login attempt."""
        ...

    async def find_recent(
        self,
        log_filter: LoginLogFilter,
        limit: int,
    ) -> list[LoginLogRecord]:
        """Find matching logs, newest first, with subject accounts joined.

        Args:
            log_filter: Predicates to apply.
            limit: Maximum number of rows.
        """
        ...

    async def update_location(
        self,
        log_id: UUID,
        *,
        city: str,
        region: str | None,
        country: str,
        latitude: float | None,
        longitude: float | None,
    ) -> bool:
        """Write resolved location fields to one row and commit.

        Returns:
            True if the row was updated, False if it no longer exists.
        """
        ...
