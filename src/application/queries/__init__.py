"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetProfile, ListLoginLogs).

Each query has a corresponding handler that fetches and returns the requested
data. The login log query is the one exception to "never change state": it
backfills resolved locations onto the rows it reads.
"""

from src.application.queries.login_log_queries import ListLoginLogs
from src.application.queries.user_queries import (
    GetProfile,
    ListParticipants,
    ListUsers,
)

__all__ = [
    # Login log queries
    "ListLoginLogs",
    # Account queries
    "GetProfile",
    "ListParticipants",
    "ListUsers",
]
