"""Account queries (CQRS read operations)."""

from dataclasses import dataclass

from src.domain.value_objects import SessionContext


@dataclass(frozen=True, kw_only=True)
class GetProfile:
    """Get the caller's own account and profile.

    Attributes:
        context: Caller's session.
    """

    context: SessionContext


@dataclass(frozen=True, kw_only=True)
class ListUsers:
    """List every account (administrators only).

    Attributes:
        context: Caller's session.
    """

    context: SessionContext


@dataclass(frozen=True, kw_only=True)
class ListParticipants:
    """List participants for the staff directory.

    Attributes:
        context: Caller's session (any role).
    """

    context: SessionContext
