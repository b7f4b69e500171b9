"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class AuthenticateUser:
    """Authenticate an account and record the attempt.

    Administrators identify by email, participants by UID.

    Attributes:
        role: Role the caller claims to log in as.
        password: Plaintext password (verified, never stored).
        email: Login email (administrators).
        uid: Login UID (participants).
        ip_address: Client address, "unknown" if unavailable.
        user_agent: Raw User-Agent header.

    Example:
        >>> command = AuthenticateUser(
        ...     role=UserRole.PARTICIPANT,
        ...     uid="P-0001",
        ...     password="secret1",
        ...     ip_address="203.0.113.5",
        ...     user_agent="Mozilla/5.0 ...",
        ... )
        >>> result = await handler.handle(command)
    """

    role: UserRole
    password: str
    email: str | None = None
    uid: str | None = None
    ip_address: str = "unknown"
    user_agent: str = ""

    @property
    def identifier(self) -> str | None:
        """Identifier appropriate for the claimed role."""
        return self.email if self.role == UserRole.ADMIN else self.uid


@dataclass(frozen=True, kw_only=True)
class AuthenticatedUser:
    """Result of successful authentication.

    Attributes:
        user_id: Account identifier.
        email: Account email.
        role: Account role.
        uid: Participant UID, if any.
    """

    user_id: UUID
    email: str
    role: UserRole
    uid: str | None = None
