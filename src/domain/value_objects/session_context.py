"""Session context value object.

Identity of the caller, extracted from a validated access token and passed
explicitly into every handler. Handlers never read the request or any
process-wide session state.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionContext:
    """Authenticated caller identity.

    Attributes:
        user_id: Account identifier (JWT 'sub' claim).
        email: Account email (JWT 'email' claim).
        role: Account role (JWT 'role' claim).
        uid: Participant UID, if any (JWT 'uid' claim).
    """

    user_id: UUID
    email: str
    role: UserRole
    uid: str | None = None

    @property
    def is_admin(self) -> bool:
        """Check if caller has the administrative role."""
        return self.role == UserRole.ADMIN
