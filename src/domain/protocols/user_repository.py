"""UserRepository protocol for account persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class DuplicateAccountError(Exception):
    """Raised by save() when the email or UID is already taken.

    Covers the race where another request inserts the same account between
    exists_by_email_or_uid() and save().
    """


class UserRepository(Protocol):
    """Account repository protocol (port).

    Accounts are loaded together with their role-specific profile. This is
    a Protocol (not ABC) for structural typing; implementations don't
    inherit from it.
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find account by ID.

        Returns:
            User with profile if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find account by email address (case-insensitive)."""
        ...

    async def find_by_uid(self, uid: str) -> User | None:
        """Find account by participant UID."""
        ...

    async def exists_by_email_or_uid(self, email: str, uid: str | None) -> bool:
        """Check whether an account already uses this email or UID.

        Args:
            email: Email to check (case-insensitive).
            uid: UID to check; None checks email only.
        """
        ...

    async def save(self, user: User) -> None:
        """Create a new account together with its profile.

        Raises:
            DuplicateAccountError: If the email or UID already exists.
        """
        ...

    async def update(self, user: User) -> None:
        """Persist changes to an existing account and its profile."""
        ...

    async def delete(self, user_id: UUID) -> None:
        """Delete an account and its profile.

        Login logs keep their rows; their subject reference is cleared.
        """
        ...

    async def list_all(self) -> list[User]:
        """List every account, newest first."""
        ...

    async def list_participants(self) -> list[User]:
        """List participant accounts, ordered by display name ascending."""
        ...
