"""Account roles.

Every account is exactly one of these. The role decides which identifier is
used at login (email for admins, UID for participants) and which profile
shape is persisted alongside the account.

Usage:
    from src.domain.enums import UserRole

    if context.role == UserRole.ADMIN:
        # Admin-only logic
"""

from enum import Enum


class UserRole(str, Enum):
    """Account roles.

    String Enum:
        Inherits from str so values serialize directly into JWT claims and
        JSON responses.
    """

    ADMIN = "admin"
    """Contest administrator. Manages participant accounts, audits logins."""

    PARTICIPANT = "participant"
    """Contest participant. Views own profile, hostel and WiFi credentials."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values ['admin', 'participant'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
