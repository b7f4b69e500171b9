"""User domain entity and role-specific profiles.

Pure business logic, no framework dependencies.

An account is a tagged variant: the base User record (email, UID, password
hash, role) carries exactly one profile whose shape depends on the role.

    User(role=PARTICIPANT, profile=ParticipantProfile(...))
    User(role=ADMIN, profile=AdminProfile(...))

Display Names:
    Anything that needs a human-readable name (login log enrichment, lists)
    asks for the DisplayNameProvider capability instead of switching on role.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol, runtime_checkable
from uuid import UUID

from src.domain.enums import UserRole


@runtime_checkable
class DisplayNameProvider(Protocol):
    """Capability: the object can supply a human-readable display name."""

    @property
    def display_name(self) -> str | None:
        """Return display name, or None if not set."""
        ...


@dataclass
class ParticipantProfile:
    """Participant-specific account fields.

    Attributes:
        name: Participant's full name.
        hostel_name: Assigned hostel.
        wifi_username: Event WiFi username.
        wifi_password: Event WiFi password (shown to the participant, not hashed).
        contact_number: 10-digit phone number.
        college: Participant's college (optional).
        hostel_location: Map URL for the hostel (optional).
        avatar_url: Profile picture URL (optional).
        gender: Self-reported gender (optional).
    """

    name: str
    hostel_name: str
    wifi_username: str
    wifi_password: str
    contact_number: str
    college: str | None = None
    hostel_location: str | None = None
    avatar_url: str | None = None
    gender: str | None = None

    @property
    def display_name(self) -> str | None:
        """Participant name, or None when blank."""
        return self.name or None


@dataclass
class AdminProfile:
    """Administrator-specific account fields.

    Attributes:
        name: Administrator's name.
        avatar_url: Profile picture URL (optional).
        gender: Self-reported gender (optional).
    """

    name: str
    avatar_url: str | None = None
    gender: str | None = None

    @property
    def display_name(self) -> str | None:
        """Administrator name, or None when blank."""
        return self.name or None


Profile = ParticipantProfile | AdminProfile


@dataclass
class User:
    """Account entity.

    Business Rules:
        - Admins log in with email, participants with UID
        - Admin accounts cannot be deleted
        - Profile shape must match role

    Attributes:
        id: Unique account identifier.
        email: Email address (lowercase, unique).
        password_hash: Bcrypt hash (never plaintext).
        role: Account role.
        uid: Human-assigned participant identifier (unique, optional for admins).
        profile: Role-specific profile (None only for legacy/broken rows).
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     email="alice@example.com",
        ...     password_hash="$2b$12$...",
        ...     role=UserRole.PARTICIPANT,
        ...     uid="P-001",
        ...     profile=ParticipantProfile(name="Alice", ...),
        ... )
        >>> user.display_name()
        'Alice'
    """

    id: UUID
    email: str
    password_hash: str
    role: UserRole
    uid: str | None = None
    profile: Profile | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_admin(self) -> bool:
        """Check if account has the administrative role."""
        return self.role == UserRole.ADMIN

    def display_name(self) -> str | None:
        """Return the profile's display name, if the profile provides one.

        Returns:
            Display name, or None when no profile or the name is blank.
        """
        if isinstance(self.profile, DisplayNameProvider):
            return self.profile.display_name
        return None

    def change_password_hash(self, password_hash: str) -> None:
        """Replace the stored password hash.

        Args:
            password_hash: New bcrypt hash.
        """
        self.password_hash = password_hash
        self.updated_at = datetime.now(UTC)
