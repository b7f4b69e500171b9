"""Account commands (CQRS write operations).

Every command carries the caller's SessionContext; role checks happen in
the handlers, not in the router.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import UserRole
from src.domain.types import ContactNumber, Email, OptionalUrl, Password, Uid
from src.domain.value_objects import SessionContext


@dataclass(frozen=True, kw_only=True)
class CreateUser:
    """Create an account with its role-specific profile.

    Participant fields (hostel_name, wifi_username, wifi_password,
    contact_number) are required when role is PARTICIPANT and ignored for
    administrators.

    Attributes:
        context: Caller's session (must be an administrator).
        email: Account email.
        password: Initial plaintext password.
        role: Role of the new account.
        name: Display name.
        uid: Participant UID (required for participants).
        college: Participant's college.
        hostel_name: Assigned hostel.
        wifi_username: Event WiFi username.
        wifi_password: Event WiFi password.
        contact_number: 10-digit contact number.
        hostel_location: Hostel map URL.

    Example:
        >>> command = CreateUser(
        ...     context=admin_session,
        ...     email="alice@example.com",
        ...     password="secret1",
        ...     role=UserRole.PARTICIPANT,
        ...     name="Alice",
        ...     uid="P-0001",
        ...     hostel_name="Block A",
        ...     wifi_username="alice",
        ...     wifi_password="wifi-pass",
        ...     contact_number="9876543210",
        ... )
    """

    context: SessionContext
    email: Email
    password: Password
    role: UserRole
    name: str
    uid: Uid | None = None
    college: str | None = None
    hostel_name: str | None = None
    wifi_username: str | None = None
    wifi_password: str | None = None
    contact_number: ContactNumber | None = None
    hostel_location: OptionalUrl = None


@dataclass(frozen=True, kw_only=True)
class UpdateProfile:
    """Update the caller's own profile.

    Blank or missing fields keep their current values. A new password is
    only accepted together with the correct current password.

    Attributes:
        context: Caller's session.
        name: New display name.
        college: New college (participants only).
        current_password: Current password (required with new_password).
        new_password: Replacement password.
    """

    context: SessionContext
    name: str | None = None
    college: str | None = None
    current_password: str | None = None
    new_password: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateAvatar:
    """Set the caller's avatar URL and optionally gender.

    Attributes:
        context: Caller's session.
        avatar_url: Uploaded avatar URL.
        gender: Self-reported gender.
    """

    context: SessionContext
    avatar_url: str
    gender: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteUser:
    """Delete an account (never an administrator).

    Attributes:
        context: Caller's session (must be an administrator).
        user_id: Account to delete.
    """

    context: SessionContext
    user_id: UUID
