"""Account and profile request/response schemas.

Endpoints:
    GET    /api/v1/users              - List accounts (admin)
    POST   /api/v1/users              - Create account (admin)
    DELETE /api/v1/users/{user_id}    - Delete account (admin)
    GET    /api/v1/profile            - Caller's profile
    PATCH  /api/v1/profile            - Update caller's profile
    PATCH  /api/v1/profile/avatar     - Update caller's avatar
    GET    /api/v1/participants       - Participant directory
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.application.queries.handlers.list_users_handler import ParticipantListItem
from src.domain.entities import ParticipantProfile, User
from src.domain.enums import UserRole
from src.domain.types import ContactNumber, Email, OptionalUrl, Password, Uid


# =============================================================================
# Requests
# =============================================================================


class UserCreateRequest(BaseModel):
    """Request schema for account creation.

    POST /api/v1/users
    Returns: 201 Created

    Participant fields are required when role is "participant"; the handler
    reports which one is missing.
    """

    email: Email
    password: Password
    role: UserRole = Field(..., description="Role of the new account")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    uid: Uid | None = None
    college: str | None = Field(None, max_length=255, description="College")
    hostel_name: str | None = Field(None, max_length=255, description="Hostel")
    wifi_username: str | None = Field(None, max_length=255, description="WiFi user")
    wifi_password: str | None = Field(
        None, max_length=255, description="WiFi password"
    )
    contact_number: ContactNumber | None = None
    hostel_location: OptionalUrl = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "alice@example.com",
                "password": "secret1",
                "role": "participant",
                "name": "Alice",
                "uid": "P-0001",
                "college": "Example Institute",
                "hostel_name": "Block A",
                "wifi_username": "alice",
                "wifi_password": "wifi-pass",
                "contact_number": "9876543210",
            }
        }
    )


class UserCreateResponse(BaseModel):
    """Response schema for account creation (201 Created)."""

    id: UUID = Field(..., description="Created account ID")
    message: str = Field(default="User created", description="Success message")


class ProfileUpdateRequest(BaseModel):
    """Request schema for profile updates.

    PATCH /api/v1/profile (PUT accepted too)

    Blank fields keep existing values. new_password requires
    current_password.
    """

    name: str | None = Field(None, max_length=255, description="New display name")
    college: str | None = Field(None, max_length=255, description="New college")
    current_password: str | None = Field(
        None, max_length=128, description="Current password"
    )
    new_password: str | None = Field(
        None, max_length=128, description="Replacement password"
    )


class AvatarUpdateRequest(BaseModel):
    """Request schema for avatar updates.

    PATCH /api/v1/profile/avatar
    """

    avatar_url: str = Field(
        ...,
        max_length=2048,
        description="Uploaded avatar URL",
        examples=["https://cdn.example.com/avatars/alice.png"],
    )
    gender: str | None = Field(None, max_length=32, description="Gender")


# =============================================================================
# Responses
# =============================================================================


class ProfileResponse(BaseModel):
    """Account with its role-specific profile.

    Participant-only fields are null for administrators.
    """

    id: UUID = Field(..., description="Account ID")
    email: str = Field(..., description="Account email")
    uid: str | None = Field(None, description="Participant UID")
    role: UserRole = Field(..., description="Account role")
    name: str | None = Field(None, description="Display name")
    avatar_url: str | None = Field(None, description="Avatar URL")
    gender: str | None = Field(None, description="Gender")
    college: str | None = Field(None, description="College")
    hostel_name: str | None = Field(None, description="Hostel")
    hostel_location: str | None = Field(None, description="Hostel map URL")
    wifi_username: str | None = Field(None, description="WiFi username")
    wifi_password: str | None = Field(None, description="WiFi password")
    contact_number: str | None = Field(None, description="Contact number")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_entity(cls, user: User) -> "ProfileResponse":
        """Convert account entity to response schema.

        Args:
            user: Account with profile.

        Returns:
            ProfileResponse for API response.
        """
        profile = user.profile
        participant = profile if isinstance(profile, ParticipantProfile) else None
        return cls(
            id=user.id,
            email=user.email,
            uid=user.uid,
            role=user.role,
            name=user.display_name(),
            avatar_url=profile.avatar_url if profile else None,
            gender=profile.gender if profile else None,
            college=participant.college if participant else None,
            hostel_name=participant.hostel_name if participant else None,
            hostel_location=participant.hostel_location if participant else None,
            wifi_username=participant.wifi_username if participant else None,
            wifi_password=participant.wifi_password if participant else None,
            contact_number=participant.contact_number if participant else None,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserListResponse(BaseModel):
    """Account list response (newest first)."""

    users: list[ProfileResponse] = Field(..., description="Accounts")
    total_count: int = Field(..., description="Number of accounts")

    @classmethod
    def from_entities(cls, users: list[User]) -> "UserListResponse":
        """Convert account entities to response schema."""
        return cls(
            users=[ProfileResponse.from_entity(user) for user in users],
            total_count=len(users),
        )


class ParticipantResponse(BaseModel):
    """Participant directory entry."""

    id: UUID = Field(..., description="Account ID")
    name: str | None = Field(None, description="Participant name")
    college: str | None = Field(None, description="College")
    email: str = Field(..., description="Account email")


class ParticipantListResponse(BaseModel):
    """Participant directory (ordered by name)."""

    participants: list[ParticipantResponse] = Field(..., description="Participants")

    @classmethod
    def from_items(cls, items: list[ParticipantListItem]) -> "ParticipantListResponse":
        """Convert handler items to response schema."""
        return cls(
            participants=[
                ParticipantResponse(
                    id=item.id,
                    name=item.name,
                    college=item.college,
                    email=item.email,
                )
                for item in items
            ]
        )
