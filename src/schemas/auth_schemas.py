"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST   /api/v1/sessions     - Create session (login)
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.domain.enums import UserRole


# =============================================================================
# Login
# =============================================================================


class SessionCreateRequest(BaseModel):
    """Request schema for session creation (login).

    POST /api/v1/sessions
    Returns: 201 Created

    Administrators identify with email, participants with UID.
    """

    role: UserRole = Field(
        ...,
        description="Role to log in as",
        examples=["participant"],
    )
    email: str | None = Field(
        None,
        max_length=255,
        description="Login email (administrators)",
        examples=["admin@example.com"],
    )
    uid: str | None = Field(
        None,
        max_length=64,
        description="Login UID (participants)",
        examples=["P-0001"],
    )
    password: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Account password",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "role": "participant",
                "uid": "P-0001",
                "password": "secret1",
            }
        }
    )

    @model_validator(mode="after")
    def check_identifier(self) -> "SessionCreateRequest":
        """Require the identifier that matches the role."""
        if self.role == UserRole.ADMIN and not (self.email and self.email.strip()):
            raise ValueError("email is required for admin login")
        if self.role == UserRole.PARTICIPANT and not (self.uid and self.uid.strip()):
            raise ValueError("uid is required for participant login")
        return self


class SessionCreateResponse(BaseModel):
    """Response schema for session creation (201 Created)."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Access token lifetime in seconds")
    user_id: UUID = Field(..., description="Authenticated account ID")
    role: UserRole = Field(..., description="Authenticated account role")
