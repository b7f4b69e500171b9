"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import SessionCreateRequest, LoginLogListResponse
"""

from src.schemas.auth_schemas import SessionCreateRequest, SessionCreateResponse
from src.schemas.common_schemas import MessageResponse
from src.schemas.login_log_schemas import (
    LoginLogDataResponse,
    LoginLogListResponse,
    LoginLogResponse,
    LoginLogStatsResponse,
)
from src.schemas.user_schemas import (
    AvatarUpdateRequest,
    ParticipantListResponse,
    ParticipantResponse,
    ProfileResponse,
    ProfileUpdateRequest,
    UserCreateRequest,
    UserCreateResponse,
    UserListResponse,
)

__all__ = [
    # Auth
    "SessionCreateRequest",
    "SessionCreateResponse",
    # Common
    "MessageResponse",
    # Login logs
    "LoginLogDataResponse",
    "LoginLogListResponse",
    "LoginLogResponse",
    "LoginLogStatsResponse",
    # Users
    "AvatarUpdateRequest",
    "ParticipantListResponse",
    "ParticipantResponse",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "UserCreateRequest",
    "UserCreateResponse",
    "UserListResponse",
]
