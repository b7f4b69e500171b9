"""Login audit view response schemas.

GET /api/v1/logs returns:

    {
        "logs": [
            {
                "id": "...",
                "timestamp": "...",
                "activity": "SUCCESS",
                "success": true,
                "user": "Alice",
                "email": "alice@example.com",
                "data": {"ipAddress": "...", "userAgent": "...", "device": "Desktop", ...}
            }
        ],
        "stats": {"SUCCESS": 1, "FAILED": 0}
    }

The data block uses camelCase keys (ipAddress, userAgent) to match the
query parameter names.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.application.queries.handlers.list_login_logs_handler import (
    ACTIVITY_FAILED,
    ACTIVITY_SUCCESS,
    EnrichedLogView,
    LoginLogListResult,
)


class LoginLogDataResponse(BaseModel):
    """Device and location block of one row."""

    model_config = ConfigDict(populate_by_name=True)

    ip_address: str = Field(..., alias="ipAddress", description="Client IP address")
    user_agent: str = Field(..., alias="userAgent", description="Raw User-Agent")
    device: str = Field(..., description="Device class", examples=["Desktop"])
    os: str = Field(..., description="Operating system", examples=["Windows"])
    browser: str = Field(..., description="Browser", examples=["Chrome"])
    city: str = Field(..., description="City", examples=["Pune"])
    region: str | None = Field(None, description="Region")
    country: str = Field(..., description="Country", examples=["India"])
    latitude: float | None = Field(None, description="Latitude")
    longitude: float | None = Field(None, description="Longitude")


class LoginLogResponse(BaseModel):
    """One enriched login log row."""

    id: UUID = Field(..., description="Login log ID")
    timestamp: datetime = Field(..., description="Attempt timestamp")
    activity: str = Field(..., description="SUCCESS or FAILED")
    success: bool = Field(..., description="Whether authentication succeeded")
    user: str = Field(..., description="Display name (falls back to email)")
    email: str = Field(..., description="Account or login email")
    data: LoginLogDataResponse

    @classmethod
    def from_view(cls, view: EnrichedLogView) -> "LoginLogResponse":
        """Convert enriched row to response schema."""
        data = view.data
        return cls(
            id=view.id,
            timestamp=view.timestamp,
            activity=view.activity,
            success=view.success,
            user=view.user,
            email=view.email,
            data=LoginLogDataResponse(
                ip_address=data.ip_address,
                user_agent=data.user_agent,
                device=data.device,
                os=data.os,
                browser=data.browser,
                city=data.city,
                region=data.region,
                country=data.country,
                latitude=data.latitude,
                longitude=data.longitude,
            ),
        )


class LoginLogStatsResponse(BaseModel):
    """Success/failure counts over the returned rows."""

    model_config = ConfigDict(populate_by_name=True)

    success: int = Field(0, alias=ACTIVITY_SUCCESS, description="Successful attempts")
    failed: int = Field(0, alias=ACTIVITY_FAILED, description="Failed attempts")


class LoginLogListResponse(BaseModel):
    """Enriched login audit view."""

    logs: list[LoginLogResponse] = Field(..., description="Newest first")
    stats: LoginLogStatsResponse

    @classmethod
    def from_result(cls, result: LoginLogListResult) -> "LoginLogListResponse":
        """Convert handler result to response schema."""
        return cls(
            logs=[LoginLogResponse.from_view(view) for view in result.logs],
            stats=LoginLogStatsResponse(
                success=result.stats.get(ACTIVITY_SUCCESS, 0),
                failed=result.stats.get(ACTIVITY_FAILED, 0),
            ),
        )
