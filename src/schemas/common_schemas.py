"""Common schemas used across multiple API endpoints."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement response.

    Attributes:
        message: Human-readable outcome.
    """

    message: str = Field(..., description="Outcome message")
