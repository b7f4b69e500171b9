"""Login log database model.

Stores one row per login attempt. Rows are never deleted by the service;
deleting an account clears user_id (ON DELETE SET NULL) and keeps the row.

Only the location columns (city, region, country, latitude, longitude) are
ever updated, once, by the enrichment pipeline.
"""

from uuid import UUID

from sqlalchemy import Boolean, Float, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class LoginLog(BaseModel):
    """Login attempt model.

    Indexes:
        - ix_login_logs_created_at: newest-first batch queries
        - ix_login_logs_user_id: joins to users
    """

    __tablename__ = "login_logs"

    user_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        comment="Subject account (null if unknown or deleted)",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        comment="Email captured at login time",
    )
    ip_address: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        default="unknown",
        comment="Raw client address ('unknown' if unavailable)",
    )
    user_agent: Mapped[str] = mapped_column(Text, nullable=False, default="")
    success: Mapped[bool] = mapped_column(Boolean, nullable=False)

    device_type: Mapped[str | None] = mapped_column(String(32), nullable=True)
    os: Mapped[str | None] = mapped_column(String(64), nullable=True)
    browser: Mapped[str | None] = mapped_column(String(64), nullable=True)

    city: Mapped[str | None] = mapped_column(String(128), nullable=True)
    region: Mapped[str | None] = mapped_column(String(128), nullable=True)
    country: Mapped[str | None] = mapped_column(String(128), nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)

    __table_args__ = (
        Index("ix_login_logs_created_at", "created_at"),
        Index("ix_login_logs_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<LoginLog(id={self.id}, email={self.email!r}, "
            f"success={self.success})>"
        )
