"""Participant profile database model."""

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.user import User


class Participant(BaseMutableModel):
    """Participant profile (one per participant account).

    Fields:
        user_id: Owning account (unique, cascade delete)
        name, college: Identity shown in the directory
        hostel_name, hostel_location: Accommodation
        wifi_username, wifi_password: Event WiFi credentials (shown to the
            participant, stored as given)
        contact_number: 10-digit phone number
        avatar_url, gender: Self-service profile fields
    """

    __tablename__ = "participants"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    college: Mapped[str | None] = mapped_column(String(255), nullable=True)
    hostel_name: Mapped[str] = mapped_column(String(255), nullable=False)
    hostel_location: Mapped[str | None] = mapped_column(Text, nullable=True)
    wifi_username: Mapped[str] = mapped_column(String(255), nullable=False)
    wifi_password: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_number: Mapped[str] = mapped_column(String(10), nullable=False)
    avatar_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(32), nullable=True)

    user: Mapped["User"] = relationship(back_populates="participant")
