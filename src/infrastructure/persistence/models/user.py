"""User database model.

One row per account. The role-specific profile lives in a separate table
(participants or admins) linked one-to-one by user_id.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.admin import Admin
    from src.infrastructure.persistence.models.participant import Participant


class User(BaseMutableModel):
    """Account model.

    Fields:
        id, created_at, updated_at: From BaseMutableModel
        email: Unique email address (lowercase, indexed)
        uid: Unique participant UID (nullable for administrators)
        password_hash: Bcrypt hashed password
        role: "admin" or "participant"

    Relationships:
        - participant: One-to-one profile (cascade delete)
        - admin: One-to-one profile (cascade delete)

    Both profile relationships load eagerly (selectin) so repositories can
    map a complete domain User without extra queries.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Account email address (unique, lowercase)",
    )

    uid: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        unique=True,
        index=True,
        comment="Participant UID (unique, login identifier for participants)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        index=True,
        comment="Account role (admin, participant)",
    )

    participant: Mapped["Participant | None"] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
        uselist=False,
    )

    admin: Mapped["Admin | None"] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
        uselist=False,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email!r}, role={self.role!r})>"
