"""create_accounts_and_login_logs

Revision ID: 3f9c2a7d41b0
Revises:
Create Date: 2026-03-01 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f9c2a7d41b0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(*, mutable: bool) -> list[sa.Column]:
    columns = [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        )
    ]
    if mutable:
        columns.append(
            sa.Column(
                "updated_at",
                sa.DateTime(timezone=True),
                server_default=sa.text("now()"),
                nullable=False,
            )
        )
    return columns


def upgrade() -> None:
    """Create users, participants, admins and login_logs tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(mutable=True),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Account email address (unique, lowercase)",
        ),
        sa.Column(
            "uid",
            sa.String(length=64),
            nullable=True,
            comment="Participant UID (unique, login identifier for participants)",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt hashed password",
        ),
        sa.Column(
            "role",
            sa.String(length=20),
            nullable=False,
            comment="Account role (admin, participant)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_uid", "users", ["uid"], unique=True)
    op.create_index("ix_users_role", "users", ["role"], unique=False)

    op.create_table(
        "participants",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(mutable=True),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("college", sa.String(length=255), nullable=True),
        sa.Column("hostel_name", sa.String(length=255), nullable=False),
        sa.Column("hostel_location", sa.Text(), nullable=True),
        sa.Column("wifi_username", sa.String(length=255), nullable=False),
        sa.Column("wifi_password", sa.String(length=255), nullable=False),
        sa.Column("contact_number", sa.String(length=10), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("gender", sa.String(length=32), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_participants_user_id", "participants", ["user_id"], unique=True
    )
    op.create_index("ix_participants_name", "participants", ["name"], unique=False)

    op.create_table(
        "admins",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(mutable=True),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("gender", sa.String(length=32), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_admins_user_id", "admins", ["user_id"], unique=True)

    op.create_table(
        "login_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(mutable=False),
        sa.Column(
            "user_id",
            sa.Uuid(),
            nullable=True,
            comment="Subject account (null if unknown or deleted)",
        ),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Email captured at login time",
        ),
        sa.Column(
            "ip_address",
            sa.String(length=64),
            nullable=False,
            comment="Raw client address ('unknown' if unavailable)",
        ),
        sa.Column("user_agent", sa.Text(), nullable=False),
        sa.Column("success", sa.Boolean(), nullable=False),
        sa.Column("device_type", sa.String(length=32), nullable=True),
        sa.Column("os", sa.String(length=64), nullable=True),
        sa.Column("browser", sa.String(length=64), nullable=True),
        sa.Column("city", sa.String(length=128), nullable=True),
        sa.Column("region", sa.String(length=128), nullable=True),
        sa.Column("country", sa.String(length=128), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_login_logs_created_at", "login_logs", ["created_at"], unique=False
    )
    op.create_index("ix_login_logs_user_id", "login_logs", ["user_id"], unique=False)


def downgrade() -> None:
    """Drop login_logs, admins, participants and users tables."""
    op.drop_index("ix_login_logs_user_id", table_name="login_logs")
    op.drop_index("ix_login_logs_created_at", table_name="login_logs")
    op.drop_table("login_logs")

    op.drop_index("ix_admins_user_id", table_name="admins")
    op.drop_table("admins")

    op.drop_index("ix_participants_name", table_name="participants")
    op.drop_index("ix_participants_user_id", table_name="participants")
    op.drop_table("participants")

    op.drop_index("ix_users_role", table_name="users")
    op.drop_index("ix_users_uid", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
