"""Bootstrap administrator seeder.

Only administrators can create accounts, so a fresh database needs one
administrator before the portal is usable. The account is taken from
BOOTSTRAP_ADMIN_EMAIL / BOOTSTRAP_ADMIN_PASSWORD (and optionally
BOOTSTRAP_ADMIN_NAME). Nothing is seeded when either is unset.

Idempotent via email existence check - safe to run on every migration.
"""

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from src.core.config import settings
from src.infrastructure.security import BcryptPasswordService

logger = structlog.get_logger(__name__)


async def seed_bootstrap_admin(session: AsyncSession) -> None:
    """Seed the first administrator account if configured and missing.

    Args:
        session: Async database session.
    """
    email = (settings.bootstrap_admin_email or "").strip().lower()
    password = settings.bootstrap_admin_password
    if not email or not password:
        logger.debug("bootstrap_admin_not_configured")
        return

    result = await session.execute(
        text("SELECT 1 FROM users WHERE email = :email LIMIT 1"),
        {"email": email},
    )
    if result.fetchone() is not None:
        logger.debug("bootstrap_admin_exists", email=email)
        return

    password_hash = BcryptPasswordService(
        cost_factor=settings.bcrypt_rounds
    ).hash_password(password)

    user_id = uuid7()
    await session.execute(
        text("""
            INSERT INTO users (id, email, uid, password_hash, role, created_at, updated_at)
            VALUES (:id, :email, NULL, :password_hash, 'admin', NOW(), NOW())
        """),
        {"id": user_id, "email": email, "password_hash": password_hash},
    )
    await session.execute(
        text("""
            INSERT INTO admins (id, user_id, name, created_at, updated_at)
            VALUES (:id, :user_id, :name, NOW(), NOW())
        """),
        {"id": uuid7(), "user_id": user_id, "name": settings.bootstrap_admin_name},
    )

    logger.info("bootstrap_admin_seeded", user_id=str(user_id), email=email)
