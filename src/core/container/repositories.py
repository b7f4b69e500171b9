"""Repository dependency factories.

Request-scoped repository instances. Each request gets fresh repositories
sharing that request's session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        LoginLogRepository,
        UserRepository,
    )


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get account repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).
    """
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_login_log_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "LoginLogRepository":
    """Get login log repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import LoginLogRepository

    return LoginLogRepository(session=session)
