"""Authentication handler factories.

Request-scoped: each handler is built over the request's database session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import (
    get_db_session,
    get_device_enricher,
    get_logger,
    get_password_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.authenticate_user_handler import (
        AuthenticateUserHandler,
    )


async def get_authenticate_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "AuthenticateUserHandler":
    """Get AuthenticateUser command handler (request-scoped).

    Returns:
        AuthenticateUserHandler wired to user and login log repositories.
    """
    from src.application.commands.handlers.authenticate_user_handler import (
        AuthenticateUserHandler,
    )
    from src.infrastructure.persistence.repositories import (
        LoginLogRepository,
        UserRepository,
    )

    return AuthenticateUserHandler(
        user_repo=UserRepository(session=session),
        login_log_repo=LoginLogRepository(session=session),
        password_service=get_password_service(),
        device_enricher=get_device_enricher(),
        logger=get_logger(),
    )
