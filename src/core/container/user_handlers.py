"""Account and profile handler factories (request-scoped)."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_password_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.create_user_handler import (
        CreateUserHandler,
    )
    from src.application.commands.handlers.delete_user_handler import (
        DeleteUserHandler,
    )
    from src.application.commands.handlers.update_avatar_handler import (
        UpdateAvatarHandler,
    )
    from src.application.commands.handlers.update_profile_handler import (
        UpdateProfileHandler,
    )
    from src.application.queries.handlers.get_profile_handler import (
        GetProfileHandler,
    )
    from src.application.queries.handlers.list_users_handler import (
        ListParticipantsHandler,
        ListUsersHandler,
    )


async def get_create_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateUserHandler":
    """Get CreateUser command handler (request-scoped)."""
    from src.application.commands.handlers.create_user_handler import (
        CreateUserHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return CreateUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_update_profile_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateProfileHandler":
    """Get UpdateProfile command handler (request-scoped)."""
    from src.application.commands.handlers.update_profile_handler import (
        UpdateProfileHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return UpdateProfileHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        logger=get_logger(),
        min_password_length=settings.min_password_length,
    )


async def get_update_avatar_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateAvatarHandler":
    """Get UpdateAvatar command handler (request-scoped)."""
    from src.application.commands.handlers.update_avatar_handler import (
        UpdateAvatarHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return UpdateAvatarHandler(
        user_repo=UserRepository(session=session),
        logger=get_logger(),
    )


async def get_delete_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteUserHandler":
    """Get DeleteUser command handler (request-scoped)."""
    from src.application.commands.handlers.delete_user_handler import (
        DeleteUserHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return DeleteUserHandler(
        user_repo=UserRepository(session=session),
        logger=get_logger(),
    )


async def get_get_profile_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetProfileHandler":
    """Get GetProfile query handler (request-scoped)."""
    from src.application.queries.handlers.get_profile_handler import (
        GetProfileHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return GetProfileHandler(user_repo=UserRepository(session=session))


async def get_list_users_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListUsersHandler":
    """Get ListUsers query handler (request-scoped)."""
    from src.application.queries.handlers.list_users_handler import (
        ListUsersHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return ListUsersHandler(user_repo=UserRepository(session=session))


async def get_list_participants_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListParticipantsHandler":
    """Get ListParticipants query handler (request-scoped)."""
    from src.application.queries.handlers.list_users_handler import (
        ListParticipantsHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return ListParticipantsHandler(user_repo=UserRepository(session=session))
