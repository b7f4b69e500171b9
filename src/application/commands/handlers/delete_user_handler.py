"""Delete user handler.

Administrators may delete participant accounts. Administrator accounts are
never deleted through this path. Login logs of the deleted account remain;
the store clears their subject reference.
"""

from uuid import UUID

from src.application.commands.user_commands import DeleteUser
from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    admin_required,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, UserRepository


class DeleteUserHandler:
    """Handler for account deletion."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: DeleteUser) -> Result[UUID, ApplicationError]:
        """Handle delete user command.

        Returns:
            Success(user_id) of the deleted account.
            Failure(ApplicationError): FORBIDDEN for non-admin callers or an
            administrator target, NOT_FOUND for an unknown id.
        """
        if not cmd.context.is_admin:
            return Failure(error=admin_required())

        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message="User not found",
                    domain_error=NotFoundError(
                        code=ErrorCode.USER_NOT_FOUND,
                        message="User not found",
                        resource_type="User",
                        resource_id=str(cmd.user_id),
                    ),
                )
            )

        if user.is_admin:
            self._logger.warning(
                "admin_deletion_refused",
                target_user_id=str(user.id),
                requested_by=str(cmd.context.user_id),
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.FORBIDDEN,
                    message="Administrator accounts cannot be deleted",
                    domain_error=AuthorizationError(
                        code=ErrorCode.ADMIN_DELETION_FORBIDDEN,
                        message="Administrator accounts cannot be deleted",
                    ),
                )
            )

        await self._user_repo.delete(user.id)
        self._logger.info(
            "user_deleted",
            user_id=str(user.id),
            deleted_by=str(cmd.context.user_id),
        )
        return Success(value=user.id)
