"""Update avatar handler.

Stores the avatar URL (and optional gender) on the caller's profile. The
image itself is uploaded elsewhere; only the URL lives here.
"""

from datetime import UTC, datetime

from src.application.commands.user_commands import UpdateAvatar
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.protocols import LoggerProtocol, UserRepository


class UpdateAvatarHandler:
    """Handler for avatar updates."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: UpdateAvatar) -> Result[User, ApplicationError]:
        """Handle update avatar command.

        Returns:
            Success(User) with the updated account.
            Failure(ApplicationError) with COMMAND_VALIDATION_FAILED for a
            blank URL or NOT_FOUND when the account or profile is missing.
        """
        avatar_url = cmd.avatar_url.strip()
        if not avatar_url:
            message = "Avatar URL is required"
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    message=message,
                    domain_error=ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message=message,
                        field="avatar_url",
                    ),
                    details={"field": "avatar_url"},
                )
            )

        user = await self._user_repo.find_by_id(cmd.context.user_id)
        if user is None or user.profile is None:
            code = (
                ErrorCode.USER_NOT_FOUND
                if user is None
                else ErrorCode.PROFILE_NOT_FOUND
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message="Profile not found",
                    domain_error=NotFoundError(
                        code=code,
                        message="Profile not found",
                        resource_type="Profile",
                        resource_id=str(cmd.context.user_id),
                    ),
                )
            )

        user.profile.avatar_url = avatar_url
        if cmd.gender:
            user.profile.gender = cmd.gender.strip()
        user.updated_at = datetime.now(UTC)
        await self._user_repo.update(user)

        self._logger.info("avatar_updated", user_id=str(user.id))
        return Success(value=user)
