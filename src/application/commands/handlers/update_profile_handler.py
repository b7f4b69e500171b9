"""Update profile handler.

Flow:
1. Load the caller's account (404 if it vanished)
2. If a new password is supplied: require the current password (400),
   verify it (401), check the replacement length (400), rehash
3. Apply non-blank name and college (college only for participants)
4. Persist and return the updated account
"""

from datetime import UTC, datetime

from src.application.commands.user_commands import UpdateProfile
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import ParticipantProfile, User
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)
from src.domain.validators import MIN_PASSWORD_LENGTH


class UpdateProfileHandler:
    """Handler for self-service profile updates."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
        min_password_length: int = MIN_PASSWORD_LENGTH,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger
        self._min_password_length = min_password_length

    async def handle(self, cmd: UpdateProfile) -> Result[User, ApplicationError]:
        """Handle update profile command.

        Returns:
            Success(User) with the updated account.
            Failure(ApplicationError): NOT_FOUND, COMMAND_VALIDATION_FAILED
            (missing current password, short replacement) or UNAUTHORIZED
            (wrong current password).
        """
        user = await self._user_repo.find_by_id(cmd.context.user_id)
        if user is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message="User not found",
                    domain_error=NotFoundError(
                        code=ErrorCode.USER_NOT_FOUND,
                        message="User not found",
                        resource_type="User",
                        resource_id=str(cmd.context.user_id),
                    ),
                )
            )

        if cmd.new_password:
            match self._check_password_change(cmd, user):
                case Failure() as failure:
                    return failure
                case Success():
                    user.change_password_hash(
                        self._password_service.hash_password(cmd.new_password)
                    )

        name = (cmd.name or "").strip()
        if name and user.profile is not None:
            user.profile.name = name

        college = (cmd.college or "").strip()
        if college and isinstance(user.profile, ParticipantProfile):
            user.profile.college = college

        user.updated_at = datetime.now(UTC)
        await self._user_repo.update(user)

        self._logger.info(
            "profile_updated",
            user_id=str(user.id),
            password_changed=bool(cmd.new_password),
        )
        return Success(value=user)

    def _check_password_change(
        self, cmd: UpdateProfile, user: User
    ) -> Result[None, ApplicationError]:
        if not cmd.current_password:
            return self._validation_failure(
                ErrorCode.CURRENT_PASSWORD_REQUIRED,
                "Current password is required to set a new password",
                "current_password",
            )

        if not self._password_service.verify_password(
            cmd.current_password, user.password_hash
        ):
            self._logger.info("password_change_rejected", user_id=str(user.id))
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.UNAUTHORIZED,
                    message="Current password is incorrect",
                    domain_error=AuthenticationError(
                        code=ErrorCode.INVALID_PASSWORD,
                        message="Current password is incorrect",
                    ),
                )
            )

        if len(cmd.new_password or "") < self._min_password_length:
            return self._validation_failure(
                ErrorCode.PASSWORD_TOO_SHORT,
                f"New password must be at least {self._min_password_length} "
                "characters",
                "new_password",
            )

        return Success(value=None)

    @staticmethod
    def _validation_failure(
        code: ErrorCode, message: str, field: str
    ) -> Failure[ApplicationError]:
        return Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                message=message,
                domain_error=ValidationError(code=code, message=message, field=field),
                details={"field": field},
            )
        )
