"""Create user handler.

Flow:
1. Require an administrator caller
2. Check role-specific required fields
3. Reject duplicate email or UID
4. Hash password and persist account plus profile
5. Return Success(user_id)
"""

from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.user_commands import CreateUser
from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    admin_required,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import AdminProfile, ParticipantProfile, User
from src.domain.enums import UserRole
from src.domain.protocols import (
    DuplicateAccountError,
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)

# Participant fields that must be present and non-blank
_PARTICIPANT_REQUIRED_FIELDS = (
    "uid",
    "hostel_name",
    "wifi_username",
    "wifi_password",
    "contact_number",
)


class CreateUserHandler:
    """Handler for account creation by administrators."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            user_repo: Account repository.
            password_service: Password hashing service.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: CreateUser) -> Result[UUID, ApplicationError]:
        """Handle create user command.

        Args:
            cmd: CreateUser command.

        Returns:
            Success(user_id) when created.
            Failure(ApplicationError): FORBIDDEN for non-admin callers,
            COMMAND_VALIDATION_FAILED for missing fields, CONFLICT for a
            duplicate email or UID, COMMAND_EXECUTION_FAILED on store errors.
        """
        if not cmd.context.is_admin:
            return Failure(error=admin_required())

        if not cmd.name or not cmd.name.strip():
            return self._missing_field("name")

        if cmd.role == UserRole.PARTICIPANT:
            for field_name in _PARTICIPANT_REQUIRED_FIELDS:
                value = getattr(cmd, field_name)
                if value is None or not str(value).strip():
                    return self._missing_field(field_name)

        if await self._user_repo.exists_by_email_or_uid(cmd.email, cmd.uid):
            self._logger.info("user_create_conflict", role=cmd.role.value)
            return self._conflict()

        now = datetime.now(UTC)
        user = User(
            id=uuid7(),
            email=cmd.email,
            password_hash=self._password_service.hash_password(cmd.password),
            role=cmd.role,
            uid=cmd.uid,
            profile=self._build_profile(cmd),
            created_at=now,
            updated_at=now,
        )

        try:
            await self._user_repo.save(user)
        except DuplicateAccountError:
            self._logger.info("user_create_conflict", role=cmd.role.value)
            return self._conflict()
        except Exception as e:
            self._logger.error("user_create_failed", error=e)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Failed to create user",
                )
            )

        self._logger.info(
            "user_created",
            user_id=str(user.id),
            role=user.role.value,
            created_by=str(cmd.context.user_id),
        )
        return Success(value=user.id)

    @staticmethod
    def _build_profile(cmd: CreateUser) -> ParticipantProfile | AdminProfile:
        name = cmd.name.strip()
        if cmd.role == UserRole.ADMIN:
            return AdminProfile(name=name)
        return ParticipantProfile(
            name=name,
            college=cmd.college or None,
            hostel_name=cmd.hostel_name or "",
            wifi_username=cmd.wifi_username or "",
            wifi_password=cmd.wifi_password or "",
            contact_number=cmd.contact_number or "",
            hostel_location=cmd.hostel_location or None,
        )

    @staticmethod
    def _conflict() -> Failure[ApplicationError]:
        message = "User with this email or UID already exists"
        return Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.CONFLICT,
                message=message,
                domain_error=ConflictError(
                    code=ErrorCode.USER_ALREADY_EXISTS,
                    message=message,
                    resource_type="User",
                    conflicting_field="email_or_uid",
                ),
            )
        )

    @staticmethod
    def _missing_field(field_name: str) -> Failure[ApplicationError]:
        message = f"{field_name} is required"
        return Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                message=message,
                domain_error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=message,
                    field=field_name,
                ),
                details={"field": field_name},
            )
        )
