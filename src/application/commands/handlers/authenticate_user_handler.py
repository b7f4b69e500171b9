"""Authenticate user handler.

Single responsibility: Verify credentials and append the login audit row.
Does NOT generate tokens (the router does that with the token service).

Flow:
1. Look up the account by the claimed role's identifier (email or UID)
2. Check the stored role matches the claimed role
3. Verify password
4. Record the attempt (success or failure) with the classified device
5. Return Success(AuthenticatedUser) or a generic Failure

Every failure reason collapses to INVALID_CREDENTIALS so the response does
not reveal which identifiers exist.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.auth_commands import AuthenticateUser, AuthenticatedUser
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.errors import AuthenticationError
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities import LoginLog, User
from src.domain.enums import UserRole
from src.domain.protocols import (
    DeviceEnricher,
    LoggerProtocol,
    LoginLogRepository,
    PasswordHashingProtocol,
    UserRepository,
)


class AuthenticateUserHandler:
    """Handler for the login command."""

    def __init__(
        self,
        user_repo: UserRepository,
        login_log_repo: LoginLogRepository,
        password_service: PasswordHashingProtocol,
        device_enricher: DeviceEnricher,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize authentication handler with dependencies.

        Args:
            user_repo: Account repository.
            login_log_repo: Login audit repository.
            password_service: Password verification service.
            device_enricher: User agent classifier for the audit row.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._login_log_repo = login_log_repo
        self._password_service = password_service
        self._device_enricher = device_enricher
        self._logger = logger

    async def handle(
        self, cmd: AuthenticateUser
    ) -> Result[AuthenticatedUser, ApplicationError]:
        """Handle authentication command.

        Args:
            cmd: AuthenticateUser command.

        Returns:
            Success(AuthenticatedUser) on valid credentials.
            Failure(ApplicationError) with UNAUTHORIZED otherwise.
        """
        user = await self._find_user(cmd)

        authenticated = (
            user is not None
            and user.role == cmd.role
            and self._password_service.verify_password(
                cmd.password, user.password_hash
            )
        )

        await self._record_attempt(cmd, user, success=authenticated)

        if not authenticated or user is None:
            self._logger.info(
                "login_failed",
                role=cmd.role.value,
                ip_address=cmd.ip_address,
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.UNAUTHORIZED,
                    message="Invalid credentials",
                    domain_error=AuthenticationError(
                        code=ErrorCode.INVALID_CREDENTIALS,
                        message="Invalid credentials",
                    ),
                )
            )

        self._logger.info(
            "login_succeeded",
            user_id=str(user.id),
            role=user.role.value,
        )
        return Success(
            value=AuthenticatedUser(
                user_id=user.id,
                email=user.email,
                role=user.role,
                uid=user.uid,
            )
        )

    async def _find_user(self, cmd: AuthenticateUser) -> User | None:
        identifier = cmd.identifier
        if not identifier:
            return None
        if cmd.role == UserRole.ADMIN:
            return await self._user_repo.find_by_email(identifier)
        return await self._user_repo.find_by_uid(identifier)

    async def _record_attempt(
        self,
        cmd: AuthenticateUser,
        user: User | None,
        *,
        success: bool,
    ) -> None:
        device = self._device_enricher.enrich(cmd.user_agent)
        log = LoginLog(
            id=uuid7(),
            created_at=datetime.now(UTC),
            user_id=user.id if user else None,
            email=(user.email if user else None) or cmd.email or "",
            ip_address=cmd.ip_address or "unknown",
            user_agent=cmd.user_agent,
            success=success,
            device_type=device.device_type,
            os=device.os,
            browser=device.browser,
        )
        try:
            await self._login_log_repo.record(log)
        except Exception as e:
            # The attempt itself is still answered; the audit gap is logged.
            self._logger.error(
                "login_log_record_failed",
                error=e,
                log_id=str(log.id),
            )
