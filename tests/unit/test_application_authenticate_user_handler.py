"""Unit tests for AuthenticateUserHandler.

Every attempt is recorded in the login audit, successful or not, and
every failure collapses to the same UNAUTHORIZED error.
"""

import pytest

from src.application.commands.auth_commands import AuthenticateUser
from src.application.commands.handlers.authenticate_user_handler import (
    AuthenticateUserHandler,
)
from src.application.errors import ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.infrastructure.enrichers import UserAgentDeviceEnricher
from tests.utils.doubles import (
    FakePasswordService,
    InMemoryLoginLogRepository,
    InMemoryUserRepository,
    make_admin,
    make_participant,
)

IPHONE = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
)


@pytest.fixture
def alice():
    return make_participant(uid="P-0001", password_hash="hashed:secret1")


@pytest.fixture
def root():
    return make_admin(email="admin@example.com", password_hash="hashed:admin-pass")


@pytest.fixture
def login_logs():
    return InMemoryLoginLogRepository()


@pytest.fixture
def handler(alice, root, login_logs, mock_logger):
    return AuthenticateUserHandler(
        user_repo=InMemoryUserRepository([alice, root]),
        login_log_repo=login_logs,
        password_service=FakePasswordService(),
        device_enricher=UserAgentDeviceEnricher(logger=mock_logger),
        logger=mock_logger,
    )


def only_log(repo):
    assert len(repo.logs) == 1
    return next(iter(repo.logs.values()))


@pytest.mark.unit
class TestSuccessfulLogin:
    """Test valid credentials."""

    @pytest.mark.asyncio
    async def test_participant_by_uid(self, handler, alice, login_logs):
        result = await handler.handle(
            AuthenticateUser(
                role=UserRole.PARTICIPANT,
                uid="P-0001",
                password="secret1",
                ip_address="203.0.113.5",
                user_agent=IPHONE,
            )
        )

        assert isinstance(result, Success)
        assert result.value.user_id == alice.id
        assert result.value.role == UserRole.PARTICIPANT
        assert result.value.uid == "P-0001"

        log = only_log(login_logs)
        assert log.success is True
        assert log.user_id == alice.id
        assert log.email == alice.email
        assert log.ip_address == "203.0.113.5"
        assert log.device_type == "Mobile"
        assert log.city is None

    @pytest.mark.asyncio
    async def test_admin_by_email(self, handler, root, login_logs):
        result = await handler.handle(
            AuthenticateUser(
                role=UserRole.ADMIN,
                email="admin@example.com",
                password="admin-pass",
            )
        )

        assert isinstance(result, Success)
        assert result.value.user_id == root.id
        assert only_log(login_logs).success is True


@pytest.mark.unit
class TestFailedLogin:
    """Test rejected attempts."""

    @pytest.mark.asyncio
    async def test_wrong_password_recorded(self, handler, alice, login_logs):
        result = await handler.handle(
            AuthenticateUser(role=UserRole.PARTICIPANT, uid="P-0001", password="nope")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED
        assert result.error.domain_error.code == ErrorCode.INVALID_CREDENTIALS
        log = only_log(login_logs)
        assert log.success is False
        assert log.user_id == alice.id
        assert log.ip_address == "unknown"

    @pytest.mark.asyncio
    async def test_role_mismatch_rejected(self, handler, login_logs):
        result = await handler.handle(
            AuthenticateUser(
                role=UserRole.PARTICIPANT,
                uid=None,
                email="admin@example.com",
                password="admin-pass",
            )
        )

        assert isinstance(result, Failure)
        assert only_log(login_logs).success is False

    @pytest.mark.asyncio
    async def test_participant_cannot_login_as_admin(self, handler, alice, login_logs):
        result = await handler.handle(
            AuthenticateUser(
                role=UserRole.ADMIN, email=alice.email, password="secret1"
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED
        assert only_log(login_logs).user_id == alice.id

    @pytest.mark.asyncio
    async def test_unknown_email_recorded_without_account(self, handler, login_logs):
        result = await handler.handle(
            AuthenticateUser(
                role=UserRole.ADMIN, email="ghost@example.com", password="x"
            )
        )

        assert isinstance(result, Failure)
        log = only_log(login_logs)
        assert log.user_id is None
        assert log.email == "ghost@example.com"


@pytest.mark.unit
class TestAuditFailure:
    """Test audit write failures."""

    @pytest.mark.asyncio
    async def test_record_failure_does_not_block_login(self, alice, mock_logger):
        class BrokenLoginLogRepository(InMemoryLoginLogRepository):
            async def record(self, log):
                raise RuntimeError("disk full")

        handler = AuthenticateUserHandler(
            user_repo=InMemoryUserRepository([alice]),
            login_log_repo=BrokenLoginLogRepository(),
            password_service=FakePasswordService(),
            device_enricher=UserAgentDeviceEnricher(logger=mock_logger),
            logger=mock_logger,
        )

        result = await handler.handle(
            AuthenticateUser(
                role=UserRole.PARTICIPANT, uid="P-0001", password="secret1"
            )
        )

        assert isinstance(result, Success)
        assert mock_logger.error.call_args.args[0] == "login_log_record_failed"
