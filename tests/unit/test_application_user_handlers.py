"""Unit tests for account command and query handlers.

Tests cover:
- CreateUserHandler: admin-only, required fields, duplicates, persistence
- UpdateProfileHandler: name/college, password change rules
- UpdateAvatarHandler: URL and gender
- DeleteUserHandler: admin-only, unknown id, administrator protection
- GetProfileHandler, ListUsersHandler, ListParticipantsHandler
"""

from uuid_extensions import uuid7

import pytest

from src.application.commands.handlers.create_user_handler import CreateUserHandler
from src.application.commands.handlers.delete_user_handler import DeleteUserHandler
from src.application.commands.handlers.update_avatar_handler import (
    UpdateAvatarHandler,
)
from src.application.commands.handlers.update_profile_handler import (
    UpdateProfileHandler,
)
from src.application.commands.user_commands import (
    CreateUser,
    DeleteUser,
    UpdateAvatar,
    UpdateProfile,
)
from src.application.errors import ApplicationErrorCode
from src.application.queries.handlers.get_profile_handler import GetProfileHandler
from src.application.queries.handlers.list_users_handler import (
    ListParticipantsHandler,
    ListUsersHandler,
)
from src.application.queries.user_queries import (
    GetProfile,
    ListParticipants,
    ListUsers,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities import AdminProfile, ParticipantProfile
from src.domain.enums import UserRole
from src.domain.protocols import DuplicateAccountError
from tests.utils.doubles import (
    FakePasswordService,
    InMemoryUserRepository,
    admin_session,
    make_admin,
    make_participant,
    participant_session,
    session_for,
)


def participant_command(**overrides) -> CreateUser:
    fields = {
        "context": admin_session(),
        "email": "carol@example.com",
        "password": "secret1",
        "role": UserRole.PARTICIPANT,
        "name": "Carol",
        "uid": "P-0003",
        "college": "Example Institute",
        "hostel_name": "Block C",
        "wifi_username": "carol",
        "wifi_password": "wifi-pass",
        "contact_number": "9876543210",
    }
    fields.update(overrides)
    return CreateUser(**fields)


@pytest.mark.unit
class TestCreateUserHandler:
    """Test account creation."""

    @pytest.fixture
    def repo(self):
        return InMemoryUserRepository([make_participant(uid="P-0001")])

    @pytest.fixture
    def handler(self, repo, mock_logger):
        return CreateUserHandler(
            user_repo=repo,
            password_service=FakePasswordService(),
            logger=mock_logger,
        )

    @pytest.mark.asyncio
    async def test_creates_participant(self, handler, repo):
        result = await handler.handle(participant_command())

        assert isinstance(result, Success)
        user = repo.users[result.value]
        assert user.role == UserRole.PARTICIPANT
        assert user.uid == "P-0003"
        assert user.password_hash == "hashed:secret1"
        assert isinstance(user.profile, ParticipantProfile)
        assert user.profile.hostel_name == "Block C"

    @pytest.mark.asyncio
    async def test_creates_admin_without_participant_fields(self, handler, repo):
        result = await handler.handle(
            CreateUser(
                context=admin_session(),
                email="second@example.com",
                password="secret1",
                role=UserRole.ADMIN,
                name="Second",
            )
        )

        assert isinstance(result, Success)
        assert isinstance(repo.users[result.value].profile, AdminProfile)

    @pytest.mark.asyncio
    async def test_participant_caller_forbidden(self, handler, repo):
        result = await handler.handle(
            participant_command(context=participant_session())
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        assert repo.saved == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field_name", ["uid", "hostel_name", "contact_number"])
    async def test_missing_participant_field(self, handler, field_name):
        result = await handler.handle(participant_command(**{field_name: None}))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.details == {"field": field_name}

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, handler):
        result = await handler.handle(participant_command(name="   "))

        assert result.error.details == {"field": "name"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [{"email": "alice@example.com"}, {"uid": "P-0001"}],
    )
    async def test_duplicate_rejected(self, handler, overrides):
        result = await handler.handle(participant_command(**overrides))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT
        assert result.error.domain_error.code == ErrorCode.USER_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_store_failure(self, mock_logger):
        class BrokenRepository(InMemoryUserRepository):
            async def save(self, user):
                raise RuntimeError("insert failed")

        handler = CreateUserHandler(
            user_repo=BrokenRepository(),
            password_service=FakePasswordService(),
            logger=mock_logger,
        )

        result = await handler.handle(participant_command())

        assert result.error.code == ApplicationErrorCode.COMMAND_EXECUTION_FAILED
        mock_logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_duplicate_inserted_concurrently(self, mock_logger):
        class RacingRepository(InMemoryUserRepository):
            async def save(self, user):
                raise DuplicateAccountError("duplicate key value")

        handler = CreateUserHandler(
            user_repo=RacingRepository(),
            password_service=FakePasswordService(),
            logger=mock_logger,
        )

        result = await handler.handle(participant_command())

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT
        assert result.error.domain_error.code == ErrorCode.USER_ALREADY_EXISTS
        mock_logger.error.assert_not_called()


@pytest.mark.unit
class TestUpdateProfileHandler:
    """Test self-service profile updates."""

    @pytest.fixture
    def alice(self):
        return make_participant(password_hash="hashed:secret1")

    @pytest.fixture
    def repo(self, alice):
        return InMemoryUserRepository([alice])

    @pytest.fixture
    def handler(self, repo, mock_logger):
        return UpdateProfileHandler(
            user_repo=repo,
            password_service=FakePasswordService(),
            logger=mock_logger,
            min_password_length=6,
        )

    @pytest.mark.asyncio
    async def test_updates_name_and_college(self, handler, alice):
        result = await handler.handle(
            UpdateProfile(
                context=session_for(alice), name=" Alicia ", college="New College"
            )
        )

        assert isinstance(result, Success)
        assert alice.profile.name == "Alicia"
        assert alice.profile.college == "New College"
        assert alice.password_hash == "hashed:secret1"

    @pytest.mark.asyncio
    async def test_blank_values_leave_fields_unchanged(self, handler, alice):
        await handler.handle(UpdateProfile(context=session_for(alice), name="  "))

        assert alice.profile.name == "Alice"

    @pytest.mark.asyncio
    async def test_password_change(self, handler, alice):
        result = await handler.handle(
            UpdateProfile(
                context=session_for(alice),
                current_password="secret1",
                new_password="secret2",
            )
        )

        assert isinstance(result, Success)
        assert alice.password_hash == "hashed:secret2"

    @pytest.mark.asyncio
    async def test_password_change_requires_current(self, handler, alice):
        result = await handler.handle(
            UpdateProfile(context=session_for(alice), new_password="secret2")
        )

        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.domain_error.code == ErrorCode.CURRENT_PASSWORD_REQUIRED

    @pytest.mark.asyncio
    async def test_wrong_current_password(self, handler, alice):
        result = await handler.handle(
            UpdateProfile(
                context=session_for(alice),
                current_password="wrong",
                new_password="secret2",
            )
        )

        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED
        assert alice.password_hash == "hashed:secret1"

    @pytest.mark.asyncio
    async def test_short_new_password(self, handler, alice, repo):
        result = await handler.handle(
            UpdateProfile(
                context=session_for(alice),
                name="Alicia",
                current_password="secret1",
                new_password="abc",
            )
        )

        assert result.error.domain_error.code == ErrorCode.PASSWORD_TOO_SHORT
        assert repo.updated == []
        assert alice.profile.name == "Alice"

    @pytest.mark.asyncio
    async def test_unknown_account(self, handler):
        result = await handler.handle(UpdateProfile(context=participant_session()))

        assert result.error.code == ApplicationErrorCode.NOT_FOUND


@pytest.mark.unit
class TestUpdateAvatarHandler:
    """Test avatar updates."""

    @pytest.mark.asyncio
    async def test_sets_avatar_and_gender(self, mock_logger):
        alice = make_participant()
        handler = UpdateAvatarHandler(InMemoryUserRepository([alice]), mock_logger)

        result = await handler.handle(
            UpdateAvatar(
                context=session_for(alice),
                avatar_url="https://cdn.example.com/a.png",
                gender="female",
            )
        )

        assert isinstance(result, Success)
        assert alice.profile.avatar_url == "https://cdn.example.com/a.png"
        assert alice.profile.gender == "female"

    @pytest.mark.asyncio
    async def test_blank_url_rejected(self, mock_logger):
        alice = make_participant()
        handler = UpdateAvatarHandler(InMemoryUserRepository([alice]), mock_logger)

        result = await handler.handle(
            UpdateAvatar(context=session_for(alice), avatar_url="  ")
        )

        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED

    @pytest.mark.asyncio
    async def test_unknown_account(self, mock_logger):
        handler = UpdateAvatarHandler(InMemoryUserRepository(), mock_logger)

        result = await handler.handle(
            UpdateAvatar(context=participant_session(), avatar_url="https://x.test/a")
        )

        assert result.error.code == ApplicationErrorCode.NOT_FOUND


@pytest.mark.unit
class TestDeleteUserHandler:
    """Test account deletion."""

    @pytest.mark.asyncio
    async def test_deletes_participant(self, mock_logger):
        alice = make_participant()
        repo = InMemoryUserRepository([alice])
        handler = DeleteUserHandler(repo, mock_logger)

        result = await handler.handle(
            DeleteUser(context=admin_session(), user_id=alice.id)
        )

        assert result == Success(value=alice.id)
        assert repo.deleted == [alice.id]

    @pytest.mark.asyncio
    async def test_participant_caller_forbidden(self, mock_logger):
        alice = make_participant()
        repo = InMemoryUserRepository([alice])

        result = await DeleteUserHandler(repo, mock_logger).handle(
            DeleteUser(context=participant_session(), user_id=alice.id)
        )

        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        assert repo.deleted == []

    @pytest.mark.asyncio
    async def test_unknown_id(self, mock_logger):
        result = await DeleteUserHandler(InMemoryUserRepository(), mock_logger).handle(
            DeleteUser(context=admin_session(), user_id=uuid7())
        )

        assert result.error.code == ApplicationErrorCode.NOT_FOUND

    @pytest.mark.asyncio
    async def test_admin_accounts_protected(self, mock_logger):
        root = make_admin()
        repo = InMemoryUserRepository([root])

        result = await DeleteUserHandler(repo, mock_logger).handle(
            DeleteUser(context=admin_session(), user_id=root.id)
        )

        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        assert result.error.domain_error.code == ErrorCode.ADMIN_DELETION_FORBIDDEN
        assert repo.deleted == []


@pytest.mark.unit
class TestQueryHandlers:
    """Test read-side account handlers."""

    @pytest.mark.asyncio
    async def test_get_profile(self):
        alice = make_participant()
        handler = GetProfileHandler(InMemoryUserRepository([alice]))

        result = await handler.handle(GetProfile(context=session_for(alice)))

        assert result == Success(value=alice)

    @pytest.mark.asyncio
    async def test_get_profile_vanished_account(self):
        handler = GetProfileHandler(InMemoryUserRepository())

        result = await handler.handle(GetProfile(context=participant_session()))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND

    @pytest.mark.asyncio
    async def test_list_users_admin_only(self):
        repo = InMemoryUserRepository([make_participant(), make_admin()])

        allowed = await ListUsersHandler(repo).handle(ListUsers(context=admin_session()))
        denied = await ListUsersHandler(repo).handle(
            ListUsers(context=participant_session())
        )

        assert len(allowed.value) == 2
        assert denied.error.code == ApplicationErrorCode.FORBIDDEN

    @pytest.mark.asyncio
    async def test_participants_sorted_by_name(self):
        repo = InMemoryUserRepository(
            [
                make_participant(name="zoe", email="z@example.com", uid="P-3"),
                make_participant(name="Bob", email="b@example.com", uid="P-2"),
                make_admin(),
            ]
        )

        result = await ListParticipantsHandler(repo).handle(
            ListParticipants(context=participant_session())
        )

        assert [item.name for item in result.value] == ["Bob", "zoe"]
        assert result.value[0].college == "Example Institute"
