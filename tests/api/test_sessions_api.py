"""API tests for POST /api/v1/sessions (login).

Architecture:
- Real app, authenticate handler replaced by a stub
- Real token service, so issued tokens are decoded and checked
"""

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import AuthenticatedUser
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.core.container import get_authenticate_user_handler, get_token_service
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.main import app


class StubAuthenticateUserHandler:
    """Accepts password "secret1", rejects anything else."""

    def __init__(self):
        self.commands = []
        self.user_id = uuid7()

    async def handle(self, cmd):
        self.commands.append(cmd)
        if cmd.password != "secret1":
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.UNAUTHORIZED,
                    message="Invalid credentials",
                )
            )
        return Success(
            value=AuthenticatedUser(
                user_id=self.user_id,
                email="alice@example.com",
                role=cmd.role,
                uid=cmd.uid,
            )
        )


@pytest.fixture
def stub_handler():
    handler = StubAuthenticateUserHandler()
    app.dependency_overrides[get_authenticate_user_handler] = lambda: handler
    return handler


@pytest.mark.api
class TestCreateSession:
    """Tests for POST /api/v1/sessions."""

    def test_participant_login_returns_token(self, client, stub_handler):
        response = client.post(
            "/api/v1/sessions",
            json={"role": "participant", "uid": "P-0001", "password": "secret1"},
            headers={"User-Agent": "pytest-agent"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["role"] == "participant"
        assert data["user_id"] == str(stub_handler.user_id)
        assert data["expires_in"] == settings.access_token_expire_minutes * 60

        claims = get_token_service().validate_access_token(data["access_token"])
        assert claims.value["role"] == "participant"
        assert claims.value["uid"] == "P-0001"

        cmd = stub_handler.commands[0]
        assert cmd.role == UserRole.PARTICIPANT
        assert cmd.user_agent == "pytest-agent"

    def test_forwarded_for_first_hop_recorded(self, client, stub_handler):
        client.post(
            "/api/v1/sessions",
            json={"role": "admin", "email": "admin@example.com", "password": "secret1"},
            headers={"X-Forwarded-For": "203.0.113.5, 10.0.0.1"},
        )

        assert stub_handler.commands[0].ip_address == "203.0.113.5"

    def test_invalid_credentials_is_401(self, client, stub_handler):
        response = client.post(
            "/api/v1/sessions",
            json={"role": "participant", "uid": "P-0001", "password": "wrong"},
        )

        assert response.status_code == 401
        body = response.json()
        assert body["status"] == 401
        assert body["detail"] == "Invalid credentials"
        assert "access_token" not in body

    @pytest.mark.parametrize(
        "payload",
        [
            {"role": "admin", "password": "secret1"},
            {"role": "participant", "email": "a@example.com", "password": "secret1"},
            {"role": "judge", "email": "a@example.com", "password": "secret1"},
            {"role": "admin", "email": "admin@example.com", "password": ""},
        ],
    )
    def test_malformed_request_is_422(self, client, stub_handler, payload):
        response = client.post("/api/v1/sessions", json=payload)

        assert response.status_code == 422
        assert stub_handler.commands == []
