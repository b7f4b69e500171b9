"""Shared fixtures for API tests.

Tests run the real app through TestClient with handler factories replaced
via app.dependency_overrides. Tokens are real JWTs signed by the
application's token service, so authentication runs end to end.
"""

import pytest
from fastapi.testclient import TestClient

from src.core.container import get_token_service
from src.domain.value_objects import SessionContext
from src.main import app


def bearer_headers(session: SessionContext) -> dict[str, str]:
    """Build an Authorization header for a session."""
    token = get_token_service().generate_access_token(
        user_id=session.user_id,
        email=session.email,
        role=session.role.value,
        uid=session.uid,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def clear_overrides():
    """Reset dependency overrides after each test."""
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """Create TestClient for API tests using real app."""
    return TestClient(app, raise_server_exceptions=False)
