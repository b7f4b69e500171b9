"""API tests for the login audit view.

Tests the HTTP cycle for GET /api/v1/logs:
- Bearer authentication (401) and admin role (403)
- Query parameter aliases passed through to the query
- Response shape: camelCase data keys and SUCCESS/FAILED stats
- Problem Details on handler failure
"""

from datetime import UTC, datetime

import pytest
from uuid_extensions import uuid7

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.handlers.list_login_logs_handler import (
    EnrichedLogData,
    EnrichedLogView,
    LoginLogListResult,
)
from src.core.container import get_list_login_logs_handler
from src.core.result import Failure, Success
from src.main import app
from tests.api.conftest import bearer_headers
from tests.utils.doubles import admin_session, participant_session


class StubListLoginLogsHandler:
    """Stub handler recording the query it receives."""

    def __init__(self, result=None):
        self.result = result
        self.queries = []

    async def handle(self, query):
        self.queries.append(query)
        if self.result is not None:
            return self.result
        if not query.context.is_admin:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.FORBIDDEN,
                    message="Administrator role required",
                )
            )
        view = EnrichedLogView(
            id=uuid7(),
            timestamp=datetime(2026, 3, 1, 12, 0, tzinfo=UTC),
            activity="SUCCESS",
            success=True,
            user="Alice",
            email="alice@example.com",
            data=EnrichedLogData(
                ip_address="49.36.1.1",
                user_agent="Mozilla/5.0",
                device="Desktop",
                os="Windows",
                browser="Chrome",
                city="Pune",
                region="Maharashtra",
                country="India",
                latitude=18.52,
                longitude=73.85,
            ),
        )
        return Success(
            value=LoginLogListResult(logs=[view], stats={"SUCCESS": 1, "FAILED": 0})
        )


@pytest.fixture
def stub_handler():
    handler = StubListLoginLogsHandler()
    app.dependency_overrides[get_list_login_logs_handler] = lambda: handler
    return handler


@pytest.mark.api
class TestListLoginLogsAuth:
    """Authentication and authorization."""

    def test_missing_token_is_401(self, client, stub_handler):
        response = client.get("/api/v1/logs")

        assert response.status_code == 401
        assert response.json()["status"] == 401
        assert stub_handler.queries == []

    def test_invalid_token_is_401(self, client, stub_handler):
        response = client.get(
            "/api/v1/logs", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401

    def test_participant_is_403(self, client, stub_handler):
        response = client.get(
            "/api/v1/logs", headers=bearer_headers(participant_session())
        )

        assert response.status_code == 403
        assert response.headers["content-type"].startswith("application/")
        assert response.json()["title"]


@pytest.mark.api
class TestListLoginLogs:
    """Successful listing."""

    def test_response_shape(self, client, stub_handler):
        response = client.get("/api/v1/logs", headers=bearer_headers(admin_session()))

        assert response.status_code == 200
        body = response.json()
        assert body["stats"] == {"SUCCESS": 1, "FAILED": 0}
        row = body["logs"][0]
        assert row["activity"] == "SUCCESS"
        assert row["user"] == "Alice"
        assert row["data"]["ipAddress"] == "49.36.1.1"
        assert row["data"]["userAgent"] == "Mozilla/5.0"
        assert row["data"]["city"] == "Pune"
        assert row["data"]["country"] == "India"
        assert "X-Trace-Id" in response.headers

    def test_query_parameters_forwarded(self, client, stub_handler):
        client.get(
            "/api/v1/logs",
            params={
                "startDate": "2026-03-01",
                "endDate": "2026-03-02",
                "email": "alice",
                "ipAddress": "49.36",
                "deviceType": "desktop",
                "country": "india",
            },
            headers=bearer_headers(admin_session()),
        )

        query = stub_handler.queries[0]
        assert query.start_date == "2026-03-01"
        assert query.end_date == "2026-03-02"
        assert query.email == "alice"
        assert query.ip_address == "49.36"
        assert query.device_type == "desktop"
        assert query.country == "india"
        assert query.context.is_admin

    def test_query_failure_is_500(self, client):
        handler = StubListLoginLogsHandler(
            result=Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.QUERY_FAILED,
                    message="Failed to load login logs",
                )
            )
        )
        app.dependency_overrides[get_list_login_logs_handler] = lambda: handler

        response = client.get("/api/v1/logs", headers=bearer_headers(admin_session()))

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to load login logs"
