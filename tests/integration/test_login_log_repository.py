"""Integration tests for LoginLogRepository.

Tests cover:
- Newest-first ordering and limit
- Email filter on the account email, falling back to the raw login email
- LIKE wildcards in filter input matched literally
- Inclusive date bounds
- Country filter keeping rows without a stored location
- update_location for existing and missing rows

Architecture:
- Integration tests with REAL PostgreSQL database
- Uses test_database fixture (tables truncated per test)
- Reads after writes go through a second session
"""

from datetime import timedelta

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from src.domain.protocols import LoginLogFilter
from src.infrastructure.persistence.repositories import (
    LoginLogRepository,
    UserRepository,
)
from tests.utils.doubles import BASE_TIME, make_log, make_participant


@pytest_asyncio.fixture
async def login_log_repository(test_database):
    """Provide LoginLogRepository with test database session."""
    async with test_database.get_session() as session:
        yield LoginLogRepository(session=session)


async def find_ids(test_database, log_filter, limit=100):
    async with test_database.get_session() as session:
        records = await LoginLogRepository(session=session).find_recent(
            log_filter, limit=limit
        )
    return [record.log.id for record in records]


@pytest.mark.integration
class TestFindRecent:
    """Test row selection and filters."""

    @pytest.mark.asyncio
    async def test_newest_first_with_limit(self, test_database, login_log_repository):
        logs = [make_log(minutes_ago=i) for i in range(3)]
        for log in reversed(logs):
            await login_log_repository.record(log)

        assert await find_ids(test_database, LoginLogFilter(), limit=2) == [
            logs[0].id,
            logs[1].id,
        ]

    @pytest.mark.asyncio
    async def test_email_filter_prefers_account_email(
        self, test_database, login_log_repository
    ):
        alice = make_participant(email="alice@example.com")
        async with test_database.get_session() as session:
            await UserRepository(session=session).save(alice)

        owned = make_log(minutes_ago=1, user=alice, email="typo@example.com")
        orphan = make_log(minutes_ago=2, email="ghost@example.com")
        await login_log_repository.record(owned)
        await login_log_repository.record(orphan)

        assert await find_ids(test_database, LoginLogFilter(email="ALICE")) == [
            owned.id
        ]
        assert await find_ids(test_database, LoginLogFilter(email="typo")) == []
        assert await find_ids(test_database, LoginLogFilter(email="ghost")) == [
            orphan.id
        ]

    @pytest.mark.asyncio
    async def test_subject_joined_when_account_exists(
        self, test_database, login_log_repository
    ):
        alice = make_participant(name="Alice")
        async with test_database.get_session() as session:
            await UserRepository(session=session).save(alice)
        await login_log_repository.record(make_log(user=alice))
        await login_log_repository.record(make_log(minutes_ago=1))

        async with test_database.get_session() as session:
            records = await LoginLogRepository(session=session).find_recent(
                LoginLogFilter(), limit=10
            )

        assert records[0].subject is not None
        assert records[0].subject.display_name() == "Alice"
        assert records[1].subject is None

    @pytest.mark.asyncio
    async def test_wildcards_are_literal(self, test_database, login_log_repository):
        log = make_log(ip_address="10.0.0.1")
        await login_log_repository.record(log)

        assert await find_ids(test_database, LoginLogFilter(ip_address="%")) == []
        assert await find_ids(test_database, LoginLogFilter(ip_address="_")) == []
        assert await find_ids(test_database, LoginLogFilter(ip_address="0.0")) == [
            log.id
        ]

    @pytest.mark.asyncio
    async def test_date_bounds_are_inclusive(self, test_database, login_log_repository):
        log = make_log()
        await login_log_repository.record(log)

        exact = LoginLogFilter(start_date=BASE_TIME, end_date=BASE_TIME)
        before = LoginLogFilter(end_date=BASE_TIME - timedelta(microseconds=1))

        assert await find_ids(test_database, exact) == [log.id]
        assert await find_ids(test_database, before) == []

    @pytest.mark.asyncio
    async def test_country_filter_keeps_unresolved_rows(
        self, test_database, login_log_repository
    ):
        india = make_log(minutes_ago=1, city="Pune", country="India")
        germany = make_log(minutes_ago=2, city="Berlin", country="Germany")
        unresolved = make_log(minutes_ago=3, ip_address="127.0.0.1")
        for log in (india, germany, unresolved):
            await login_log_repository.record(log)

        assert await find_ids(test_database, LoginLogFilter(country="IND")) == [
            india.id,
            unresolved.id,
        ]


@pytest.mark.integration
class TestUpdateLocation:
    """Test the keyed location write-back."""

    @pytest.mark.asyncio
    async def test_writes_location(self, test_database, login_log_repository):
        log = make_log()
        await login_log_repository.record(log)

        updated = await login_log_repository.update_location(
            log.id,
            city="Mountain View",
            region="California",
            country="United States",
            latitude=37.42,
            longitude=-122.08,
        )

        assert updated is True
        async with test_database.get_session() as session:
            records = await LoginLogRepository(session=session).find_recent(
                LoginLogFilter(), limit=1
            )
        stored = records[0].log
        assert (stored.city, stored.region, stored.country) == (
            "Mountain View",
            "California",
            "United States",
        )
        assert stored.latitude == pytest.approx(37.42)

    @pytest.mark.asyncio
    async def test_missing_row_returns_false(self, login_log_repository):
        updated = await login_log_repository.update_location(
            uuid7(),
            city="Pune",
            region=None,
            country="India",
            latitude=None,
            longitude=None,
        )

        assert updated is False
