"""Fixtures for integration tests against a real PostgreSQL database.

DATABASE_URL must point at a disposable database. Tables are created from
the models if missing and truncated before every test. When the server is
not reachable the tests are skipped.
"""

import pytest
import pytest_asyncio
from sqlalchemy import text

from src.core.config import settings
from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

# Registers every table on BaseModel.metadata
import src.infrastructure.persistence.models  # noqa: F401


@pytest_asyncio.fixture
async def test_database():
    """Provide a Database bound to the test database with empty tables.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                ...
    """
    db = Database(database_url=settings.database_url, echo=settings.db_echo)
    if not await db.check_connection():
        await db.close()
        pytest.skip("PostgreSQL test database is not reachable")

    async with db.engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)
        await conn.execute(
            text("TRUNCATE TABLE login_logs, admins, participants, users CASCADE")
        )

    yield db
    await db.close()
