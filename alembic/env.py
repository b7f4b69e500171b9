"""Alembic environment for the async PostgreSQL schema.

The database URL comes from Settings, never from alembic.ini. After an
online `alembic upgrade`, the idempotent seeders in alembic/seeds run in
their own session; pass `-x seed=false` to skip them.
"""

import asyncio
import os
import sys
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_engine_from_config,
    async_sessionmaker,
)

from alembic import context
from src.core.config import settings
from src.infrastructure.persistence import BaseModel

# Registers every table on BaseModel.metadata for autogenerate
from src.infrastructure.persistence.models import (  # noqa: F401
    Admin,
    LoginLog,
    Participant,
    User,
)

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.database_url)

target_metadata = BaseModel.metadata


def run_migrations_offline() -> None:
    """Emit migration SQL to stdout without a database connection."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def _apply_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


def _seeding_requested() -> bool:
    """Seed only on `upgrade`, and only when not disabled with -x seed=false."""
    xargs = context.get_x_argument(as_dictionary=True)
    if xargs.get("seed", "").strip().lower() in {"0", "false", "no"}:
        return False
    # cmd_opts.cmd is (command_fn, positional, kwargs); None when not run from the CLI
    cmd = getattr(getattr(config, "cmd_opts", None), "cmd", None)
    return bool(cmd) and cmd[0].__name__ == "upgrade"


async def _seed(engine: AsyncEngine) -> None:
    alembic_dir = os.path.dirname(__file__)
    if alembic_dir not in sys.path:
        sys.path.insert(0, alembic_dir)

    from seeds import run_all_seeders

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        await run_all_seeders(session)
        await session.commit()


async def run_async_migrations() -> None:
    """Apply migrations over an async engine, then seed if requested."""
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    try:
        async with engine.connect() as connection:
            await connection.run_sync(_apply_migrations)

        if _seeding_requested():
            await _seed(engine)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
