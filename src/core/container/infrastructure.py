"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL via asyncpg)
- Password hashing (bcrypt)
- Token generation (JWT)
- Login log enrichers (user-agents, httpx geolocation)
- Logging (structlog console adapter)

Request-scoped: get_db_session() yields one AsyncSession per request.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.enums import Environment
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.application.services import LoginLogLocationResolver
    from src.domain.protocols import (
        DeviceEnricher,
        LoggerProtocol,
        PasswordHashingProtocol,
        TokenGenerationProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Usage:
        @router.get("/users")
        async def list_users(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (bcrypt, settings.bcrypt_rounds)."""
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped)."""
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
    )


# ============================================================================
# Login Log Enrichment (Application-Scoped)
# ============================================================================


@lru_cache()
def get_device_enricher() -> "DeviceEnricher":
    """Get user agent classifier singleton."""
    from src.infrastructure.enrichers import UserAgentDeviceEnricher

    return UserAgentDeviceEnricher(logger=get_logger())


@lru_cache()
def get_location_resolver() -> "LoginLogLocationResolver":
    """Get login log location resolver singleton.

    Composes the local sentinel enricher with the remote geolocation
    enricher configured from settings.
    """
    from src.application.services import LoginLogLocationResolver
    from src.infrastructure.enrichers import (
        IPApiLocationEnricher,
        LocalAddressLocationEnricher,
    )

    return LoginLogLocationResolver(
        local_enricher=LocalAddressLocationEnricher(),
        remote_enricher=IPApiLocationEnricher(
            base_url=settings.geolocation_api_url,
            timeout=settings.geolocation_timeout_seconds,
            logger=get_logger(),
        ),
    )


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
