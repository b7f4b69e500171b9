"""LoginLogRepository - SQLAlchemy implementation of LoginLogRepository protocol.

Adapter for hexagonal architecture.

Queries join each log row to its subject account (LEFT OUTER JOIN, the
account may be gone). Text filters use case-insensitive containment with
LIKE wildcards in the input escaped.
"""

from uuid import UUID

from sqlalchemy import Select, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.login_log import LoginLog
from src.domain.protocols.login_log_repository import LoginLogFilter, LoginLogRecord
from src.infrastructure.persistence.models.login_log import (
    LoginLog as LoginLogModel,
)
from src.infrastructure.persistence.models.user import User as UserModel
from src.infrastructure.persistence.repositories.user_repository import (
    user_to_domain,
)


class LoginLogRepository:
    """SQLAlchemy implementation of LoginLogRepository protocol.

    Example:
        >>> repo = LoginLogRepository(session)
        >>> records = await repo.find_recent(LoginLogFilter(country="india"), limit=100)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def record(self, log: LoginLog) -> None:
        """Append a login attempt and commit."""
        self.session.add(self._to_model(log))
        await self.session.commit()

    async def find_recent(
        self,
        log_filter: LoginLogFilter,
        limit: int,
    ) -> list[LoginLogRecord]:
        """Find matching logs, newest first, joined to their accounts.

        Args:
            log_filter: Predicates to apply (ANDed).
            limit: Maximum number of rows.

        Returns:
            LoginLogRecord list; subject is None for orphaned rows.
        """
        stmt = (
            select(LoginLogModel, UserModel)
            .outerjoin(UserModel, UserModel.id == LoginLogModel.user_id)
            .order_by(LoginLogModel.created_at.desc())
            .limit(limit)
        )
        stmt = self._apply_filter(stmt, log_filter)

        result = await self.session.execute(stmt)
        return [
            LoginLogRecord(
                log=self._to_domain(log_model),
                subject=user_to_domain(user_model) if user_model is not None else None,
            )
            for log_model, user_model in result.all()
        ]

    async def update_location(
        self,
        log_id: UUID,
        *,
        city: str,
        region: str | None,
        country: str,
        latitude: float | None,
        longitude: float | None,
    ) -> bool:
        """Write resolved location onto one row and commit.

        The session is rolled back on failure so later writes on the same
        session still work.

        Returns:
            True if a row was updated, False if it no longer exists.
        """
        stmt = (
            update(LoginLogModel)
            .where(LoginLogModel.id == log_id)
            .values(
                city=city,
                region=region,
                country=country,
                latitude=latitude,
                longitude=longitude,
            )
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return (result.rowcount or 0) > 0

    @staticmethod
    def _apply_filter(stmt: Select, log_filter: LoginLogFilter) -> Select:
        if log_filter.start_date is not None:
            stmt = stmt.where(LoginLogModel.created_at >= log_filter.start_date)
        if log_filter.end_date is not None:
            stmt = stmt.where(LoginLogModel.created_at <= log_filter.end_date)
        if log_filter.email:
            displayed_email = func.coalesce(UserModel.email, LoginLogModel.email)
            stmt = stmt.where(
                displayed_email.icontains(log_filter.email, autoescape=True)
            )
        if log_filter.ip_address:
            stmt = stmt.where(
                LoginLogModel.ip_address.icontains(
                    log_filter.ip_address, autoescape=True
                )
            )
        if log_filter.device_type:
            stmt = stmt.where(
                LoginLogModel.device_type.icontains(
                    log_filter.device_type, autoescape=True
                )
            )
        if log_filter.country:
            # Unresolved rows stay in; their country is only known after lookup
            stmt = stmt.where(
                or_(
                    LoginLogModel.city.is_(None),
                    LoginLogModel.country.is_(None),
                    LoginLogModel.country.icontains(
                        log_filter.country, autoescape=True
                    ),
                )
            )
        return stmt

    @staticmethod
    def _to_domain(model: LoginLogModel) -> LoginLog:
        """Convert database model to domain entity."""
        return LoginLog(
            id=model.id,
            created_at=model.created_at,
            user_id=model.user_id,
            email=model.email,
            ip_address=model.ip_address,
            user_agent=model.user_agent,
            success=model.success,
            device_type=model.device_type,
            os=model.os,
            browser=model.browser,
            city=model.city,
            region=model.region,
            country=model.country,
            latitude=model.latitude,
            longitude=model.longitude,
        )

    @staticmethod
    def _to_model(log: LoginLog) -> LoginLogModel:
        """Convert domain entity to database model."""
        return LoginLogModel(
            id=log.id,
            created_at=log.created_at,
            user_id=log.user_id,
            email=log.email,
            ip_address=log.ip_address,
            user_agent=log.user_agent,
            success=log.success,
            device_type=log.device_type,
            os=log.os,
            browser=log.browser,
            city=log.city,
            region=log.region,
            country=log.country,
            latitude=log.latitude,
            longitude=log.longitude,
        )
