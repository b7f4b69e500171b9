"""Login log handler factories."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.infrastructure import (
    get_db_session,
    get_device_enricher,
    get_location_resolver,
    get_logger,
)

if TYPE_CHECKING:
    from src.application.queries.handlers.list_login_logs_handler import (
        ListLoginLogsHandler,
    )


async def get_list_login_logs_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListLoginLogsHandler":
    """Get ListLoginLogs query handler (request-scoped).

    Batch size, lookup concurrency and the country scan window come from
    settings.
    """
    from src.application.queries.handlers.list_login_logs_handler import (
        ListLoginLogsHandler,
    )
    from src.infrastructure.persistence.repositories import LoginLogRepository

    return ListLoginLogsHandler(
        login_log_repo=LoginLogRepository(session=session),
        device_enricher=get_device_enricher(),
        location_resolver=get_location_resolver(),
        logger=get_logger(),
        batch_size=settings.login_log_batch_size,
        max_concurrency=settings.geolocation_max_concurrency,
        country_scan_size=settings.login_log_country_scan_size,
    )
