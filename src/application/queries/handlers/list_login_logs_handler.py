"""List login logs query handler (login audit enrichment pipeline).

Flow:
1. Reject non-administrators before touching the store
2. Translate raw filter strings into a LoginLogFilter (bad dates are dropped)
3. Load the newest matching rows (one batch, or the country scan window
   when filtering by country)
4. Classify devices and resolve locations one batch-sized chunk at a time;
   lookups fan out concurrently, bounded by a semaphore, order preserved
5. Write back freshly resolved remote locations, one keyed update per row
6. Keep rows whose displayed country matches, stop at a full batch
7. Build display rows and success/failure counts over the returned batch

Failure policy:
- Initial query failure fails the whole request (QUERY_FAILED)
- Lookup or write-back failures are recovered per row and logged
"""

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time
from uuid import UUID

from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    admin_required,
)
from src.application.queries.login_log_queries import ListLoginLogs
from src.application.services.login_log_location_resolver import (
    LoginLogLocationResolver,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.login_log import UNKNOWN_LOCATION, LoginLog
from src.domain.enums import LocationSource
from src.domain.protocols import (
    DeviceEnricher,
    DeviceEnrichmentResult,
    LocationEnrichmentResult,
    LoggerProtocol,
    LoginLogFilter,
    LoginLogRecord,
    LoginLogRepository,
)

ACTIVITY_SUCCESS = "SUCCESS"
ACTIVITY_FAILED = "FAILED"

DEFAULT_BATCH_SIZE = 100
DEFAULT_MAX_CONCURRENCY = 5
DEFAULT_COUNTRY_SCAN_SIZE = 500


@dataclass
class EnrichedLogData:
    """Device and location block of an enriched row."""

    ip_address: str
    user_agent: str
    device: str
    os: str
    browser: str
    city: str
    region: str | None
    country: str
    latitude: float | None
    longitude: float | None


@dataclass
class EnrichedLogView:
    """One UI-ready login log row."""

    id: UUID
    timestamp: datetime
    activity: str
    success: bool
    user: str
    email: str
    data: EnrichedLogData


@dataclass
class LoginLogListResult:
    """Login log query result."""

    logs: list[EnrichedLogView]
    stats: dict[str, int] = field(
        default_factory=lambda: {ACTIVITY_SUCCESS: 0, ACTIVITY_FAILED: 0}
    )


def parse_date_bound(value: str | None, *, end_of_day: bool = False) -> datetime | None:
    """Parse a date filter value.

    Accepts "YYYY-MM-DD" or an ISO 8601 datetime. Naive values are taken as
    UTC. A date-only upper bound extends to the last microsecond of that day.

    Args:
        value: Raw filter value.
        end_of_day: Treat a date-only value as an inclusive upper bound.

    Returns:
        Timezone-aware datetime, or None when absent or unparseable.
    """
    if value is None or not value.strip():
        return None

    raw = value.strip()
    try:
        if len(raw) == 10:
            day = date.fromisoformat(raw)
            return datetime.combine(day, time.max if end_of_day else time.min, UTC)
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _contains(haystack: str, needle: str | None) -> bool:
    return needle is None or needle.lower() in haystack.lower()


class ListLoginLogsHandler:
    """Handler for the enriched login audit view.

    Dependencies are injected; the handler holds no global state, so the
    whole pipeline runs against an in-memory repository in tests.
    """

    def __init__(
        self,
        login_log_repo: LoginLogRepository,
        device_enricher: DeviceEnricher,
        location_resolver: LoginLogLocationResolver,
        logger: LoggerProtocol,
        batch_size: int = DEFAULT_BATCH_SIZE,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        country_scan_size: int = DEFAULT_COUNTRY_SCAN_SIZE,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            login_log_repo: Login log repository.
            device_enricher: User agent classifier.
            location_resolver: Location strategy composition.
            logger: Structured logger.
            batch_size: Maximum rows returned per request.
            max_concurrency: Maximum concurrent location lookups.
            country_scan_size: Rows examined when filtering by country.
        """
        self._login_log_repo = login_log_repo
        self._device_enricher = device_enricher
        self._location_resolver = location_resolver
        self._logger = logger
        self._batch_size = batch_size
        self._max_concurrency = max_concurrency
        self._country_scan_size = max(country_scan_size, batch_size)

    async def handle(
        self, query: ListLoginLogs
    ) -> Result[LoginLogListResult, ApplicationError]:
        """Handle list login logs query.

        Args:
            query: ListLoginLogs with caller context and raw filters.

        Returns:
            Success(LoginLogListResult) with enriched rows and stats.
            Failure(ApplicationError) with FORBIDDEN for non-administrators
            or QUERY_FAILED when the rows cannot be loaded.
        """
        if not query.context.is_admin:
            self._logger.warning(
                "login_logs_access_denied",
                user_id=str(query.context.user_id),
                role=query.context.role.value,
            )
            return Failure(error=admin_required())

        log_filter = self._build_filter(query)
        limit = self._country_scan_size if log_filter.country else self._batch_size

        try:
            records = await self._login_log_repo.find_recent(log_filter, limit=limit)
        except Exception as e:
            self._logger.error("login_logs_query_failed", error=e)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.QUERY_FAILED,
                    message="Failed to load login logs",
                )
            )

        views: list[EnrichedLogView] = []
        for start in range(0, len(records), self._batch_size):
            chunk = records[start : start + self._batch_size]
            locations = await self._resolve_locations(chunk)
            await self._write_back(chunk, locations)
            views.extend(
                self._to_view(record, location)
                for record, location in zip(chunk, locations, strict=True)
                if _contains(location.country, log_filter.country)
            )
            if len(views) >= self._batch_size:
                break
        views = views[: self._batch_size]
        stats = {
            ACTIVITY_SUCCESS: sum(1 for view in views if view.success),
            ACTIVITY_FAILED: sum(1 for view in views if not view.success),
        }

        self._logger.info(
            "login_logs_listed",
            row_count=len(views),
            success_count=stats[ACTIVITY_SUCCESS],
            failed_count=stats[ACTIVITY_FAILED],
        )
        return Success(value=LoginLogListResult(logs=views, stats=stats))

    def _build_filter(self, query: ListLoginLogs) -> LoginLogFilter:
        start_date = parse_date_bound(query.start_date)
        end_date = parse_date_bound(query.end_date, end_of_day=True)

        if _clean(query.start_date) and start_date is None:
            self._logger.debug("login_logs_start_date_ignored", value=query.start_date)
        if _clean(query.end_date) and end_date is None:
            self._logger.debug("login_logs_end_date_ignored", value=query.end_date)

        return LoginLogFilter(
            start_date=start_date,
            end_date=end_date,
            email=_clean(query.email),
            ip_address=_clean(query.ip_address),
            device_type=_clean(query.device_type),
            country=_clean(query.country),
        )

    async def _resolve_locations(
        self, records: list[LoginLogRecord]
    ) -> list[LocationEnrichmentResult]:
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def resolve(log: LoginLog) -> LocationEnrichmentResult:
            async with semaphore:
                return await self._location_resolver.resolve(log)

        results = await asyncio.gather(
            *(resolve(record.log) for record in records),
            return_exceptions=True,
        )

        locations: list[LocationEnrichmentResult] = []
        for record, result in zip(records, results, strict=True):
            if isinstance(result, Exception):
                self._logger.warning(
                    "login_log_location_failed",
                    log_id=str(record.log.id),
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
                locations.append(
                    LocationEnrichmentResult(
                        city=UNKNOWN_LOCATION,
                        region=UNKNOWN_LOCATION,
                        country=UNKNOWN_LOCATION,
                        source=LocationSource.FALLBACK,
                    )
                )
                continue
            locations.append(result)
        return locations

    async def _write_back(
        self,
        records: list[LoginLogRecord],
        locations: list[LocationEnrichmentResult],
    ) -> None:
        # Sequential: the request's AsyncSession must not be shared
        # between concurrent tasks.
        for record, location in zip(records, locations, strict=True):
            if not location.should_persist:
                continue
            log_id = record.log.id
            try:
                updated = await self._login_log_repo.update_location(
                    log_id,
                    city=location.city,
                    region=location.region,
                    country=location.country,
                    latitude=location.latitude,
                    longitude=location.longitude,
                )
            except Exception as e:
                self._logger.warning(
                    "login_log_location_writeback_failed",
                    log_id=str(log_id),
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                continue
            if not updated:
                self._logger.debug("login_log_vanished", log_id=str(log_id))

    def _classify_device(self, log: LoginLog) -> DeviceEnrichmentResult:
        if log.device_type and log.os and log.browser:
            return DeviceEnrichmentResult(
                device_type=log.device_type,
                os=log.os,
                browser=log.browser,
            )
        return self._device_enricher.enrich(log.user_agent)

    def _to_view(
        self,
        record: LoginLogRecord,
        location: LocationEnrichmentResult,
    ) -> EnrichedLogView:
        log = record.log
        subject = record.subject
        device = self._classify_device(log)

        email = (subject.email if subject else None) or log.email
        display_name = (subject.display_name() if subject else None) or email

        return EnrichedLogView(
            id=log.id,
            timestamp=log.created_at,
            activity=ACTIVITY_SUCCESS if log.success else ACTIVITY_FAILED,
            success=log.success,
            user=display_name,
            email=email,
            data=EnrichedLogData(
                ip_address=log.ip_address,
                user_agent=log.user_agent,
                device=device.device_type,
                os=device.os,
                browser=device.browser,
                city=location.city,
                region=location.region,
                country=location.country,
                latitude=location.latitude,
                longitude=location.longitude,
            ),
        )
