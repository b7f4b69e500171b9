"""Location enricher implementations for IP geolocation.

Two adapters implement the LocationEnricher protocol:

- LocalAddressLocationEnricher: loopback/development addresses resolve to
  a fixed sentinel without any lookup.
- IPApiLocationEnricher: one GET per address against an ipapi.co-compatible
  service ("{base_url}/{ip}/json/"). Fail-open: every failure returns the
  "Unknown" fallback with source FALLBACK.

Which adapter runs for a given row is decided by select_location_strategy()
(see LoginLogLocationResolver).
"""

from typing import Any
from urllib.parse import quote

import httpx

from src.core.constants import GEOLOCATION_REQUEST_HEADERS
from src.domain.entities.login_log import (
    LOCAL_CITY,
    LOCAL_COUNTRY,
    LOCAL_REGION,
    UNKNOWN_LOCATION,
)
from src.domain.enums import LocationSource
from src.domain.protocols import LocationEnrichmentResult, LoggerProtocol

LOCAL_LOCATION = LocationEnrichmentResult(
    city=LOCAL_CITY,
    region=LOCAL_REGION,
    country=LOCAL_COUNTRY,
    source=LocationSource.LOCAL,
)

FALLBACK_LOCATION = LocationEnrichmentResult(
    city=UNKNOWN_LOCATION,
    region=UNKNOWN_LOCATION,
    country=UNKNOWN_LOCATION,
    source=LocationSource.FALLBACK,
)

DEFAULT_TIMEOUT_SECONDS = 5.0


class LocalAddressLocationEnricher:
    """Sentinel enricher for loopback and development addresses."""

    async def enrich(self, ip_address: str) -> LocationEnrichmentResult:
        """Return the local sentinel location. Performs no I/O."""
        return LOCAL_LOCATION


class IPApiLocationEnricher:
    """Remote IP geolocation over HTTP.

    Implements LocationEnricher protocol (structural typing).

    A fresh httpx.AsyncClient is opened per lookup with a hard timeout and
    "Cache-Control: no-cache", so neither the transport nor any proxy
    serves a stored answer.

    Failure cases (all return FALLBACK_LOCATION and log a warning):
        - timeout or connection error
        - non-200 status
        - body that is not a JSON object
        - truthy "error" field or missing/empty "city"
    """

    def __init__(
        self,
        *,
        base_url: str,
        logger: LoggerProtocol,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize location enricher.

        Args:
            base_url: Geolocation service base URL (no trailing slash).
            logger: Logger for lookup failures.
            timeout: Per-request timeout in seconds.
        """
        self._base_url = base_url.rstrip("/")
        self._logger = logger
        self._timeout = timeout

    def lookup_url(self, ip_address: str) -> str:
        """Build the lookup URL for an address."""
        return f"{self._base_url}/{quote(ip_address.strip(), safe=':.')}/json/"

    async def enrich(self, ip_address: str) -> LocationEnrichmentResult:
        """Resolve an IP address through the geolocation service.

        Args:
            ip_address: Public client IP address.

        Returns:
            LocationEnrichmentResult with source REMOTE on success, or
            FALLBACK_LOCATION on any failure. Never raises for lookup errors.
        """
        url = self.lookup_url(ip_address)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, headers=GEOLOCATION_REQUEST_HEADERS)
        except httpx.TimeoutException as e:
            self._logger.warning(
                "geolocation_lookup_timeout",
                ip_address=ip_address,
                error=str(e),
            )
            return FALLBACK_LOCATION
        except httpx.RequestError as e:
            self._logger.warning(
                "geolocation_lookup_connection_error",
                ip_address=ip_address,
                error=str(e),
            )
            return FALLBACK_LOCATION

        if response.status_code != 200:
            self._logger.warning(
                "geolocation_lookup_bad_status",
                ip_address=ip_address,
                status_code=response.status_code,
            )
            return FALLBACK_LOCATION

        try:
            data = response.json()
        except ValueError as e:
            self._logger.warning(
                "geolocation_lookup_invalid_json",
                ip_address=ip_address,
                error=str(e),
            )
            return FALLBACK_LOCATION

        if not isinstance(data, dict):
            self._logger.warning(
                "geolocation_lookup_unexpected_format",
                ip_address=ip_address,
                data_type=type(data).__name__,
            )
            return FALLBACK_LOCATION

        if data.get("error") or not data.get("city"):
            self._logger.warning(
                "geolocation_lookup_unresolved",
                ip_address=ip_address,
                reason=str(data.get("reason") or "missing city"),
            )
            return FALLBACK_LOCATION

        location = LocationEnrichmentResult(
            city=str(data["city"]),
            region=str(data.get("region") or UNKNOWN_LOCATION),
            country=str(data.get("country_name") or UNKNOWN_LOCATION),
            latitude=_coordinate(data.get("latitude")),
            longitude=_coordinate(data.get("longitude")),
            source=LocationSource.REMOTE,
        )
        self._logger.debug(
            "geolocation_lookup_succeeded",
            ip_address=ip_address,
            city=location.city,
            country=location.country,
        )
        return location


def _coordinate(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
