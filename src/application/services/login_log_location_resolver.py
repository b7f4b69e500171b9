"""Login log location resolver.

Composes the two location enrichers behind the pure decision function
select_location_strategy():

    LOCAL  -> local enricher (sentinel, no network)
    CACHED -> stored values, unchanged
    REMOTE -> remote enricher (one lookup, may fall back)

Usage:
    resolver = LoginLogLocationResolver(
        local_enricher=LocalAddressLocationEnricher(),
        remote_enricher=IPApiLocationEnricher(...),
    )
    location = await resolver.resolve(log)
    if location.should_persist:
        ...  # write back
"""

from src.domain.entities.login_log import LoginLog, UNKNOWN_LOCATION
from src.domain.enums import LocationSource
from src.domain.protocols import LocationEnricher, LocationEnrichmentResult


class LoginLogLocationResolver:
    """Resolve the location shown for a login log row."""

    def __init__(
        self,
        local_enricher: LocationEnricher,
        remote_enricher: LocationEnricher,
    ) -> None:
        """Initialize resolver.

        Args:
            local_enricher: Enricher for loopback/development addresses.
            remote_enricher: Enricher backed by the geolocation service.
        """
        self._local_enricher = local_enricher
        self._remote_enricher = remote_enricher

    async def resolve(self, log: LoginLog) -> LocationEnrichmentResult:
        """Resolve location for one row.

        Args:
            log: Stored login log.

        Returns:
            LocationEnrichmentResult tagged with its source. Never raises
            for lookup failures (the remote enricher fails open).
        """
        match log.location_strategy():
            case LocationSource.LOCAL:
                return await self._local_enricher.enrich(log.ip_address)
            case LocationSource.CACHED:
                return LocationEnrichmentResult(
                    city=log.city or UNKNOWN_LOCATION,
                    region=log.region,
                    country=log.country or UNKNOWN_LOCATION,
                    latitude=log.latitude,
                    longitude=log.longitude,
                    source=LocationSource.CACHED,
                )
            case _:
                return await self._remote_enricher.enrich(log.ip_address)
