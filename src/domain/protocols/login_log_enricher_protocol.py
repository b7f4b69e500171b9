"""Login log enricher protocol for device and location enrichment.

Enrichers turn raw login metadata (User-Agent header, client IP) into the
display fields of the audit view. Both fail open: a failed enrichment yields
fallback values, never an exception.
"""

from dataclasses import dataclass
from typing import Protocol

from src.domain.enums import LocationSource


@dataclass(frozen=True, slots=True, kw_only=True)
class DeviceEnrichmentResult:
    """Classified device information.

    Attributes:
        device_type: "Mobile", "Tablet" or "Desktop".
        os: Operating system family ("Windows", "Android", "Mac OS X").
        browser: Browser family ("Chrome", "Firefox", "Mobile Safari").
    """

    device_type: str
    os: str
    browser: str


@dataclass(frozen=True, slots=True, kw_only=True)
class LocationEnrichmentResult:
    """Resolved location for an IP address.

    Attributes:
        city: City name ("Unknown" on fallback).
        region: Region or state ("Unknown" on fallback, may be None for
            cached rows stored without one).
        country: Country name ("Unknown" on fallback).
        latitude: Latitude, None when unresolved.
        longitude: Longitude, None when unresolved.
        source: How the location was obtained.
    """

    city: str
    region: str | None
    country: str
    latitude: float | None = None
    longitude: float | None = None
    source: LocationSource = LocationSource.REMOTE

    @property
    def should_persist(self) -> bool:
        """Only freshly resolved remote locations are written back."""
        return self.source == LocationSource.REMOTE


class DeviceEnricher(Protocol):
    """Device enricher protocol (port) for user agent parsing.

    Behavior:
        - Synchronous and pure: same input, same output
        - Never raises: empty or unparseable agents return fallbacks
          ("Desktop", "Unknown", "Unknown")
    """

    def enrich(self, user_agent: str | None) -> DeviceEnrichmentResult:
        """Classify a raw User-Agent header."""
        ...


class LocationEnricher(Protocol):
    """Location enricher protocol (port) for IP geolocation.

    Behavior:
        - Fail-open: returns the "Unknown" fallback on any failure
        - Async: may perform one network request per call
    """

    async def enrich(self, ip_address: str) -> LocationEnrichmentResult:
        """Resolve an IP address to a location."""
        ...
