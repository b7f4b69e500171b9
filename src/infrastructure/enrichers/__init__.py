"""Login log enrichers infrastructure package.

Provides implementations for device and location enrichment protocols.

Enrichers:
    - UserAgentDeviceEnricher: Parses user agent strings (user-agents library)
    - LocalAddressLocationEnricher: Sentinel location for loopback addresses
    - IPApiLocationEnricher: Remote IP geolocation over httpx
"""

from src.infrastructure.enrichers.device_enricher import UserAgentDeviceEnricher
from src.infrastructure.enrichers.location_enricher import (
    IPApiLocationEnricher,
    LocalAddressLocationEnricher,
)

__all__ = [
    "IPApiLocationEnricher",
    "LocalAddressLocationEnricher",
    "UserAgentDeviceEnricher",
]
