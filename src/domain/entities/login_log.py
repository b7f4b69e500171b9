"""Login log domain entity and location strategy.

A login log records one authentication attempt. It is append-only except
for the location fields, which are backfilled exactly once by enrichment.

Location Strategy:
    select_location_strategy() is the pure decision used before any lookup:

    - LOCAL:  loopback / development address -> fixed sentinel, no lookup
    - CACHED: city and country already stored -> stored values, no lookup
    - REMOTE: everything else -> one remote geolocation call
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import LocationSource

# Addresses matched exactly (after strip/lower) as local
LOCAL_ADDRESSES = frozenset({"unknown", "::1", "127.0.0.1"})
LOCALHOST_MARKER = "localhost"

# Sentinel location for local addresses
LOCAL_CITY = "Localhost"
LOCAL_REGION = "Development"
LOCAL_COUNTRY = "Local Machine"

# Fallback location for failed lookups
UNKNOWN_LOCATION = "Unknown"


def is_local_address(ip_address: str | None) -> bool:
    """Check if an address is a loopback or development address.

    Args:
        ip_address: Raw IP address string as captured at login.

    Returns:
        True for "unknown", "::1", "127.0.0.1" or anything containing
        "localhost". A missing address counts as "unknown".
    """
    normalized = (ip_address or "unknown").strip().lower()
    return normalized in LOCAL_ADDRESSES or LOCALHOST_MARKER in normalized


def select_location_strategy(
    ip_address: str | None,
    city: str | None,
    country: str | None,
) -> LocationSource:
    """Decide how a row's location should be obtained.

    Local addresses win over cached values so a loopback row always shows
    the sentinel.

    Args:
        ip_address: Raw IP address.
        city: Stored city, if any.
        country: Stored country, if any.

    Returns:
        LocationSource.LOCAL, LocationSource.CACHED or LocationSource.REMOTE.
    """
    if is_local_address(ip_address):
        return LocationSource.LOCAL
    if city and country:
        return LocationSource.CACHED
    return LocationSource.REMOTE


@dataclass
class LoginLog:
    """Login attempt record.

    Attributes:
        id: Unique log identifier.
        created_at: When the attempt happened.
        user_id: Subject account (None when the identifier matched no account
            or the account was later deleted).
        email: Raw email captured at login (empty for UID-only attempts on
            unknown UIDs).
        ip_address: Raw client address ("unknown" if unavailable).
        user_agent: Raw User-Agent header.
        success: Whether authentication succeeded.
        device_type: Classified device ("Desktop", "Mobile", "Tablet").
        os: Classified operating system.
        browser: Classified browser.
        city: Resolved city.
        region: Resolved region.
        country: Resolved country.
        latitude: Resolved latitude.
        longitude: Resolved longitude.
    """

    id: UUID
    created_at: datetime
    user_id: UUID | None
    email: str
    ip_address: str
    user_agent: str
    success: bool
    device_type: str | None = None
    os: str | None = None
    browser: str | None = None
    city: str | None = None
    region: str | None = None
    country: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    def has_cached_location(self) -> bool:
        """Check if city and country are already resolved."""
        return bool(self.city and self.country)

    def location_strategy(self) -> LocationSource:
        """Decide how this row's location should be obtained."""
        return select_location_strategy(self.ip_address, self.city, self.country)
