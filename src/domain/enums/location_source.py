"""Origin of a login log's location fields."""

from enum import Enum


class LocationSource(str, Enum):
    """Where the location attached to a login log came from.

    LOCAL, CACHED and REMOTE are also the three strategies chosen by
    select_location_strategy(). FALLBACK marks a failed remote lookup.
    Only REMOTE results are written back to the store.
    """

    LOCAL = "local"
    CACHED = "cached"
    REMOTE = "remote"
    FALLBACK = "fallback"
