"""Centralized constants for internal implementation details.

Constants here are NOT environment-specific configuration. For tunable
settings (timeouts, batch sizes), use `src/core/config.py` instead.
"""

# Truncation length for raw user-agent strings in log context
USER_AGENT_LOG_TRUNCATE = 100

# Request headers for the geolocation service (each lookup must be fresh)
GEOLOCATION_REQUEST_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Cache-Control": "no-cache",
}
