"""Device enricher implementation using user-agents library.

Classifies raw User-Agent headers into a (device type, OS, browser) triple.
Implements DeviceEnricher protocol with fail-open behavior: any input,
including the empty string, yields a complete triple.
"""

from user_agents import parse as parse_user_agent  # type: ignore[import-untyped]
from user_agents.parsers import UserAgent  # type: ignore[import-untyped]

from src.core.constants import USER_AGENT_LOG_TRUNCATE
from src.domain.protocols import DeviceEnrichmentResult, LoggerProtocol

DEVICE_MOBILE = "Mobile"
DEVICE_TABLET = "Tablet"
DEVICE_DESKTOP = "Desktop"
UNKNOWN = "Unknown"

# Family reported by ua-parser when nothing matched
_UNMATCHED_FAMILY = "Other"

FALLBACK_DEVICE = DeviceEnrichmentResult(
    device_type=DEVICE_DESKTOP,
    os=UNKNOWN,
    browser=UNKNOWN,
)


class UserAgentDeviceEnricher:
    """Device enricher using the user-agents library.

    Implements DeviceEnricher protocol (structural typing).

    Behavior:
        - Synchronous: pure string parsing, no I/O
        - Fail-open: parse errors are logged and return FALLBACK_DEVICE
        - Unmatched families ("Other") are reported as "Unknown"
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def enrich(self, user_agent: str | None) -> DeviceEnrichmentResult:
        """Classify a raw user agent string.

        Args:
            user_agent: Raw User-Agent header (may be empty or None).

        Returns:
            DeviceEnrichmentResult; FALLBACK_DEVICE for empty input.
        """
        if not user_agent or not user_agent.strip():
            return FALLBACK_DEVICE

        try:
            ua: UserAgent = parse_user_agent(user_agent)
            return DeviceEnrichmentResult(
                device_type=self._determine_device_type(ua),
                os=self._family(ua.os.family),
                browser=self._family(ua.browser.family),
            )
        except Exception as e:
            self._logger.warning(
                "user_agent_parse_failed",
                user_agent=user_agent[:USER_AGENT_LOG_TRUNCATE],
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return FALLBACK_DEVICE

    def _determine_device_type(self, ua: UserAgent) -> str:
        """Determine device class.

        Tablets are checked first: several tablet agents also read as mobile.
        Everything else, bots included, counts as Desktop.
        """
        if ua.is_tablet:
            return DEVICE_TABLET
        if ua.is_mobile:
            return DEVICE_MOBILE
        return DEVICE_DESKTOP

    @staticmethod
    def _family(family: str | None) -> str:
        if not family or family == _UNMATCHED_FAMILY:
            return UNKNOWN
        return family
