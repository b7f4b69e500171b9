"""Unit tests for the location enrichers.

Uses pytest-httpx to stand in for the ipapi-compatible service.

Tests cover:
- Success mapping (city, region, country_name, coordinates, REMOTE source)
- Request shape (URL, no-cache header)
- Failure policy: error flag, missing city, bad status, invalid JSON,
  non-object body, timeout, connection error
- Local sentinel enricher
"""

import httpx
import pytest
from pytest_httpx import HTTPXMock

from src.domain.enums import LocationSource
from src.infrastructure.enrichers.location_enricher import (
    FALLBACK_LOCATION,
    LOCAL_LOCATION,
    IPApiLocationEnricher,
    LocalAddressLocationEnricher,
)

BASE_URL = "https://geo.example.test"
LOOKUP_URL = f"{BASE_URL}/8.8.8.8/json/"


@pytest.fixture
def enricher(mock_logger):
    return IPApiLocationEnricher(base_url=BASE_URL, logger=mock_logger, timeout=1.0)


@pytest.mark.unit
class TestIPApiLocationEnricherSuccess:
    """Test successful lookups."""

    @pytest.mark.asyncio
    async def test_maps_response_fields(self, enricher, httpx_mock: HTTPXMock):
        """Test response fields become a REMOTE result."""
        httpx_mock.add_response(
            method="GET",
            url=LOOKUP_URL,
            json={
                "ip": "8.8.8.8",
                "city": "Mountain View",
                "region": "California",
                "country_name": "United States",
                "latitude": 37.42,
                "longitude": -122.08,
            },
        )

        result = await enricher.enrich("8.8.8.8")

        assert result.city == "Mountain View"
        assert result.region == "California"
        assert result.country == "United States"
        assert result.latitude == pytest.approx(37.42)
        assert result.longitude == pytest.approx(-122.08)
        assert result.source == LocationSource.REMOTE
        assert result.should_persist is True

    @pytest.mark.asyncio
    async def test_request_is_uncached(self, enricher, httpx_mock: HTTPXMock):
        """Test every lookup asks for a fresh answer."""
        httpx_mock.add_response(url=LOOKUP_URL, json={"city": "X", "country_name": "Y"})

        await enricher.enrich("8.8.8.8")

        request = httpx_mock.get_request()
        assert request is not None
        assert request.method == "GET"
        assert request.headers["Cache-Control"] == "no-cache"

    @pytest.mark.asyncio
    async def test_missing_region_and_country_default_unknown(
        self, enricher, httpx_mock: HTTPXMock
    ):
        """Test absent optional fields fall back to "Unknown"."""
        httpx_mock.add_response(url=LOOKUP_URL, json={"city": "Pune"})

        result = await enricher.enrich("8.8.8.8")

        assert result.city == "Pune"
        assert result.region == "Unknown"
        assert result.country == "Unknown"
        assert result.latitude is None

    def test_lookup_url_strips_trailing_slash(self, mock_logger):
        """Test base URL normalization."""
        enricher = IPApiLocationEnricher(base_url=f"{BASE_URL}/", logger=mock_logger)

        assert enricher.lookup_url("2001:db8::1") == f"{BASE_URL}/2001:db8::1/json/"


@pytest.mark.unit
class TestIPApiLocationEnricherFailures:
    """Test the fail-open policy."""

    @pytest.mark.asyncio
    async def test_error_flag(self, enricher, mock_logger, httpx_mock: HTTPXMock):
        """Test an explicit error indicator is a failure."""
        httpx_mock.add_response(
            url=LOOKUP_URL,
            json={"error": True, "reason": "RateLimited", "city": "Ignored"},
        )

        result = await enricher.enrich("8.8.8.8")

        assert result == FALLBACK_LOCATION
        assert result.latitude is None
        assert result.longitude is None
        mock_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_missing_city(self, enricher, httpx_mock: HTTPXMock):
        """Test a body without city is a failure."""
        httpx_mock.add_response(url=LOOKUP_URL, json={"country_name": "India"})

        assert await enricher.enrich("8.8.8.8") == FALLBACK_LOCATION

    @pytest.mark.asyncio
    async def test_bad_status(self, enricher, httpx_mock: HTTPXMock):
        """Test non-200 responses are failures."""
        httpx_mock.add_response(url=LOOKUP_URL, status_code=500)

        result = await enricher.enrich("8.8.8.8")

        assert result.source == LocationSource.FALLBACK
        assert result.should_persist is False

    @pytest.mark.asyncio
    async def test_invalid_json(self, enricher, httpx_mock: HTTPXMock):
        """Test a non-JSON body is a failure."""
        httpx_mock.add_response(url=LOOKUP_URL, text="<html>oops</html>")

        assert await enricher.enrich("8.8.8.8") == FALLBACK_LOCATION

    @pytest.mark.asyncio
    async def test_non_object_body(self, enricher, httpx_mock: HTTPXMock):
        """Test a JSON array body is a failure."""
        httpx_mock.add_response(url=LOOKUP_URL, json=["Pune", "India"])

        assert await enricher.enrich("8.8.8.8") == FALLBACK_LOCATION

    @pytest.mark.asyncio
    async def test_timeout(self, enricher, mock_logger, httpx_mock: HTTPXMock):
        """Test a timeout is a failure, logged at warning."""
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"), url=LOOKUP_URL)

        result = await enricher.enrich("8.8.8.8")

        assert result == FALLBACK_LOCATION
        assert mock_logger.warning.call_args.args[0] == "geolocation_lookup_timeout"

    @pytest.mark.asyncio
    async def test_connection_error(self, enricher, httpx_mock: HTTPXMock):
        """Test a connection error is a failure."""
        httpx_mock.add_exception(httpx.ConnectError("refused"), url=LOOKUP_URL)

        assert await enricher.enrich("8.8.8.8") == FALLBACK_LOCATION


@pytest.mark.unit
class TestLocalAddressLocationEnricher:
    """Test the local sentinel enricher."""

    @pytest.mark.asyncio
    async def test_returns_sentinel(self):
        """Test the sentinel location is fixed and not persisted."""
        result = await LocalAddressLocationEnricher().enrich("127.0.0.1")

        assert result == LOCAL_LOCATION
        assert (result.city, result.region, result.country) == (
            "Localhost",
            "Development",
            "Local Machine",
        )
        assert result.latitude is None
        assert result.should_persist is False
