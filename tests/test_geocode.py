"""Tests for the geocoding step."""

from unittest.mock import AsyncMock

import pytest
import requests

from weather_agent.errors import Infrastructure, NotFound, UpstreamAPI
from weather_agent.models import GeoLocation
from weather_agent.result import is_ok, unwrap, unwrap_err
from weather_agent.services.geocode import geocode
from weather_agent.services.open_meteo import OpenMeteoError


class TestGeocode:
    @pytest.mark.asyncio
    async def test_first_candidate_wins(self, search: AsyncMock) -> None:
        result = await geocode("Tokyo", search)
        assert unwrap(result) == GeoLocation(latitude=35.68, longitude=139.69, name="Tokyo")
        search.assert_awaited_once_with("Tokyo")

    @pytest.mark.asyncio
    async def test_zero_results_is_not_found(self) -> None:
        """No results is a domain condition, returned not raised."""
        search = AsyncMock(return_value={"generationtime_ms": 0.5})
        result = await geocode("Atlantis", search)
        assert unwrap_err(result) == NotFound(resource="location", id="Atlantis")

    @pytest.mark.asyncio
    async def test_empty_results_list_is_not_found(self) -> None:
        result = await geocode("Atlantis", AsyncMock(return_value={"results": []}))
        assert isinstance(unwrap_err(result), NotFound)

    @pytest.mark.asyncio
    async def test_network_failure_is_infrastructure(self) -> None:
        boom = requests.ConnectionError("refused")
        result = await geocode("Tokyo", AsyncMock(side_effect=boom))
        error = unwrap_err(result)
        assert isinstance(error, Infrastructure)
        assert error.message == "Failed to fetch geocoding data"
        assert error.cause is boom

    @pytest.mark.asyncio
    async def test_malformed_candidate_is_infrastructure(self) -> None:
        search = AsyncMock(return_value={"results": [{"name": "Tokyo"}]})
        result = await geocode("Tokyo", search)
        assert isinstance(unwrap_err(result), Infrastructure)

    @pytest.mark.asyncio
    async def test_api_error_is_upstream(self) -> None:
        search = AsyncMock(side_effect=OpenMeteoError(400, "Parameter count must be between 1 and 100"))
        result = await geocode("Tokyo", search)
        assert unwrap_err(result) == UpstreamAPI(
            message="Parameter count must be between 1 and 100", status_code=400
        )

    @pytest.mark.asyncio
    async def test_missing_display_name_falls_back_to_query(self) -> None:
        search = AsyncMock(return_value={"results": [{"latitude": 1, "longitude": 2}]})
        result = await geocode("Somewhere", search)
        assert is_ok(result)
        assert unwrap(result).name == "Somewhere"
