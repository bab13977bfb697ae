"""Unit tests for resolving criteria into results."""

import pytest
from unittest.mock import AsyncMock

from golfpro.schemas.geocoding import Coordinates, GeocodeResult, GeocodeStatus
from golfpro.schemas.search import FilterCriteria
from golfpro.search.resolver import (
    GeocodingUnavailableError,
    InstructorSearch,
    LocationNotFoundError,
)

AUSTIN = Coordinates(latitude=30.2672, longitude=-97.7431)
ROUND_ROCK = Coordinates(latitude=30.5083, longitude=-97.6789)
DALLAS = Coordinates(latitude=32.7767, longitude=-96.7970)


@pytest.fixture
def directory(make_summary):
    return [
        make_summary(name="Downtown Pro", latitude=AUSTIN.latitude, longitude=AUSTIN.longitude),
        make_summary(name="Round Rock Pro", latitude=ROUND_ROCK.latitude, longitude=ROUND_ROCK.longitude),
        make_summary(name="Dallas Pro", latitude=DALLAS.latitude, longitude=DALLAS.longitude),
        make_summary(name="Unmapped Pro", latitude=None, longitude=None),
    ]


def make_search(candidates, geocoder, default_radius_km=5.0):
    return InstructorSearch(AsyncMock(return_value=candidates), geocoder, default_radius_km)


class TestInstructorSearch:
    @pytest.mark.asyncio
    async def test_without_location_returns_all_matches(self, directory, mock_geocoder):
        search = make_search(directory, mock_geocoder)

        resolution = await search(FilterCriteria())

        assert [i.name for i in resolution.items] == [
            "Downtown Pro", "Round Rock Pro", "Dallas Pro", "Unmapped Pro"
        ]
        assert resolution.center is None
        assert all(i.distance_km is None for i in resolution.items)
        mock_geocoder.lookup.assert_not_called()

    @pytest.mark.asyncio
    async def test_default_radius_applied(self, directory, mock_geocoder):
        search = make_search(directory, mock_geocoder)

        resolution = await search(FilterCriteria(zip_code="78701"))

        assert [i.name for i in resolution.items] == ["Downtown Pro"]
        assert resolution.items[0].distance_km == 0.0
        assert resolution.center == AUSTIN
        mock_geocoder.lookup.assert_awaited_once_with("78701")

    @pytest.mark.asyncio
    async def test_wider_radius_annotates_distance(self, directory, mock_geocoder):
        search = make_search(directory, mock_geocoder)

        resolution = await search(FilterCriteria(zip_code=" 78701 ", radius_km=50))

        names = [i.name for i in resolution.items]
        assert names == ["Downtown Pro", "Round Rock Pro"]
        assert resolution.items[1].distance_km == pytest.approx(27.5, abs=1)

    @pytest.mark.asyncio
    async def test_radius_then_filters(self, directory, mock_geocoder):
        search = make_search(directory, mock_geocoder)

        resolution = await search(FilterCriteria(zip_code="78701", radius_km=50, search_term="round"))

        assert [i.name for i in resolution.items] == ["Round Rock Pro"]

    @pytest.mark.asyncio
    async def test_unknown_zip_raises_not_found(self, directory, mock_geocoder):
        mock_geocoder.lookup.return_value = GeocodeResult(status=GeocodeStatus.NOT_FOUND)
        search = make_search(directory, mock_geocoder)

        with pytest.raises(LocationNotFoundError) as exc_info:
            await search(FilterCriteria(zip_code="00000"))

        assert str(exc_info.value) == "ZIP code 00000 not found"

    @pytest.mark.asyncio
    async def test_geocoder_outage_raises_unavailable(self, directory, mock_geocoder):
        mock_geocoder.lookup.return_value = GeocodeResult(status=GeocodeStatus.UNAVAILABLE)
        search = make_search(directory, mock_geocoder)

        with pytest.raises(GeocodingUnavailableError):
            await search(FilterCriteria(zip_code="78701"))

    @pytest.mark.asyncio
    async def test_blank_zip_is_not_a_location(self, directory, mock_geocoder):
        search = make_search(directory, mock_geocoder)

        resolution = await search(FilterCriteria(zip_code="  "))

        assert len(resolution.items) == 4
        mock_geocoder.lookup.assert_not_called()
