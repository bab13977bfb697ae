"""Unit tests for distance calculation and radius filtering."""

from types import SimpleNamespace

import pytest

from golfpro.schemas.geocoding import Coordinates
from golfpro.services.distance import (
    distance,
    entity_coordinates,
    filter_within_radius,
    km_to_miles,
    miles_to_km,
)

WASHINGTON_DC = Coordinates(latitude=38.8977, longitude=-77.0365)
NEW_YORK = Coordinates(latitude=40.7128, longitude=-74.0060)


def located(name, latitude, longitude):
    return SimpleNamespace(name=name, latitude=latitude, longitude=longitude)


class TestDistance:
    """Test haversine distance."""

    def test_washington_to_new_york(self):
        """Known fixture: DC to NYC is roughly 328 km."""
        assert distance(WASHINGTON_DC, NEW_YORK) == pytest.approx(328, abs=4)

    def test_distance_to_self_is_zero(self):
        assert distance(NEW_YORK, NEW_YORK) == pytest.approx(0.0, abs=1e-9)

    def test_distance_is_symmetric(self):
        assert distance(WASHINGTON_DC, NEW_YORK) == pytest.approx(distance(NEW_YORK, WASHINGTON_DC))

    def test_antipodal_points_are_half_circumference(self):
        a = Coordinates(latitude=0, longitude=0)
        b = Coordinates(latitude=0, longitude=180)
        assert distance(a, b) == pytest.approx(20015.1, abs=1)

    def test_pole_to_pole(self):
        north = Coordinates(latitude=90, longitude=0)
        south = Coordinates(latitude=-90, longitude=45)
        assert distance(north, south) == pytest.approx(20015.1, abs=1)


class TestFilterWithinRadius:
    """Test radius filtering."""

    def test_keeps_entities_inside_radius(self):
        nearby = located("nearby", 40.7306, -73.9352)  # Brooklyn, ~6 km
        far = located("far", WASHINGTON_DC.latitude, WASHINGTON_DC.longitude)

        result = filter_within_radius([nearby, far], NEW_YORK, 50)

        assert result == [nearby]

    def test_boundary_distance_is_inclusive(self):
        dc = located("dc", WASHINGTON_DC.latitude, WASHINGTON_DC.longitude)
        exact = distance(WASHINGTON_DC, NEW_YORK)

        assert filter_within_radius([dc], NEW_YORK, exact) == [dc]

    def test_preserves_input_order(self):
        entities = [
            located("c", 40.72, -74.00),
            located("a", 40.71, -74.01),
            located("b", 40.70, -74.02),
        ]

        result = filter_within_radius(entities, NEW_YORK, 10)

        assert [e.name for e in result] == ["c", "a", "b"]

    def test_zero_radius_excludes_non_coincident(self):
        entities = [located("near", 40.7129, -74.0060), located("dc", 38.8977, -77.0365)]

        assert filter_within_radius(entities, NEW_YORK, 0) == []

    def test_zero_radius_keeps_coincident(self):
        same = located("same", NEW_YORK.latitude, NEW_YORK.longitude)

        assert filter_within_radius([same], NEW_YORK, 0) == [same]

    def test_negative_radius_is_empty(self):
        same = located("same", NEW_YORK.latitude, NEW_YORK.longitude)

        assert filter_within_radius([same], NEW_YORK, -1) == []

    @pytest.mark.parametrize("latitude,longitude", [
        (None, -74.0060),
        (40.7128, None),
        (None, None),
    ])
    def test_missing_coordinates_excluded(self, latitude, longitude):
        entity = located("ungeocoded", latitude, longitude)

        assert filter_within_radius([entity], NEW_YORK, 20000) == []

    def test_zero_coordinates_are_valid(self):
        """Latitude/longitude of 0 are real coordinates, not missing ones."""
        null_island = located("null island", 0.0, 0.0)

        assert filter_within_radius([null_island], Coordinates(latitude=0, longitude=0), 1) == [null_island]

    def test_accepts_generators(self):
        entities = (located(str(i), 40.7128, -74.0060) for i in range(3))

        assert len(filter_within_radius(entities, NEW_YORK, 1)) == 3


class TestHelpers:
    def test_entity_coordinates(self):
        assert entity_coordinates(located("x", 1.5, 2.5)) == Coordinates(latitude=1.5, longitude=2.5)
        assert entity_coordinates(located("x", None, 2.5)) is None
        assert entity_coordinates(object()) is None

    def test_unit_conversions(self):
        assert km_to_miles(100) == pytest.approx(62.1371)
        assert miles_to_km(100) == pytest.approx(160.934)
        assert miles_to_km(km_to_miles(42)) == pytest.approx(42, rel=1e-4)


class TestRecordShapes:
    """Test the record shapes the radius filter accepts."""

    def test_mapping_records_are_read(self):
        record = {"id": 1, "latitude": 40.7130, "longitude": -74.0062}

        assert filter_within_radius([record], NEW_YORK, 1) == [record]
        assert entity_coordinates(record) == Coordinates(latitude=40.7130, longitude=-74.0062)

    def test_mapping_without_coordinates_excluded(self):
        assert filter_within_radius([{"id": 2}], NEW_YORK, 20000) == []

    @pytest.mark.parametrize("latitude,longitude", [
        (95.0, -74.0),
        (40.7, -190.0),
        ("north", -74.0),
    ])
    def test_unusable_coordinates_are_outside_radius(self, latitude, longitude):
        broken = located("broken", latitude, longitude)
        good = located("good", NEW_YORK.latitude, NEW_YORK.longitude)

        assert filter_within_radius([broken, good], NEW_YORK, 20000) == [good]
        assert entity_coordinates(broken) is None
