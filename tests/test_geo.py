"""Tests for park geospatial helpers."""

from __future__ import annotations

import random

import pytest

from park_wildlife import geo
from park_wildlife.reference import PARK_AREAS, PARK_BOUNDS, PARK_CENTER
from park_wildlife.schemas import Location

BEACH_CHALET = PARK_AREAS["beach-chalet"]

# Degrees per km near the park's latitude
KM_PER_DEG_LAT = 111.195
KM_PER_DEG_LNG = 87.91


class TestBounds:
    """Test the park envelope check."""

    def test_center_is_inside(self) -> None:
        assert geo.is_within_bounds(PARK_CENTER.lat, PARK_CENTER.lng) is True

    def test_corners_are_inclusive(self) -> None:
        assert geo.is_within_bounds(PARK_BOUNDS.swlat, PARK_BOUNDS.swlng) is True
        assert geo.is_within_bounds(PARK_BOUNDS.nelat, PARK_BOUNDS.nelng) is True

    def test_downtown_is_outside(self) -> None:
        assert geo.is_within_bounds(37.7879, -122.4075) is False

    def test_just_north_is_outside(self) -> None:
        assert geo.is_within_bounds(PARK_BOUNDS.nelat + 0.0001, PARK_CENTER.lng) is False


class TestDistance:
    """Test haversine distance."""

    def test_zero_distance(self) -> None:
        assert geo.distance_km(37.77, -122.48, 37.77, -122.48) == 0.0

    def test_one_degree_of_longitude_at_equator(self) -> None:
        assert geo.distance_km(0, 0, 0, 1) == pytest.approx(111.195, rel=1e-4)

    def test_symmetric(self) -> None:
        a = geo.distance_km(37.7665, -122.5103, 37.7741, -122.4540)
        b = geo.distance_km(37.7741, -122.4540, 37.7665, -122.5103)
        assert a == pytest.approx(b)


class TestNearestArea:
    """Test nearest named area lookup."""

    def test_area_center_maps_to_area(self) -> None:
        area = geo.nearest_area(BEACH_CHALET.center.lat, BEACH_CHALET.center.lng)
        assert area is BEACH_CHALET

    def test_point_300m_from_one_center(self) -> None:
        lng = BEACH_CHALET.center.lng - 0.3 / KM_PER_DEG_LNG
        lat = BEACH_CHALET.center.lat
        assert geo.distance_km(lat, lng, BEACH_CHALET.center.lat, BEACH_CHALET.center.lng) == (
            pytest.approx(0.3, abs=0.005)
        )
        assert geo.nearest_area(lat, lng) is BEACH_CHALET

    def test_point_600m_from_closest_center_is_none(self) -> None:
        lat = BEACH_CHALET.center.lat + 0.6 / KM_PER_DEG_LAT
        lng = BEACH_CHALET.center.lng
        distances = [
            geo.distance_km(lat, lng, a.center.lat, a.center.lng) for a in PARK_AREAS.values()
        ]
        assert min(distances) > 0.5
        assert geo.nearest_area(lat, lng) is None

    def test_park_center_has_no_named_area(self) -> None:
        assert geo.nearest_area(PARK_CENTER.lat, PARK_CENTER.lng) is None


class TestAreaLookups:
    """Test area containment and filtering helpers."""

    def test_is_within_area(self) -> None:
        assert geo.is_within_area(37.7691, -122.4583, "hippie-hill") is True
        assert geo.is_within_area(37.7691, -122.4583, "panhandle") is False

    def test_unknown_area_key(self) -> None:
        assert geo.is_within_area(37.7691, -122.4583, "nowhere") is False

    def test_containing_areas(self) -> None:
        names = [a.name for a in geo.containing_areas(37.7691, -122.4583)]
        assert names == ["Hippie Hill"]

    def test_suitable_areas_matches_either_direction(self) -> None:
        keys = {a.key for a in geo.suitable_areas(["grassland"])}
        assert {"hippie-hill", "beach-chalet", "native-plant-area"} <= keys
        # "oak woodland forest" contains the tag "oak woodland"
        keys = {a.key for a in geo.suitable_areas(["Oak Woodland forest"])}
        assert "oak-woodlands" in keys

    def test_areas_by_time(self) -> None:
        keys = {a.key for a in geo.areas_by_time("dusk")}
        assert keys == {"eucalyptus-grove"}

    def test_areas_by_accessibility(self) -> None:
        keys = {a.key for a in geo.areas_by_accessibility("moderate")}
        assert keys == {"eucalyptus-grove", "native-plant-area"}

    def test_random_location_in_area(self) -> None:
        loc = geo.random_location_in_area("panhandle", rng=random.Random(1))
        assert loc is not None
        assert loc.area == "Panhandle"
        assert geo.is_within_area(loc.lat, loc.lng, "panhandle")

    def test_random_location_unknown_area(self) -> None:
        assert geo.random_location_in_area("nowhere") is None


class TestEnhance:
    """Test location enrichment."""

    def test_enhance_inside_area(self) -> None:
        loc = Location(lat=BEACH_CHALET.center.lat, lng=BEACH_CHALET.center.lng, area="x")
        enhanced = geo.enhance(loc)
        assert enhanced.park_area is BEACH_CHALET
        assert enhanced.within_park is True
        assert enhanced.area == "x"
        assert enhanced.distance_from_center == pytest.approx(
            geo.distance_km(loc.lat, loc.lng, PARK_CENTER.lat, PARK_CENTER.lng)
        )

    def test_enhance_does_not_mutate(self) -> None:
        loc = Location(lat=37.9, lng=-122.3, area="Elsewhere")
        enhanced = geo.enhance(loc)
        assert enhanced.within_park is False
        assert enhanced.park_area is None
        assert loc == Location(lat=37.9, lng=-122.3, area="Elsewhere")


class TestCorrectIfOutOfBounds:
    """Test the map-display coordinate fix."""

    def test_inside_location_unchanged(self) -> None:
        loc = Location(lat=PARK_CENTER.lat, lng=PARK_CENTER.lng, area="Center")
        assert geo.correct_if_out_of_bounds(loc) is loc

    @pytest.mark.parametrize("seed", range(20))
    def test_outside_location_moved_inside(self, seed: int) -> None:
        loc = Location(lat=37.80, lng=-122.40, area="Somewhere else")
        fixed = geo.correct_if_out_of_bounds(loc, rng=random.Random(seed))
        assert geo.is_within_bounds(fixed.lat, fixed.lng)
        assert fixed.area == "Somewhere else"
        assert loc.lat == 37.80

    def test_seeded_rng_is_deterministic(self) -> None:
        loc = Location(lat=0.0, lng=0.0, area="Null Island")
        a = geo.correct_if_out_of_bounds(loc, rng=random.Random(7))
        b = geo.correct_if_out_of_bounds(loc, rng=random.Random(7))
        assert (a.lat, a.lng) == (b.lat, b.lng)


class TestSuggestLocation:
    """Test habitat-based location suggestions."""

    def test_bird_goes_to_a_bird_area(self) -> None:
        names = {"Eucalyptus Grove", "Oak Woodlands", "Japanese Tea Garden Area"}
        for seed in range(10):
            loc = geo.suggest_location("animal", "bird", rng=random.Random(seed))
            assert loc.area in names

    def test_suggestion_is_area_center(self) -> None:
        loc = geo.suggest_location("plant", "flower", "meadow")
        area = PARK_AREAS["hippie-hill"]
        assert (loc.lat, loc.lng, loc.area) == (area.center.lat, area.center.lng, area.name)

    def test_preferred_habitat_narrows_case_insensitively(self) -> None:
        for seed in range(10):
            loc = geo.suggest_location("animal", "mammal", "DUNES", rng=random.Random(seed))
            assert loc.area == "Beach Chalet Area"

    def test_unmatched_habitat_keeps_all_candidates(self) -> None:
        seen = {
            geo.suggest_location("plant", "tree", "glacier", rng=random.Random(seed)).area
            for seed in range(30)
        }
        assert seen <= {"Oak Woodlands", "Eucalyptus Grove", "Japanese Tea Garden Area"}
        assert len(seen) > 1

    def test_unknown_category_defaults_to_center(self) -> None:
        loc = geo.suggest_location("plant", "shrub")
        assert loc.area == geo.CENTRAL_AREA_LABEL
        assert (loc.lat, loc.lng) == (PARK_CENTER.lat, PARK_CENTER.lng)
