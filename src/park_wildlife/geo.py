"""
Park geospatial helpers.

Bounds checks, haversine distance, nearest named area, and the
presentation-time coordinate fix used when placing markers on a map.
Pure functions over the static reference data in ``reference/``; nothing here
does I/O or caches.

Functions that pick at random take an optional ``rng`` so callers (and tests)
can supply a seeded ``random.Random``.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from park_wildlife.reference.geography import PARK_BOUNDS, PARK_CENTER
from park_wildlife.reference.park_areas import PARK_AREAS, Accessibility, ParkArea
from park_wildlife.schemas import Location, SpeciesType

EARTH_RADIUS_KM = 6371.0

#: Maximum distance from an area's center for a point to be labelled with it.
NEAREST_AREA_MAX_KM = 0.5

CENTRAL_AREA_LABEL = "Central Golden Gate Park"

# (type, category) -> candidate area keys for suggest_location()
_SUGGESTION_TABLE: dict[tuple[str, str], tuple[str, ...]] = {
    ("animal", "bird"): ("eucalyptus-grove", "oak-woodlands", "japanese-tea-garden"),
    ("animal", "mammal"): ("beach-chalet", "eucalyptus-grove", "native-plant-area"),
    ("plant", "flower"): ("hippie-hill", "native-plant-area"),
    ("plant", "tree"): ("oak-woodlands", "eucalyptus-grove", "japanese-tea-garden"),
}


@dataclass(frozen=True)
class EnhancedLocation:
    """A location annotated with park context."""

    lat: float
    lng: float
    area: str
    park_area: ParkArea | None
    within_park: bool
    distance_from_center: float


# =============================================================================
# Distance & containment
# =============================================================================


def is_within_bounds(lat: float, lng: float) -> bool:
    """True if the point lies inside the park envelope (edges inclusive)."""
    return PARK_BOUNDS.contains(lat, lng)


def distance_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points, in kilometers."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def nearest_area(lat: float, lng: float) -> ParkArea | None:
    """
    Return the park area whose center is closest to the point.

    Returns None when even the closest center is more than
    ``NEAREST_AREA_MAX_KM`` away. Ties keep the first area in
    ``PARK_AREAS`` order.
    """
    best: ParkArea | None = None
    best_distance = math.inf
    for area in PARK_AREAS.values():
        d = distance_km(lat, lng, area.center.lat, area.center.lng)
        if d < best_distance:
            best_distance = d
            best = area
    return best if best_distance <= NEAREST_AREA_MAX_KM else None


def is_within_area(lat: float, lng: float, area_key: str) -> bool:
    """True if the point lies inside the named area's rectangle."""
    area = PARK_AREAS.get(area_key)
    if area is None:
        return False
    return area.bounds.contains(lat, lng)


def containing_areas(lat: float, lng: float) -> list[ParkArea]:
    """All park areas whose rectangle contains the point."""
    return [area for area in PARK_AREAS.values() if area.bounds.contains(lat, lng)]


# =============================================================================
# Location enrichment
# =============================================================================


def enhance(location: Location) -> EnhancedLocation:
    """Annotate a location with its nearest area, containment and distance."""
    return EnhancedLocation(
        lat=location.lat,
        lng=location.lng,
        area=location.area,
        park_area=nearest_area(location.lat, location.lng),
        within_park=is_within_bounds(location.lat, location.lng),
        distance_from_center=distance_km(
            location.lat, location.lng, PARK_CENTER.lat, PARK_CENTER.lng
        ),
    )


def correct_if_out_of_bounds(location: Location, rng: random.Random | None = None) -> Location:
    """
    Move an out-of-park location to a random point inside the park envelope.

    Display-only: the original coordinate is dropped, not kept anywhere.
    The area label is left untouched.
    """
    if is_within_bounds(location.lat, location.lng):
        return location
    rng = rng or random.Random()
    lat = rng.uniform(PARK_BOUNDS.swlat, PARK_BOUNDS.nelat)
    lng = rng.uniform(PARK_BOUNDS.swlng, PARK_BOUNDS.nelng)
    return location.model_copy(update={"lat": lat, "lng": lng})


def suggest_location(
    species_type: SpeciesType | str,
    category: str,
    preferred_habitat: str | None = None,
    rng: random.Random | None = None,
) -> Location:
    """
    Suggest where in the park to look for a kind of species.

    Candidates come from a fixed (type, category) table. A preferred habitat
    narrows them by case-insensitive substring match, unless that would leave
    nothing. Falls back to the park center.
    """
    keys = _SUGGESTION_TABLE.get((str(species_type), category), ())
    candidates = [PARK_AREAS[k] for k in keys]

    if preferred_habitat and candidates:
        wanted = preferred_habitat.lower()
        narrowed = [a for a in candidates if any(wanted in h.lower() for h in a.habitat)]
        if narrowed:
            candidates = narrowed

    if not candidates:
        return Location(lat=PARK_CENTER.lat, lng=PARK_CENTER.lng, area=CENTRAL_AREA_LABEL)

    rng = rng or random.Random()
    chosen = rng.choice(candidates)
    return Location(lat=chosen.center.lat, lng=chosen.center.lng, area=chosen.name)


# =============================================================================
# Area lookups
# =============================================================================


def suitable_areas(habitat_types: list[str]) -> list[ParkArea]:
    """Areas with any habitat tag matching any requested type (either direction)."""
    wanted = [t.lower() for t in habitat_types]
    return [
        area
        for area in PARK_AREAS.values()
        if any(h.lower() in t or t in h.lower() for h in area.habitat for t in wanted)
    ]


def random_location_in_area(area_key: str, rng: random.Random | None = None) -> Location | None:
    """Uniform random point inside the named area, or None for an unknown key."""
    area = PARK_AREAS.get(area_key)
    if area is None:
        return None
    rng = rng or random.Random()
    return Location(
        lat=rng.uniform(area.bounds.swlat, area.bounds.nelat),
        lng=rng.uniform(area.bounds.swlng, area.bounds.nelng),
        area=area.name,
    )


def areas_by_time(time_of_day: str) -> list[ParkArea]:
    """Areas recommended for a time of day ("morning", "dusk", ...)."""
    wanted = time_of_day.lower()
    return [
        area
        for area in PARK_AREAS.values()
        if any(t.lower() in wanted or wanted in t.lower() for t in area.best_times)
    ]


def areas_by_accessibility(level: Accessibility) -> list[ParkArea]:
    """Areas with the given accessibility rating."""
    return [area for area in PARK_AREAS.values() if area.accessibility == level]
