"""Geographic bounds for Golden Gate Park."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BoundingBox:
    """SW/NE lat-lng bounding box."""

    swlat: float
    swlng: float
    nelat: float
    nelng: float

    def contains(self, lat: float, lng: float) -> bool:
        """Inclusive axis-aligned containment test."""
        return self.swlat <= lat <= self.nelat and self.swlng <= lng <= self.nelng


@dataclass(frozen=True)
class Point:
    """A lat/lng pair."""

    lat: float
    lng: float


# Whole-park envelope used for containment checks and coordinate correction
PARK_BOUNDS = BoundingBox(swlat=37.7665, swlng=-122.5103, nelat=37.7741, nelng=-122.4540)

PARK_CENTER = Point(lat=37.7694, lng=-122.4862)

PARK_NAME = "Golden Gate Park"

# iNaturalist place_id for Golden Gate Park
INAT_PLACE_ID = 120753
