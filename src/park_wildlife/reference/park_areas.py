"""Named sub-areas of Golden Gate Park.

Fixed reference data; iteration order of ``PARK_AREAS`` is significant
(nearest-area ties go to the first area listed).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from park_wildlife.reference.geography import BoundingBox, Point

Accessibility = Literal["easy", "moderate", "difficult"]


@dataclass(frozen=True)
class ParkArea:
    """A named region of the park with its habitat and visiting notes."""

    key: str
    name: str
    description: str
    bounds: BoundingBox
    center: Point
    habitat: tuple[str, ...]
    accessibility: Accessibility
    best_times: tuple[str, ...]


def _area(
    key: str,
    name: str,
    description: str,
    *,
    north: float,
    south: float,
    east: float,
    west: float,
    center: tuple[float, float],
    habitat: tuple[str, ...],
    accessibility: Accessibility,
    best_times: tuple[str, ...],
) -> ParkArea:
    return ParkArea(
        key=key,
        name=name,
        description=description,
        bounds=BoundingBox(swlat=south, swlng=west, nelat=north, nelng=east),
        center=Point(lat=center[0], lng=center[1]),
        habitat=habitat,
        accessibility=accessibility,
        best_times=best_times,
    )


_AREAS: tuple[ParkArea, ...] = (
    _area(
        "hippie-hill",
        "Hippie Hill",
        "Open meadow area perfect for picnics and wildlife observation",
        north=37.7695,
        south=37.7688,
        east=-122.4575,
        west=-122.4590,
        center=(37.7691, -122.4583),
        habitat=("grassland", "meadow", "scattered trees"),
        accessibility="easy",
        best_times=("morning", "late afternoon"),
    ),
    _area(
        "japanese-tea-garden",
        "Japanese Tea Garden Area",
        "Cultivated gardens with diverse plant species and bird activity",
        north=37.7705,
        south=37.7695,
        east=-122.4605,
        west=-122.4620,
        center=(37.7698, -122.4612),
        habitat=("cultivated garden", "water features", "ornamental trees"),
        accessibility="easy",
        best_times=("morning", "afternoon"),
    ),
    _area(
        "eucalyptus-grove",
        "Eucalyptus Grove",
        "Dense eucalyptus forest area popular with birds and small mammals",
        north=37.7720,
        south=37.7710,
        east=-122.4680,
        west=-122.4700,
        center=(37.7715, -122.4690),
        habitat=("eucalyptus forest", "dense canopy", "understory"),
        accessibility="moderate",
        best_times=("dawn", "dusk"),
    ),
    _area(
        "beach-chalet",
        "Beach Chalet Area",
        "Western edge of park near ocean, good for coastal species",
        north=37.7710,
        south=37.7695,
        east=-122.4740,
        west=-122.4760,
        center=(37.7703, -122.4751),
        habitat=("coastal grassland", "dunes", "windswept areas"),
        accessibility="easy",
        best_times=("morning", "late afternoon"),
    ),
    _area(
        "panhandle",
        "Panhandle",
        "Narrow strip of park extending eastward, urban wildlife corridor",
        north=37.7697,
        south=37.7690,
        east=-122.4440,
        west=-122.4570,
        center=(37.7694, -122.4505),
        habitat=("urban parkland", "tree-lined paths", "small clearings"),
        accessibility="easy",
        best_times=("morning", "evening"),
    ),
    _area(
        "native-plant-area",
        "Native Plant Areas",
        "Restored native plant habitats throughout the park",
        north=37.7690,
        south=37.7675,
        east=-122.4690,
        west=-122.4715,
        center=(37.7681, -122.4702),
        habitat=("native grassland", "coastal scrub", "wildflower areas"),
        accessibility="moderate",
        best_times=("spring mornings", "late afternoon"),
    ),
    _area(
        "oak-woodlands",
        "Oak Woodlands",
        "Areas dominated by native oak trees, rich in wildlife",
        north=37.7695,
        south=37.7680,
        east=-122.4635,
        west=-122.4655,
        center=(37.7685, -122.4645),
        habitat=("oak woodland", "mixed forest", "understory shrubs"),
        accessibility="easy",
        best_times=("morning", "afternoon"),
    ),
)

#: Areas keyed by slug, in display order.
PARK_AREAS: dict[str, ParkArea] = {area.key: area for area in _AREAS}
