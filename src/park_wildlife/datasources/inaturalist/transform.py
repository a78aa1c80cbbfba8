"""Turn iNaturalist observation records into :class:`Species`.

Handles taxonomy -> category/type mapping, seasonality inferred from
observation dates, image selection with attribution, and park-area lookup
for the observation's coordinates.
"""

from __future__ import annotations

import calendar
from collections import Counter
from datetime import date
from typing import Any

from park_wildlife import geo
from park_wildlife.reference.geography import PARK_CENTER, PARK_NAME
from park_wildlife.schemas import (
    ALL_MONTHS,
    Availability,
    ImageSource,
    Location,
    PhotoAttribution,
    Seasonality,
    Species,
    SpeciesType,
)

ID_PREFIX = "inat-"

PLACEHOLDER_IMAGE = "/images/placeholder-wildlife.jpg"

# iNaturalist photo URLs embed the size; "square" is the 75px thumbnail
THUMBNAIL_TOKEN = "square"
LARGE_TOKEN = "large"

ICONIC_TAXON_TO_CATEGORY: dict[str, str] = {
    "Aves": "bird",
    "Mammalia": "mammal",
    "Reptilia": "reptile",
    "Amphibia": "amphibian",
    "Actinopterygii": "fish",
    "Insecta": "insect",
    "Arachnida": "spider",
    "Plantae": "plant",
    "Fungi": "fungi",
}

PLANT_TAXA = frozenset({"Plantae", "Plants"})

# A month is "best" when its count exceeds this fraction of the monthly average
BEST_MONTH_THRESHOLD = 0.5
# Qualifying months needed to call a species year-round
YEAR_ROUND_MIN_MONTHS = 8
PEAK_MONTHS_SHOWN = 3

GENERIC_PEAK_TIME = "Best viewing varies by season"
DEFAULT_HABITAT = f"Various habitats in {PARK_NAME}"
DEFAULT_CONSERVATION_STATUS = "Not Evaluated"


# =============================================================================
# Taxonomy
# =============================================================================


def species_type(iconic_taxon_name: str | None) -> SpeciesType:
    """Plant iff the iconic taxon is a plant-kingdom label."""
    return SpeciesType.PLANT if iconic_taxon_name in PLANT_TAXA else SpeciesType.ANIMAL


def map_category(iconic_taxon_name: str | None) -> str:
    """Internal category for an iconic taxon; unmapped names are lowercased."""
    if not iconic_taxon_name:
        return "unknown"
    return ICONIC_TAXON_TO_CATEGORY.get(iconic_taxon_name, iconic_taxon_name.lower())


# =============================================================================
# Seasonality
# =============================================================================


def _observed_month(obs: dict[str, Any]) -> int | None:
    observed_on = obs.get("observed_on")
    if not observed_on:
        return None
    try:
        return date.fromisoformat(str(observed_on)[:10]).month
    except ValueError:
        return None


def extract_seasonality(observations: list[dict[str, Any]]) -> Seasonality:
    """
    Infer when a species is best seen from its observation dates.

    A month qualifies when its count exceeds half the average monthly count
    (total / 12). With no qualifying months every month is returned, since a
    species with no usable dates can still turn up at any time.
    """
    months = [m for m in (_observed_month(o) for o in observations) if m is not None]
    total = len(months)
    counts = Counter(months)

    average = total / 12
    best = sorted(m for m, count in counts.items() if count > average * BEST_MONTH_THRESHOLD)

    availability = (
        Availability.YEAR_ROUND if len(best) >= YEAR_ROUND_MIN_MONTHS else Availability.SEASONAL
    )

    if best:
        names = ", ".join(calendar.month_name[m] for m in best[:PEAK_MONTHS_SHOWN])
        peak_time = f"Most active in {names}"
    else:
        peak_time = GENERIC_PEAK_TIME

    return Seasonality(
        best_months=best or list(ALL_MONTHS),
        availability=availability,
        peak_time=peak_time,
        behavior=f"Based on {total} community observations in {PARK_NAME}",
    )


# =============================================================================
# Images
# =============================================================================


def _image_source(url: str) -> ImageSource:
    if url == PLACEHOLDER_IMAGE:
        return ImageSource.PLACEHOLDER
    if "inaturalist" in url:
        return ImageSource.INATURALIST
    return ImageSource.OTHER


def resolve_image(obs: dict[str, Any]) -> PhotoAttribution:
    """
    Pick the best available image for an observation.

    Precedence: the first observation photo (thumbnail upgraded to large),
    then the taxon's default photo at original/large/medium, then the
    placeholder. Attribution comes from whichever photo supplied the URL.
    """
    photos = obs.get("photos") or []
    photo = photos[0] if photos else None
    if photo and photo.get("url"):
        url = str(photo["url"]).replace(THUMBNAIL_TOKEN, LARGE_TOKEN)
        return PhotoAttribution(
            url=url,
            attribution=photo.get("attribution"),
            license=photo.get("license_code"),
            source=_image_source(url),
        )

    default_photo = (obs.get("taxon") or {}).get("default_photo") or {}
    url = (
        default_photo.get("original_url")
        or default_photo.get("large_url")
        or default_photo.get("medium_url")
    )
    if url:
        return PhotoAttribution(
            url=url,
            attribution=default_photo.get("attribution"),
            license=default_photo.get("license_code"),
            source=_image_source(url),
        )

    return PhotoAttribution(url=PLACEHOLDER_IMAGE, source=ImageSource.PLACEHOLDER)


# =============================================================================
# Location
# =============================================================================


def parse_coordinates(raw: Any) -> tuple[float, float] | None:
    """Parse ``"lat,lng"`` or ``[lat, lng]``. Returns None if malformed or off the globe."""
    if not raw:
        return None
    parts = str(raw).split(",") if isinstance(raw, str) else list(raw)
    if len(parts) != 2:
        return None
    try:
        lat, lng = float(parts[0]), float(parts[1])
    except (TypeError, ValueError):
        return None
    if not -90 <= lat <= 90 or not -180 <= lng <= 180:
        return None
    return lat, lng


# =============================================================================
# Observation -> Species
# =============================================================================


def transform_observation(
    obs: dict[str, Any],
    group: list[dict[str, Any]] | None = None,
) -> Species:
    """
    Build a Species from a representative observation.

    Args:
        obs: Observation used for names, image and taxonomy.
        group: All observations of the same taxon, used for seasonality.
            Defaults to ``[obs]``.
    """
    taxon = obs.get("taxon") or {}
    iconic = taxon.get("iconic_taxon_name")

    coords = parse_coordinates(obs.get("location"))
    lat, lng = coords if coords else (PARK_CENTER.lat, PARK_CENTER.lng)
    park_area = geo.nearest_area(lat, lng)

    scientific_name = taxon.get("name") or ""
    common_name = taxon.get("preferred_common_name")

    description = common_name or scientific_name
    if taxon.get("wikipedia_url"):
        description += " - Learn more about this species on Wikipedia."
    description += f" Observed by the iNaturalist community in {PARK_NAME}."

    image = resolve_image(obs)
    conservation = (taxon.get("conservation_status") or {}).get("status_name")

    return Species(
        id=f"{ID_PREFIX}{obs['id']}",
        name=common_name or scientific_name or "Unknown Species",
        scientific_name=scientific_name,
        type=species_type(iconic),
        category=map_category(iconic),
        description=description,
        image=image.url,
        image_attribution=image,
        location=Location(lat=lat, lng=lng, area=park_area.name if park_area else PARK_NAME),
        seasonality=extract_seasonality(group if group is not None else [obs]),
        habitat=", ".join(park_area.habitat) if park_area else DEFAULT_HABITAT,
        conservation_status=conservation or DEFAULT_CONSERVATION_STATUS,
    )


def group_by_taxon(observations: list[dict[str, Any]]) -> list[list[dict[str, Any]]]:
    """Group observations by taxon id, keeping provider order. Taxon-less ones are dropped."""
    groups: dict[Any, list[dict[str, Any]]] = {}
    for obs in observations:
        taxon = obs.get("taxon")
        if not taxon:
            continue
        groups.setdefault(taxon.get("id"), []).append(obs)
    return list(groups.values())


def transform_grouped(observations: list[dict[str, Any]]) -> list[Species]:
    """One Species per taxon, using the first observation as representative."""
    return [transform_observation(group[0], group) for group in group_by_taxon(observations)]
