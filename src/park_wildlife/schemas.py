"""
Domain models for park wildlife.

Pydantic models for data from the observation provider and the local
dataset. These define the canonical schema - datasources normalize API
responses to these.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

ALL_MONTHS: list[int] = list(range(1, 13))

# =============================================================================
# Enums
# =============================================================================


class SpeciesType(StrEnum):
    """Coarse kingdom split used for filtering."""

    ANIMAL = "animal"
    PLANT = "plant"


class Availability(StrEnum):
    """How much of the year a species can be seen."""

    YEAR_ROUND = "year-round"
    SEASONAL = "seasonal"


class ImageSource(StrEnum):
    """Where a species image came from."""

    INATURALIST = "iNaturalist"
    LOCAL = "local"
    PLACEHOLDER = "placeholder"
    OTHER = "other"


# =============================================================================
# Species
# =============================================================================


class Location(BaseModel):
    """Point inside (or near) the park with a human-readable area label."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    area: str


class Seasonality(BaseModel):
    """When a species is best observed."""

    model_config = ConfigDict(frozen=True)

    best_months: list[int] = Field(default_factory=lambda: list(ALL_MONTHS), min_length=1)
    availability: Availability = Availability.YEAR_ROUND
    peak_time: str = ""
    behavior: str = ""

    @field_validator("best_months")
    @classmethod
    def _months_in_range(cls, value: list[int]) -> list[int]:
        bad = [m for m in value if not 1 <= m <= 12]
        if bad:
            msg = f"months must be within 1..12, got {bad}"
            raise ValueError(msg)
        return value


class PhotoAttribution(BaseModel):
    """Credit and license for a species image."""

    model_config = ConfigDict(frozen=True)

    url: str
    attribution: str | None = None
    license: str | None = None
    source: ImageSource = ImageSource.OTHER


class Species(BaseModel):
    """A species record, merged from the provider feed and the local dataset."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="inat-<observation id> for provider records")
    name: str
    scientific_name: str
    type: SpeciesType
    category: str
    description: str
    image: str
    image_attribution: PhotoAttribution | None = None
    location: Location
    seasonality: Seasonality
    habitat: str
    conservation_status: str

    @property
    def display_name(self) -> str:
        """Common name with scientific name in parentheses."""
        if self.name and self.name != self.scientific_name:
            return f"{self.name} ({self.scientific_name})"
        return self.scientific_name


# =============================================================================
# Repository state
# =============================================================================


class LoadingState(BaseModel):
    """Snapshot of the repository's refresh state.

    Instances are immutable; every transition publishes a new one so
    listeners never observe a half-applied update.
    """

    model_config = ConfigDict(frozen=True)

    is_loading: bool = False
    error: str | None = None
    is_using_fallback: bool = False
    last_updated: datetime | None = None


class DataStats(BaseModel):
    """Counts and flags describing the repository's current data sources."""

    model_config = ConfigDict(frozen=True)

    total: int
    api_count: int
    local_count: int
    is_using_api: bool
    is_using_fallback: bool
    last_updated: datetime | None = None
