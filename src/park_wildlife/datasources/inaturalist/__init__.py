"""iNaturalist park observation data source.

Fetches observations recorded in Golden Gate Park from the iNaturalist API
and turns them into Species records.

Public API:
  - client: Low-level HTTP (rate-limited, error translation, request params)
  - transform: observation -> Species, seasonality inference, image selection
  - observations: ObservationClient (cached query / get_by_id / get_popular)
"""

from park_wildlife.datasources.inaturalist.client import PLACE_ID, TYPE_TO_TAXON_ID
from park_wildlife.datasources.inaturalist.observations import ObservationClient
from park_wildlife.datasources.inaturalist.transform import (
    ID_PREFIX,
    PLACEHOLDER_IMAGE,
    extract_seasonality,
    map_category,
    resolve_image,
    species_type,
    transform_observation,
)

__all__ = [
    "ID_PREFIX",
    "PLACEHOLDER_IMAGE",
    "PLACE_ID",
    "TYPE_TO_TAXON_ID",
    "ObservationClient",
    "extract_seasonality",
    "map_category",
    "resolve_image",
    "species_type",
    "transform_observation",
]
