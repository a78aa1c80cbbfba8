"""Park Wildlife - Golden Gate Park species discovery.

Architecture::

    datasources/   External APIs (iNaturalist observations -> Species)
    cache.py       In-memory keyed TTL cache (client tier 30 min, repository tier 15 min)
    repository.py  SpeciesRepository: merge, cache, fallback, loading state
    geo.py         Park bounds, distances, named areas, map coordinate fixes
    reference/     Static data (park envelope, park areas, curated local species)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources → cache → repository (+ reference/local_species) → consumers

Extension points, with step-by-step guides in each package's docstring:
  - New data source:   datasources/__init__.py
  - New reference data: reference/__init__.py
"""

__version__ = "0.1.0"

from park_wildlife.config import Settings, get_settings  # noqa: E402
from park_wildlife.repository import RepositoryOptions, SpeciesRepository  # noqa: E402
from park_wildlife.schemas import LoadingState, Species  # noqa: E402

__all__ = [
    "LoadingState",
    "RepositoryOptions",
    "Settings",
    "Species",
    "SpeciesRepository",
    "__version__",
    "get_settings",
]
