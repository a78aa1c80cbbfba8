"""
iNaturalist API client.

Low-level HTTP client for the iNaturalist API v1.
Handles rate limiting, request building, and error translation.

API docs: https://api.inaturalist.org/v1/docs/
Rate limits: ~1 req/sec, 10k/day
Recommended practices: https://www.inaturalist.org/pages/api+recommended+practices
"""

from __future__ import annotations

import threading
import time
from typing import Any

import requests
import structlog

from park_wildlife.errors import TransportError
from park_wildlife.reference.geography import INAT_PLACE_ID
from park_wildlife.services.http import session as default_session

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# Taxon IDs (iconic taxa used as type filters)
# ---------------------------------------------------------------------------
TYPE_TO_TAXON_ID: dict[str, int | None] = {
    "animal": None,  # no filter; let iNat return everything
    "bird": 3,
    "mammal": 40151,
    "reptile": 26036,
    "amphibian": 20978,
    "fish": 47178,
    "insect": 47158,
    "plant": 47126,
    "fungi": 47170,
}

# ---------------------------------------------------------------------------
# API configuration
# ---------------------------------------------------------------------------
API_BASE = "https://api.inaturalist.org/v1"
PLACE_ID = INAT_PLACE_ID
MAX_PER_PAGE = 100

ORDER_BY_RECENT = "observed_on"
ORDER_BY_VOTES = "votes"

# ---------------------------------------------------------------------------
# Rate limiting (module-level state)
# ---------------------------------------------------------------------------
_last_request_time: float = 0.0
_rate_lock = threading.Lock()
MIN_REQUEST_INTERVAL: float = 1.1  # seconds, under 1 req/s


def _rate_limit() -> None:
    """Sleep if needed to honour the ~1 req/s rate limit."""
    global _last_request_time  # noqa: PLW0603
    with _rate_lock:
        now = time.monotonic()
        elapsed = now - _last_request_time
        if elapsed < MIN_REQUEST_INTERVAL:
            time.sleep(MIN_REQUEST_INTERVAL - elapsed)
        _last_request_time = time.monotonic()


def taxon_id_for_type(species_type: str | None) -> int | None:
    """Map a species type/category name to an iconic taxon id (None = no filter)."""
    if not species_type:
        return None
    return TYPE_TO_TAXON_ID.get(species_type.lower())


def build_observation_params(
    *,
    order_by: str,
    limit: int,
    query: str | None = None,
    species_type: str | None = None,
) -> dict[str, Any]:
    """Build query parameters for a park-scoped ``/observations`` search."""
    params: dict[str, Any] = {
        "place_id": PLACE_ID,
        "verifiable": "true",
        "per_page": max(1, min(limit, MAX_PER_PAGE)),
        "order": "desc",
        "order_by": order_by,
    }
    if query:
        params["q"] = query
    taxon_id = taxon_id_for_type(species_type)
    if taxon_id is not None:
        params["taxon_id"] = taxon_id
    return params


def _get(
    endpoint: str,
    params: dict[str, Any] | None = None,
    *,
    http: requests.Session | None = None,
) -> dict[str, Any]:
    """Make a rate-limited GET request to the iNaturalist API v1.

    Raises:
        TransportError: on connection failure, timeout, non-2xx status or
            an undecodable body.
    """
    _rate_limit()
    url = f"{API_BASE}/{endpoint}"
    http = http or default_session
    try:
        resp = http.get(url, params=params or {})
        resp.raise_for_status()
        data: dict[str, Any] = resp.json()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        logger.error("iNaturalist request failed", url=url, status_code=status)
        msg = f"iNaturalist API error: {status} for {endpoint}"
        raise TransportError(msg, url=url, status_code=status) from e
    except (requests.RequestException, ValueError) as e:
        logger.error("iNaturalist request failed", url=url, error=str(e))
        msg = f"iNaturalist request failed for {endpoint}: {e}"
        raise TransportError(msg, url=url) from e
    return data


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------


def get_observations(
    params: dict[str, Any], *, http: requests.Session | None = None
) -> dict[str, Any]:
    """GET /observations: search observations."""
    return _get("observations", params, http=http)


def get_observation(
    observation_id: str, *, http: requests.Session | None = None
) -> dict[str, Any]:
    """GET /observations/{id}: a single observation in a ``results`` envelope."""
    return _get(f"observations/{observation_id}", http=http)
