"""Park observation queries with a raw-response cache."""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from typing import Any

import requests
import structlog

from park_wildlife.cache import Clock, TTLCache, make_key, utc_now
from park_wildlife.datasources.inaturalist import client
from park_wildlife.datasources.inaturalist.transform import (
    ID_PREFIX,
    transform_grouped,
    transform_observation,
)
from park_wildlife.schemas import Species

logger = structlog.get_logger(__name__)

DEFAULT_CACHE_TTL = timedelta(minutes=30)


class ObservationClient:
    """
    Queries iNaturalist for observations in the park and returns Species.

    Raw responses are cached per request signature for ``cache_ttl``. A cache
    hit is returned as-is regardless of any caller-side freshness window.
    Transport failures are raised as :class:`~park_wildlife.errors.TransportError`
    and never replaced with an empty result.
    """

    def __init__(
        self,
        *,
        cache_ttl: timedelta = DEFAULT_CACHE_TTL,
        http: requests.Session | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self.cache: TTLCache[dict[str, Any]] = TTLCache(cache_ttl, clock=clock)
        self._http = http

    def _cached(
        self,
        endpoint: str,
        params: dict[str, Any],
        fetch: Callable[[], dict[str, Any]],
    ) -> dict[str, Any]:
        key = make_key(endpoint, params)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("observation cache hit", endpoint=endpoint)
            return cached

        data = fetch()
        self.cache.set(key, data)
        return data

    def query(
        self,
        text: str | None = None,
        species_type: str | None = None,
        limit: int = 20,
    ) -> list[Species]:
        """
        Search recent park observations, one Species per taxon.

        Args:
            text: Optional free-text filter (``q``).
            species_type: Optional type/category mapped to an iconic taxon.
            limit: Observations requested (capped at 100).

        Returns:
            Species in provider order of each taxon's newest observation.
        """
        if limit <= 0:
            return []
        params = client.build_observation_params(
            order_by=client.ORDER_BY_RECENT,
            limit=limit,
            query=text,
            species_type=species_type,
        )
        data = self._cached(
            "observations", params, lambda: client.get_observations(params, http=self._http)
        )
        results: list[dict[str, Any]] = data.get("results") or []
        return transform_grouped(results)

    def get_by_id(self, species_id: str) -> Species | None:
        """Fetch one provider record by ``inat-<id>``; any other id shape gives None."""
        if not species_id.startswith(ID_PREFIX):
            return None
        observation_id = species_id.removeprefix(ID_PREFIX)
        if not observation_id:
            return None

        data = self._cached(
            "observation_detail",
            {"id": observation_id},
            lambda: client.get_observation(observation_id, http=self._http),
        )
        results: list[dict[str, Any]] = data.get("results") or []
        if not results:
            return None
        return transform_observation(results[0])

    def get_popular(self, species_type: str | None = None, limit: int = 10) -> list[Species]:
        """Most-voted park observations, one Species per observation."""
        if limit <= 0:
            return []
        params = client.build_observation_params(
            order_by=client.ORDER_BY_VOTES,
            limit=limit,
            species_type=species_type,
        )
        data = self._cached(
            "observations", params, lambda: client.get_observations(params, http=self._http)
        )
        results: list[dict[str, Any]] = data.get("results") or []
        return [transform_observation(obs) for obs in results if obs.get("taxon")]

    def clear_cache(self) -> None:
        """Drop all cached provider responses."""
        self.cache.clear()
