"""
Species repository: the read API used by the map, detail and chat layers.

Combines live iNaturalist observations with the curated local dataset:

- ``refresh()`` pulls recent park observations, bounded by ``timeout_ms``
- merged results are cached for 15 minutes, independently of the client's
  own 30 minute response cache
- provider records win over local ones with the same id or scientific name
- when the provider is unreachable the repository degrades to local data and
  says so through :class:`~park_wildlife.schemas.LoadingState`

Construct one repository per process and pass it to whatever needs it::

    repo = SpeciesRepository(options=RepositoryOptions.from_settings(get_settings()))
    repo.subscribe(render_banner)
    repo.load_initial_data()
    birds = repo.search(category="bird")
"""

from __future__ import annotations

import random
import threading
from collections.abc import Callable, Iterable
from concurrent.futures import Future, wait
from datetime import date, timedelta
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

from park_wildlife.cache import Clock, TTLCache, utc_now
from park_wildlife.config import Settings
from park_wildlife.datasources.inaturalist import ID_PREFIX, ObservationClient
from park_wildlife.errors import RefreshTimeoutError
from park_wildlife.reference.local_species import LOCAL_SPECIES
from park_wildlife.schemas import DataStats, LoadingState, Species

logger = structlog.get_logger(__name__)

Listener = Callable[[LoadingState], None]

DEFAULT_CACHE_TTL = timedelta(minutes=15)

# Observations pulled by refresh()
REFRESH_LIMIT = 50

ALL_SPECIES_KEY = "all_species"
API_SPECIES_KEY = "api_species"

ALL_TYPES = "all"


def _start_fetch(fn: Callable[..., list[Species]], *args: Any) -> Future[list[Species]]:
    """Run ``fn`` on its own daemon thread and return a future for its outcome."""
    future: Future[list[Species]] = Future()
    future.set_running_or_notify_cancel()

    def run() -> None:
        try:
            future.set_result(fn(*args))
        except Exception as e:
            future.set_exception(e)

    threading.Thread(target=run, name="species-refresh", daemon=True).start()
    return future


class RepositoryOptions(BaseModel):
    """Runtime switches for :class:`SpeciesRepository`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    use_api: bool = True
    enable_cache: bool = True
    fallback_to_local: bool = True
    timeout_ms: int = Field(default=10_000, gt=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> RepositoryOptions:
        return cls(
            use_api=settings.use_api,
            enable_cache=settings.enable_cache,
            fallback_to_local=settings.fallback_to_local,
            timeout_ms=settings.timeout_ms,
        )


def merge_species(primary: Iterable[Species], secondary: Iterable[Species]) -> list[Species]:
    """
    Concatenate two species lists without duplicate ids or scientific names.

    Earlier entries win: a secondary record is dropped if its id or its
    scientific name is already present.
    """
    merged: list[Species] = []
    seen_ids: set[str] = set()
    seen_names: set[str] = set()
    for s in (*primary, *secondary):
        if s.id in seen_ids or s.scientific_name in seen_names:
            continue
        seen_ids.add(s.id)
        seen_names.add(s.scientific_name)
        merged.append(s)
    return merged


def _matches_text(species: Species, needle: str) -> bool:
    return any(
        needle in field.lower()
        for field in (
            species.name,
            species.scientific_name,
            species.description,
            species.category,
            species.habitat,
        )
    )


class SpeciesRepository:
    """
    Merges, caches and falls back between iNaturalist and local species.

    Read methods (``get_all_species``, ``search``, ``get_seasonal``,
    ``get_popular``, ``get_featured``) never raise for provider failures;
    they serve whatever data is available. Only ``refresh()`` can raise, and
    only when ``fallback_to_local`` is off.

    ``refresh()`` runs each provider fetch on its own daemon thread and waits
    at most ``timeout_ms``. A fetch that loses the race is abandoned, not
    cancelled: it may still finish later and populate the client's cache,
    but it never delays a later refresh or interpreter exit.
    """

    def __init__(
        self,
        client: ObservationClient | None = None,
        *,
        options: RepositoryOptions | None = None,
        local_species: Iterable[Species] = LOCAL_SPECIES,
        cache_ttl: timedelta = DEFAULT_CACHE_TTL,
        clock: Clock = utc_now,
        rng: random.Random | None = None,
    ) -> None:
        self.client = client or ObservationClient()
        self.options = options or RepositoryOptions()
        self.cache: TTLCache[list[Species]] = TTLCache(cache_ttl, clock=clock)
        self._local: list[Species] = list(local_species)
        self._api_species: list[Species] = []
        self._state = LoadingState()
        self._listeners: list[Listener] = []
        self._clock = clock
        self._rng = rng or random.Random()

    # -------------------------------------------------------------------------
    # Configuration & lifecycle
    # -------------------------------------------------------------------------

    def configure(self, **changes: Any) -> RepositoryOptions:
        """Merge option changes over the current options.

        Raises:
            pydantic.ValidationError: on unknown keys or invalid values.
        """
        self.options = RepositoryOptions.model_validate({**self.options.model_dump(), **changes})
        return self.options

    def load_initial_data(self) -> None:
        """First refresh after construction. Failures leave the repository on local data."""
        if not self.options.use_api:
            return
        try:
            self.refresh()
        except Exception as e:
            logger.warning("initial species load failed, using local data", error=str(e))
            self._update(error="Failed to load API data", is_using_fallback=True)

    def close(self) -> None:
        """Drop all listeners. Abandoned fetches finish on their own threads."""
        self._listeners.clear()

    def __enter__(self) -> SpeciesRepository:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Loading state
    # -------------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for loading-state changes.

        The listener is called immediately with the current state, then on
        every change, in subscription order. Returns an idempotent
        unsubscribe function.
        """
        self._listeners.append(listener)
        listener(self._state)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def get_loading_state(self) -> LoadingState:
        return self._state

    def _update(self, **changes: Any) -> None:
        self._state = self._state.model_copy(update=changes)
        for listener in list(self._listeners):
            listener(self._state)

    # -------------------------------------------------------------------------
    # Cache
    # -------------------------------------------------------------------------

    def _get_cached(self, key: str) -> list[Species] | None:
        if not self.options.enable_cache:
            return None
        return self.cache.get(key)

    def _set_cached(self, key: str, data: list[Species]) -> None:
        if self.options.enable_cache:
            self.cache.set(key, data)

    # -------------------------------------------------------------------------
    # Refresh
    # -------------------------------------------------------------------------

    def refresh(self) -> None:
        """
        Pull recent park observations from iNaturalist.

        Success replaces the in-memory provider species and clears any error.
        On failure or timeout the error is recorded; with ``fallback_to_local``
        the repository switches to local data, otherwise the error is raised.

        Raises:
            RefreshTimeoutError: the fetch did not finish within ``timeout_ms``
                and ``fallback_to_local`` is off.
            TransportError: the provider failed and ``fallback_to_local`` is off.
        """
        if not self.options.use_api:
            return

        self._update(is_loading=True, error=None)
        timeout = self.options.timeout_ms / 1000

        try:
            future = _start_fetch(self.client.query, None, None, REFRESH_LIMIT)
            done, _ = wait([future], timeout=timeout)
            if not done:
                raise RefreshTimeoutError
            species = future.result()
        except Exception as e:
            logger.warning(
                "iNaturalist refresh failed", error=str(e), timeout_ms=self.options.timeout_ms
            )
            if self.options.fallback_to_local:
                self._update(
                    is_loading=False,
                    error=f"iNaturalist API failed: {e}",
                    is_using_fallback=True,
                    last_updated=self._clock(),
                )
                return
            self._update(is_loading=False, error=f"API failed: {e}", is_using_fallback=False)
            raise

        self._api_species = species
        self._set_cached(API_SPECIES_KEY, species)
        logger.info("iNaturalist refresh complete", species=len(species))
        self._update(
            is_loading=False,
            error=None,
            is_using_fallback=False,
            last_updated=self._clock(),
        )

    def force_refresh(self) -> None:
        """Clear both cache tiers and the provider species, then refresh."""
        self.cache.clear()
        self._api_species = []
        self.client.clear_cache()
        if self.options.use_api:
            self.refresh()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_all_species(self) -> list[Species]:
        """Provider species (when healthy) followed by non-colliding local species."""
        cached = self._get_cached(ALL_SPECIES_KEY)
        if cached is not None:
            return list(cached)

        primary: list[Species] = []
        if self.options.use_api and not self._state.error:
            primary = self._api_species

        secondary: list[Species] = []
        if self.options.fallback_to_local or not self.options.use_api:
            secondary = self._local

        combined = merge_species(primary, secondary)
        self._set_cached(ALL_SPECIES_KEY, combined)
        return list(combined)

    def search(
        self,
        query: str | None = None,
        species_type: str = ALL_TYPES,
        category: str | None = None,
        *,
        include_api: bool = True,
        include_local: bool = True,
    ) -> list[Species]:
        """
        Search provider and local species.

        Provider results come from iNaturalist's own free-text search and are
        not re-filtered by ``query``; the substring filter (name, scientific
        name, description, category, habitat) applies to local entries only.
        Provider failures are logged and the local results returned.
        """
        api_results: list[Species] = []
        if include_api and self.options.use_api:
            provider_type = None if species_type == ALL_TYPES else species_type
            try:
                api_results = self.client.query(query, provider_type)
            except Exception as e:
                logger.warning("iNaturalist search failed", query=query, error=str(e))

        local_results: list[Species] = []
        if include_local:
            names = {s.scientific_name for s in api_results}
            local_results = [s for s in self._local if s.scientific_name not in names]
            if query:
                needle = query.lower()
                local_results = [s for s in local_results if _matches_text(s, needle)]

        results = api_results + local_results
        if species_type and species_type != ALL_TYPES:
            results = [s for s in results if s.type == species_type]
        if category:
            results = [s for s in results if s.category == category]
        return results

    def get_by_type(self, species_type: str) -> list[Species]:
        return self.search(species_type=species_type)

    def get_by_id(self, species_id: str) -> Species | None:
        """Look up one species; provider ids go to iNaturalist first."""
        if species_id.startswith(ID_PREFIX):
            try:
                found = self.client.get_by_id(species_id)
            except Exception as e:
                logger.warning("iNaturalist lookup failed", species_id=species_id, error=str(e))
            else:
                if found is not None:
                    return found

        return next((s for s in self.get_all_species() if s.id == species_id), None)

    def get_seasonal(self, month: int | None = None) -> list[Species]:
        """Species whose best months include ``month`` (default: this month)."""
        month = month or date.today().month
        return [s for s in self.get_all_species() if month in s.seasonality.best_months]

    def get_popular(self, n: int = 10) -> list[Species]:
        """Most-voted provider species, or a random sample of all species."""
        if self.options.use_api:
            try:
                return self.client.get_popular(None, n)
            except Exception as e:
                logger.warning("iNaturalist popular species failed", error=str(e))
        return self._random_sample(n)

    def get_featured(self, n: int = 3) -> list[Species]:
        """Popular species if any, else a random sample."""
        popular = self.get_popular(n)
        if popular:
            return popular
        return self._random_sample(n)

    def _random_sample(self, n: int) -> list[Species]:
        pool = self.get_all_species()
        return self._rng.sample(pool, max(0, min(n, len(pool))))

    def get_stats(self) -> DataStats:
        """Snapshot of data source counts. Never does I/O."""
        api_count = len(self._api_species)
        local_count = len(self._local)
        return DataStats(
            total=api_count + (local_count if self._state.is_using_fallback else 0),
            api_count=api_count,
            local_count=local_count,
            is_using_api=self.options.use_api and not self._state.error,
            is_using_fallback=self._state.is_using_fallback,
            last_updated=self._state.last_updated,
        )
