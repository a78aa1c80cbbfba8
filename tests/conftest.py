"""Shared fixtures."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from park_wildlife.datasources.inaturalist import client


class FakeClock:
    """Manually advanced UTC clock for cache expiry tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 6, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture(autouse=True)
def _no_rate_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests never talk to the real API; skip the 1 req/s sleep."""
    monkeypatch.setattr(client, "MIN_REQUEST_INTERVAL", 0.0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def make_observation(
    obs_id: int,
    *,
    taxon_id: int = 42069,
    name: str = "Canis latrans",
    common_name: str | None = "Coyote",
    iconic: str = "Mammalia",
    observed_on: str | None = "2025-01-15",
    location: Any = "37.7703,-122.4751",
    photos: list[dict[str, Any]] | None = None,
    default_photo: dict[str, Any] | None = None,
    **taxon_extra: Any,
) -> dict[str, Any]:
    """Build an iNaturalist observation dict shaped like the v1 API."""
    return {
        "id": obs_id,
        "observed_on": observed_on,
        "location": location,
        "quality_grade": "research",
        "user": {"login": "observer"},
        "taxon": {
            "id": taxon_id,
            "name": name,
            "preferred_common_name": common_name,
            "iconic_taxon_name": iconic,
            "rank": "species",
            "default_photo": default_photo,
            **taxon_extra,
        },
        "photos": photos if photos is not None else [],
    }


def make_response(results: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "total_results": len(results),
        "page": 1,
        "per_page": max(len(results), 1),
        "results": results,
    }
