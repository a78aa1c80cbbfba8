"""Tests for the in-memory TTL cache."""

from __future__ import annotations

from datetime import timedelta

from conftest import FakeClock

from park_wildlife.cache import TTLCache, make_key


class TestMakeKey:
    """Test canonical cache keys."""

    def test_parameter_order_does_not_matter(self) -> None:
        a = make_key("observations", {"place_id": 1, "q": "hawk", "per_page": 20})
        b = make_key("observations", {"per_page": 20, "q": "hawk", "place_id": 1})
        assert a == b

    def test_endpoint_is_part_of_key(self) -> None:
        params = {"id": "123"}
        assert make_key("observations", params) != make_key("observation_detail", params)

    def test_every_parameter_is_part_of_key(self) -> None:
        assert make_key("observations", {"q": "hawk"}) != make_key(
            "observations", {"q": "hawk", "taxon_id": 3}
        )

    def test_missing_params_same_as_empty(self) -> None:
        assert make_key("observations") == make_key("observations", {})


class TestTTLCache:
    """Test expiry and clearing."""

    def test_get_missing_returns_none(self, clock: FakeClock) -> None:
        cache: TTLCache[str] = TTLCache(timedelta(minutes=15), clock=clock)
        assert cache.get("nope") is None

    def test_set_then_get(self, clock: FakeClock) -> None:
        cache: TTLCache[str] = TTLCache(timedelta(minutes=15), clock=clock)
        cache.set("k", "v")
        assert cache.get("k") == "v"
        assert cache.is_fresh("k") is True

    def test_entry_expires_at_ttl(self, clock: FakeClock) -> None:
        cache: TTLCache[str] = TTLCache(timedelta(minutes=15), clock=clock)
        cache.set("k", "v")
        clock.advance(minutes=14, seconds=59)
        assert cache.get("k") == "v"
        clock.advance(seconds=1)
        assert cache.get("k") is None
        assert cache.is_fresh("k") is False

    def test_set_refreshes_timestamp(self, clock: FakeClock) -> None:
        cache: TTLCache[str] = TTLCache(timedelta(minutes=15), clock=clock)
        cache.set("k", "old")
        clock.advance(minutes=10)
        cache.set("k", "new")
        clock.advance(minutes=10)
        assert cache.get("k") == "new"

    def test_clear(self, clock: FakeClock) -> None:
        cache: TTLCache[int] = TTLCache(timedelta(minutes=15), clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)
        assert len(cache) == 2
        cache.clear()
        assert len(cache) == 0
        assert cache.get("a") is None

    def test_independent_instances(self, clock: FakeClock) -> None:
        short: TTLCache[str] = TTLCache(timedelta(minutes=15), clock=clock)
        long: TTLCache[str] = TTLCache(timedelta(minutes=30), clock=clock)
        short.set("k", "short")
        long.set("k", "long")
        clock.advance(minutes=20)
        assert short.get("k") is None
        assert long.get("k") == "long"
