"""Unit tests for docsmcp.cache."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docsmcp.cache import PageCache, cache_key

if TYPE_CHECKING:
    from conftest import FakeClock


class TestPageCache:
    def test_miss_returns_none(self) -> None:
        assert PageCache().get("/docs/a") is None

    def test_set_and_get_fresh(self) -> None:
        cache = PageCache()
        cache.set("/docs/a", "# A")
        assert cache.get("/docs/a") == "# A"

    def test_fresh_just_before_ttl(self, clock: FakeClock) -> None:
        cache = PageCache(ttl_minutes=10, clock=clock)
        cache.set("/docs/a", "# A")
        clock.advance(minutes=9, seconds=59)
        assert cache.get("/docs/a") == "# A"

    def test_stale_at_ttl(self, clock: FakeClock) -> None:
        cache = PageCache(ttl_minutes=10, clock=clock)
        cache.set("/docs/a", "# A")
        clock.advance(minutes=10)
        assert cache.get("/docs/a") is None

    def test_overwrite_resets_age(self, clock: FakeClock) -> None:
        cache = PageCache(ttl_minutes=10, clock=clock)
        cache.set("/docs/a", "Version 1")
        clock.advance(minutes=11)
        cache.set("/docs/a", "Version 2")
        clock.advance(minutes=5)
        assert cache.get("/docs/a") == "Version 2"

    def test_stale_entries_are_not_evicted(self, clock: FakeClock) -> None:
        cache = PageCache(ttl_minutes=10, clock=clock)
        cache.set("/docs/a", "# A")
        clock.advance(hours=1)
        assert cache.get("/docs/a") is None
        assert len(cache) == 1

    def test_keys_are_namespaced(self) -> None:
        assert cache_key("/docs/a") == "docs:/docs/a"
