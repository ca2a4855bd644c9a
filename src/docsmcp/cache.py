"""In-memory fetch cache with a fixed time-to-live.

Entries are keyed ``docs:<path>`` and hold the formatted fetch_docs result.
An entry older than the TTL is treated as a miss; the caller re-fetches and
overwrites it. Nothing is evicted otherwise, which is fine for a process
that lives as long as one host session.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import structlog

from docsmcp.models.cache import CacheEntry

log = structlog.get_logger()

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(UTC)


def cache_key(path: str) -> str:
    return f"docs:{path}"


class PageCache:
    """Dict-backed page cache implementing CacheProtocol."""

    def __init__(self, ttl_minutes: int = 10, clock: Clock = _utcnow) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._ttl = timedelta(minutes=ttl_minutes)
        self._clock = clock

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, path: str) -> str | None:
        """Return cached content for ``path``, or None on miss or staleness."""
        key = cache_key(path)
        entry = self._entries.get(key)
        if entry is None:
            return None

        age = self._clock() - entry.fetched_at
        if age >= self._ttl:
            log.debug("cache_stale", key=key, age_seconds=age.total_seconds())
            return None
        return entry.content

    def set(self, path: str, content: str) -> None:
        """Store ``content`` for ``path``, replacing any previous entry."""
        key = cache_key(path)
        self._entries[key] = CacheEntry(key=key, content=content, fetched_at=self._clock())
