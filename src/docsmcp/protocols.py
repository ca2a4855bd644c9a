"""Protocol interfaces for swappable components.

DocHandler references these protocols, not the concrete implementations,
so tests can pass lightweight fakes and the cache backend can change
without touching handler code.
"""

from __future__ import annotations

from typing import Protocol


class CacheProtocol(Protocol):
    """Interface for the fetch result cache."""

    def get(self, path: str) -> str | None: ...

    def set(self, path: str, content: str) -> None: ...


class FetcherProtocol(Protocol):
    """Interface for the HTTP page fetcher."""

    async def fetch(self, url: str) -> str: ...
