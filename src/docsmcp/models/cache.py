from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class CacheEntry(BaseModel):
    """Memoised fetch_docs result for a single path."""

    key: str  # "docs:<path>"
    content: str  # Fully formatted tool result text
    fetched_at: datetime
