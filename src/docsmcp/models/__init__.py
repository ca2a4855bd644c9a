from __future__ import annotations

from docsmcp.models.cache import CacheEntry
from docsmcp.models.docs import DocSection, SearchResult
from docsmcp.models.tools import FetchDocsInput, SearchDocsInput

__all__ = [
    # docs
    "DocSection",
    "SearchResult",
    # cache
    "CacheEntry",
    # tools
    "FetchDocsInput",
    "SearchDocsInput",
]
