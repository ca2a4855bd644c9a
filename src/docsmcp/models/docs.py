from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DocSection(BaseModel):
    """A documentation page discovered on the site root."""

    model_config = ConfigDict(frozen=True)

    path: str  # Root-relative, unique within a discovery run
    title: str  # Anchor text of the first link to this path
    category: str | None = None  # First path segment: "/concepts/x" -> "concepts"


class SearchResult(BaseModel):
    """Single match returned by search_docs."""

    path: str
    title: str
    category: str | None = None
    snippet: str
