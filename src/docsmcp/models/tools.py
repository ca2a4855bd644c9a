from __future__ import annotations

from pydantic import BaseModel, field_validator


class FetchDocsInput(BaseModel):
    path: str

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("path must not be empty")
        if not v.startswith("/"):
            v = "/" + v
        return v


class SearchDocsInput(BaseModel):
    query: str

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        # Whitespace-only counts as empty, but the query is matched as given
        if not v.strip():
            raise ValueError("query must not be empty")
        return v
