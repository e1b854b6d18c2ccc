"""Pydantic response models for the API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class SearchHitResponse(BaseModel):
    """A single search result."""

    path: str
    title: str
    snippet: str
    score: float


class SearchResponse(BaseModel):
    """Full-text search results."""

    query: str
    kind: str
    hits: list[SearchHitResponse]
    total_hits: int
    elapsed_ms: float


class LuckyResponse(BaseModel):
    """A random document, or the reason there is none."""

    success: bool
    path: Optional[str] = None
    error: Optional[str] = None


class StatsResponse(BaseModel):
    """System statistics."""

    kind: str
    document_count: int
    vocabulary_rows: int
    autocomplete_words: int
