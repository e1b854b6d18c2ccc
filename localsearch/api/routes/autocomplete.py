"""Autocomplete API route."""

from __future__ import annotations

from fastapi import APIRouter, Query, Request

router = APIRouter(tags=["autocomplete"])


@router.get("/predict", response_model=list[str])
def predict(
    request: Request,
    q: str = Query("", description="Prefix to complete"),
    limit: int | None = Query(None, description="Max suggestions; zero or less returns none"),
) -> list[str]:
    """
    Return stored words starting with the prefix, as a JSON array.

    Matching is case-insensitive; words come back lowercase in
    ascending codepoint order. A prefix longer than max_prefix_length
    once trimmed matches nothing.
    """
    return request.app.state.suggester.suggest(q, top_k=limit)
