"""Health and stats routes."""

from __future__ import annotations

from fastapi import APIRouter, Request

from localsearch.api.schemas import StatsResponse

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> dict:
    """Simple liveness check."""
    return {"status": "ok"}


@router.get("/stats", response_model=StatsResponse)
def stats(request: Request) -> StatsResponse:
    """Return document and vocabulary counts for the served kind."""
    state = request.app.state
    kind = state.settings.kind

    return StatsResponse(
        kind=kind,
        document_count=state.document_store.count(kind),
        vocabulary_rows=state.vocabulary_store.count(kind),
        autocomplete_words=state.suggester.word_count,
    )
