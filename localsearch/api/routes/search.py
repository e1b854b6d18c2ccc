"""Search API routes."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException, Query, Request

from localsearch.api.schemas import LuckyResponse, SearchHitResponse, SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])


@router.get("/search", response_model=SearchResponse)
def search(
    request: Request,
    q: str = Query(..., min_length=1, description="Search query"),
    limit: int | None = Query(None, ge=1, description="Max results"),
) -> SearchResponse:
    """Run a full-text search over the served kind."""
    settings = request.app.state.settings
    if len(q) > settings.search.max_query_length:
        raise HTTPException(
            status_code=422,
            detail=f"Query longer than {settings.search.max_query_length} characters",
        )

    searcher = request.app.state.searcher
    kind = settings.kind

    started = time.perf_counter()
    hits = searcher.search(q, kind, limit=limit)
    elapsed_ms = (time.perf_counter() - started) * 1000.0

    return SearchResponse(
        query=q,
        kind=kind,
        hits=[
            SearchHitResponse(
                path=h.path,
                title=h.title,
                snippet=h.snippet,
                score=round(h.score, 4),
            )
            for h in hits
        ],
        total_hits=len(hits),
        elapsed_ms=round(elapsed_ms, 3),
    )


@router.get("/lucky", response_model=LuckyResponse)
def lucky(request: Request) -> LuckyResponse:
    """Pick a random indexed document."""
    path = request.app.state.searcher.lucky(request.app.state.settings.kind)
    if path is None:
        logger.info("Lucky search found no documents")
        return LuckyResponse(success=False, error="No entries found")
    return LuckyResponse(success=True, path=path)
