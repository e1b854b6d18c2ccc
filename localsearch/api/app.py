"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from localsearch.api.routes.autocomplete import router as autocomplete_router
from localsearch.api.routes.files import router as files_router
from localsearch.api.routes.health import router as health_router
from localsearch.api.routes.search import router as search_router
from localsearch.autocomplete.suggester import PrefixSuggester
from localsearch.config.settings import Settings, get_settings
from localsearch.search.fts_searcher import FullTextSearcher
from localsearch.storage.connection import close_connection
from localsearch.storage.document_store import DocumentStore
from localsearch.storage.schema import initialize_database
from localsearch.storage.vocabulary_store import VocabularyStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build and return a fully wired FastAPI application.

    The autocomplete trie is built here, before the app exists, so no
    request can reach a half-filled trie.
    """
    settings = settings or get_settings()
    initialize_database(settings.db_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        close_connection(settings.db_path)

    app = FastAPI(
        title="localsearch",
        version="0.1.0",
        description="Local full-text search with autocomplete",
        lifespan=lifespan,
    )

    # Shared state: accessible via request.app.state in routes
    app.state.settings = settings
    app.state.document_store = DocumentStore(settings.db_path)
    app.state.vocabulary_store = VocabularyStore(settings.db_path)
    app.state.searcher = FullTextSearcher(
        document_store=app.state.document_store,
        search_settings=settings.search,
    )

    logger.info("Loading vocabulary into trie (%s)...", settings.kind)
    app.state.suggester = PrefixSuggester.from_store(
        app.state.vocabulary_store,
        settings,
        kind=settings.kind,
    )
    logger.info("Autocomplete ready: %d words", app.state.suggester.word_count)

    app.include_router(health_router)
    app.include_router(search_router)
    app.include_router(autocomplete_router)
    # Catch-all; must stay last
    app.include_router(files_router)

    return app
