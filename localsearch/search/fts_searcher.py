"""Full-text search over the FTS5 documents table."""

from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from localsearch.config.settings import SearchSettings, get_settings
from localsearch.storage.document_store import DocumentStore
from localsearch.storage.models import SearchHit

logger = logging.getLogger(__name__)


def build_match_expression(query: str) -> str:
    """
    Turn free text into an FTS5 query that cannot be a syntax error.

    Each whitespace-separated term becomes a quoted string (embedded
    quotes doubled); FTS5 ANDs adjacent strings.
    """
    terms = query.split()
    return " ".join('"' + term.replace('"', '""') + '"' for term in terms)


class FullTextSearcher:
    """Ranks documents with FTS5's bm25() and returns highlighted snippets."""

    def __init__(
        self,
        document_store: Optional[DocumentStore] = None,
        search_settings: Optional[SearchSettings] = None,
    ) -> None:
        self._store = document_store or DocumentStore()
        self._settings = search_settings or get_settings().search

    def search(self, query: str, kind: str, limit: Optional[int] = None) -> list[SearchHit]:
        """Return up to *limit* hits for *query*, best first."""
        limit = self._settings.max_results if limit is None else min(limit, self._settings.max_results)
        match_expr = build_match_expression(query)
        if not match_expr or limit <= 0:
            return []

        try:
            hits = self._store.search(
                match_expr,
                kind,
                limit=limit,
                snippet_tokens=self._settings.snippet_tokens,
            )
        except sqlite3.OperationalError as exc:
            logger.error("Full-text query %r failed: %s", match_expr, exc)
            return []

        logger.debug("Query %r -> %d hits", query, len(hits))
        return hits

    def lucky(self, kind: str) -> Optional[str]:
        """Path of a random document, or None when nothing is indexed."""
        return self._store.random_path(kind)
