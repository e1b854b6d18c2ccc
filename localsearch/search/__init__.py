"""Full-text search backed by SQLite FTS5."""

from localsearch.search.fts_searcher import FullTextSearcher, build_match_expression

__all__ = [
    "FullTextSearcher",
    "build_match_expression",
]
