"""
Operations on the documents FTS5 table.

Documents of one kind are replaced wholesale by each indexing run;
commit_run does the replacement and appends the run's vocabulary row
in a single transaction so readers never see half an index.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from localsearch.storage.connection import get_connection
from localsearch.storage.models import Document, SearchHit, VocabularyEntry
from localsearch.storage.vocabulary_store import INSERT_SQL, entry_params

logger = logging.getLogger(__name__)


class DocumentStore:
    """Read/write interface for the documents table."""

    def __init__(self, db_path: Optional[Path] = None) -> None:
        self._db_path = db_path

    @property
    def _conn(self):
        return get_connection(self._db_path)

    # ----- Write operations -----

    def commit_run(
        self,
        kind: str,
        documents: Iterable[Document],
        vocabulary: VocabularyEntry,
        replace_vocabulary: bool = False,
    ) -> int:
        """
        Publish one indexing run atomically.

        Deletes the previous documents of *kind*, inserts *documents* and
        appends *vocabulary*. With replace_vocabulary, earlier vocabulary
        rows of the kind are dropped too. Returns the number of documents
        inserted.
        """
        rows = [(d.path, d.title, d.content, kind) for d in documents]
        conn = self._conn
        with conn:
            deleted = conn.execute("DELETE FROM documents WHERE kind = ?", (kind,)).rowcount
            conn.executemany(
                "INSERT INTO documents (path, title, content, kind) VALUES (?, ?, ?, ?)",
                rows,
            )
            if replace_vocabulary:
                conn.execute("DELETE FROM vocabulary WHERE kind = ?", (kind,))
            conn.execute(INSERT_SQL, entry_params(vocabulary))

        logger.info(
            "Committed %s run: %d documents (%d replaced), %d vocabulary words",
            kind, len(rows), max(0, deleted), vocabulary.word_count,
        )
        return len(rows)

    # ----- Read operations -----

    def count(self, kind: Optional[str] = None) -> int:
        """Count documents, optionally filtered by kind."""
        if kind is None:
            row = self._conn.execute("SELECT COUNT(*) AS cnt FROM documents").fetchone()
        else:
            row = self._conn.execute(
                "SELECT COUNT(*) AS cnt FROM documents WHERE kind = ?", (kind,)
            ).fetchone()
        return row["cnt"]

    def get_by_path(self, path: str) -> Optional[Document]:
        row = self._conn.execute(
            "SELECT path, title, content, kind FROM documents WHERE path = ?", (path,)
        ).fetchone()
        if row is None:
            return None
        return Document(
            path=row["path"],
            title=row["title"],
            content=row["content"],
            kind=row["kind"],
        )

    def random_path(self, kind: str) -> Optional[str]:
        """Return the path of a random document of *kind*, or None if empty."""
        row = self._conn.execute(
            "SELECT path FROM documents WHERE kind = ? ORDER BY random() LIMIT 1",
            (kind,),
        ).fetchone()
        return row["path"] if row else None

    def search(
        self,
        match_expr: str,
        kind: str,
        limit: int = 100,
        snippet_tokens: int = 30,
    ) -> list[SearchHit]:
        """
        Run an FTS5 MATCH and return hits best-first.

        *match_expr* must already be valid FTS5 query syntax; a malformed
        expression raises sqlite3.OperationalError. bm25() ranks lower
        as better, so the score is negated on the way out.
        """
        rows = self._conn.execute(
            """
            SELECT path, title,
                   snippet(documents, 2, '<b>', '</b>', '...', ?) AS snippet,
                   bm25(documents) AS rank
            FROM documents
            WHERE documents MATCH ? AND kind = ?
            ORDER BY rank
            LIMIT ?
            """,
            (snippet_tokens, match_expr, kind, limit),
        ).fetchall()
        return [
            SearchHit(
                path=r["path"],
                title=r["title"],
                snippet=r["snippet"] or "",
                score=-r["rank"],
            )
            for r in rows
        ]
