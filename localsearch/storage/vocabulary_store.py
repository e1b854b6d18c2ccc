"""
CRUD operations for the vocabulary table.

Each indexing run appends one row; the service reads every row of its
kind at startup, so several runs accumulate into one vocabulary.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional

from localsearch.storage.connection import get_connection
from localsearch.storage.models import VocabularyEntry

logger = logging.getLogger(__name__)

INSERT_SQL = """
    INSERT INTO vocabulary (kind, words, word_count, min_word_length, created_at)
    VALUES (?, ?, ?, ?, ?)
"""


def entry_params(entry: VocabularyEntry) -> tuple:
    """Bind parameters for INSERT_SQL, shared with DocumentStore.commit_run."""
    return (
        entry.kind,
        entry.words,
        entry.word_count,
        entry.min_word_length,
        entry.created_at,
    )


class VocabularyStore:
    """CRUD interface for the vocabulary table."""

    def __init__(self, db_path: Optional[Path] = None) -> None:
        self._db_path = db_path

    @property
    def _conn(self):
        return get_connection(self._db_path)

    def _row_to_entry(self, row) -> VocabularyEntry:
        return VocabularyEntry(
            id=row["id"],
            kind=row["kind"],
            words=row["words"],
            word_count=row["word_count"],
            min_word_length=row["min_word_length"],
            created_at=row["created_at"],
        )

    # ----- Write operations -----

    def append(self, entry: VocabularyEntry) -> int:
        """Append a vocabulary row. Returns the new row ID."""
        with self._conn:
            cursor = self._conn.execute(INSERT_SQL, entry_params(entry))
        logger.info(
            "Appended vocabulary row %d (%s, %d words)",
            cursor.lastrowid, entry.kind, entry.word_count,
        )
        return cursor.lastrowid

    def delete_kind(self, kind: str) -> int:
        """Delete every row of *kind*. Returns the number deleted."""
        with self._conn:
            cursor = self._conn.execute("DELETE FROM vocabulary WHERE kind = ?", (kind,))
        return cursor.rowcount

    # ----- Read operations -----

    def iter_raw_rows(self, kind: Optional[str] = None) -> Iterator[tuple[int, bytes, int]]:
        """
        Yield (row_id, words, min_word_length) in insertion order.

        `words` is returned as raw bytes so the caller decodes it and can
        skip a single corrupt row instead of failing the whole load.
        """
        sql = "SELECT id, CAST(words AS BLOB) AS words, min_word_length FROM vocabulary"
        params: tuple = ()
        if kind is not None:
            sql += " WHERE kind = ?"
            params = (kind,)
        sql += " ORDER BY id"

        for row in self._conn.execute(sql, params):
            yield row["id"], row["words"] or b"", row["min_word_length"]

    def get_all(self, kind: Optional[str] = None) -> list[VocabularyEntry]:
        if kind is None:
            rows = self._conn.execute("SELECT * FROM vocabulary ORDER BY id").fetchall()
        else:
            rows = self._conn.execute(
                "SELECT * FROM vocabulary WHERE kind = ? ORDER BY id", (kind,)
            ).fetchall()
        return [self._row_to_entry(r) for r in rows]

    def count(self, kind: Optional[str] = None) -> int:
        """Count vocabulary rows, optionally filtered by kind."""
        if kind is None:
            row = self._conn.execute("SELECT COUNT(*) AS cnt FROM vocabulary").fetchone()
        else:
            row = self._conn.execute(
                "SELECT COUNT(*) AS cnt FROM vocabulary WHERE kind = ?", (kind,)
            ).fetchone()
        return row["cnt"]
