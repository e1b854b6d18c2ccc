"""
SQLite schema definitions (DDL).

Tables:
    documents   : FTS5 full-text table, one row per indexed file
    vocabulary  : one space-joined word list per indexing run

The schema version lives in PRAGMA user_version.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from localsearch.storage.connection import get_connection

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Table DDL
# ---------------------------------------------------------------------------

# path and kind are stored but not tokenized; ranking is FTS5's bm25()
_DOCUMENTS_DDL = """
CREATE VIRTUAL TABLE IF NOT EXISTS documents USING fts5(
    path UNINDEXED,
    title,
    content,
    kind UNINDEXED,
    tokenize = 'unicode61 remove_diacritics 2'
);
"""

_VOCABULARY_DDL = """
CREATE TABLE IF NOT EXISTS vocabulary (
    id               INTEGER PRIMARY KEY AUTOINCREMENT,
    kind             TEXT NOT NULL,
    words            TEXT NOT NULL DEFAULT '',
    word_count       INTEGER DEFAULT 0,
    min_word_length  INTEGER DEFAULT 0,
    created_at       TEXT NOT NULL
);
"""

_VOCABULARY_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_vocabulary_kind ON vocabulary(kind);",
]


def initialize_database(db_path: Optional[Path] = None) -> None:
    """
    Create all tables and indexes if they don't exist.

    Safe to call multiple times.
    """
    conn = get_connection(db_path)

    logger.info("Initializing database schema (version %d)...", SCHEMA_VERSION)

    with conn:
        conn.execute(_DOCUMENTS_DDL)
        conn.execute(_VOCABULARY_DDL)
        for idx_sql in _VOCABULARY_INDEXES:
            conn.execute(idx_sql)
        conn.execute(f"PRAGMA user_version={SCHEMA_VERSION}")


def get_schema_version(db_path: Optional[Path] = None) -> int:
    """Return the current schema version of the database."""
    row = get_connection(db_path).execute("PRAGMA user_version").fetchone()
    return row[0] if row else 0
