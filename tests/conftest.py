"""
Shared test fixtures for the localsearch test suite.

Every test gets its own SQLite file under pytest's tmp_path with the
schema already initialized.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from localsearch.config.settings import Settings
from localsearch.storage.connection import close_connection, get_connection
from localsearch.storage.document_store import DocumentStore
from localsearch.storage.models import Document, VocabularyEntry
from localsearch.storage.schema import initialize_database
from localsearch.storage.vocabulary_store import VocabularyStore


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Provide a temporary SQLite database path."""
    return tmp_path / "test_localsearch.db"


@pytest.fixture
def db(db_path: Path):
    """Provide an initialized database connection, closed after the test."""
    initialize_database(db_path)
    conn = get_connection(db_path)
    yield conn
    close_connection(db_path)


@pytest.fixture
def document_store(db, db_path: Path) -> DocumentStore:
    return DocumentStore(db_path)


@pytest.fixture
def vocabulary_store(db, db_path: Path) -> VocabularyStore:
    return VocabularyStore(db_path)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted in a temp directory."""
    s = Settings(project_root=tmp_path)
    s.ensure_dirs()
    yield s
    close_connection(s.db_path)


# ---------------------------------------------------------------------------
# Sample data factories
# ---------------------------------------------------------------------------


def make_document(
    path: str = "/wiki/Alan_Turing.html",
    title: str = "Alan Turing",
    content: str = "Alan Turing was a mathematician and computer scientist.",
    **kwargs,
) -> Document:
    """Create a Document with sensible defaults. Override any field via kwargs."""
    defaults = dict(path=path, title=title, content=content, kind="page")
    defaults.update(kwargs)
    return Document(**defaults)


def make_vocabulary_entry(words: str = "apple application apply banana", **kwargs) -> VocabularyEntry:
    """Create a VocabularyEntry whose word_count matches *words*."""
    defaults = dict(
        kind="page",
        words=words,
        word_count=len(words.split()),
        min_word_length=5,
        created_at="2025-01-01T00:00:00+00:00",
    )
    defaults.update(kwargs)
    return VocabularyEntry(**defaults)


def write_file(path: Path, content: str | bytes) -> Path:
    """Write *content* to *path*, creating parent folders."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path
