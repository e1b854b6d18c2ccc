"""
Data models for the storage layer.

Plain dataclasses mirroring table rows. They are the transport format
between storage, the indexer, the searcher and the API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


def _utc_now_iso() -> str:
    """ISO 8601 timestamp in UTC."""
    return datetime.now(timezone.utc).isoformat()


class DocumentKind(str, Enum):
    """The two corpora the tool can index and serve."""

    PAGE = "page"
    IMAGE = "image"


# ---------------------------------------------------------------------------
# Documents: rows of the FTS5 table, replaced wholesale per indexing run
# ---------------------------------------------------------------------------


@dataclass
class Document:
    """
    One indexed file.

    `path` is the URL path the file is served under, e.g.
    "/wiki/Alan_Turing.html", not a filesystem path.
    """

    path: str
    title: str
    content: str
    kind: str = DocumentKind.PAGE.value


# ---------------------------------------------------------------------------
# Vocabulary: one row appended per indexing run, read back at startup
# ---------------------------------------------------------------------------


@dataclass
class VocabularyEntry:
    """
    A persisted vocabulary blob.

    `words` holds the run's words joined by single spaces. A word is
    alphabetic-only, so the separator never occurs inside one.
    """

    id: Optional[int] = None

    kind: str = DocumentKind.PAGE.value

    words: str = ""

    word_count: int = 0

    # Minimum word length in force when the row was written
    min_word_length: int = 0

    created_at: str = field(default_factory=_utc_now_iso)


# ---------------------------------------------------------------------------
# Search hits: read-only projection of an FTS5 query
# ---------------------------------------------------------------------------


@dataclass
class SearchHit:
    """A ranked full-text match. Higher score is better."""

    path: str
    title: str
    snippet: str
    score: float
