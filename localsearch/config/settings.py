"""
Central configuration for the local search tool.

All tunables live here. The indexer and the service read the same
VocabularySettings so the word-length threshold cannot drift between
the write path and the read path.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional


def _project_root() -> Path:
    """Walk up from this file to find the project root (where pyproject.toml lives)."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class StorageSettings:
    """Settings for SQLite storage."""

    db_name: str = "localsearch.db"

    journal_mode: str = "WAL"

    # How long to wait for a locked DB (milliseconds)
    busy_timeout_ms: int = 5000


@dataclass(frozen=True)
class VocabularySettings:
    """Settings shared by vocabulary extraction and trie population."""

    # Words shorter than this are dropped by the tokenizer.
    # Changing it does not rewrite existing vocabulary rows; re-index.
    min_word_length: int = 5

    # Log a progress line every N words inserted into the trie
    progress_every: int = 1000


@dataclass(frozen=True)
class IndexingSettings:
    """Settings for the offline corpus indexer."""

    page_extensions: tuple[str, ...] = (".html",)
    image_extensions: tuple[str, ...] = (".png", ".jpg", ".jpeg")

    # URL path prefixes under which indexed files are served
    page_url_prefix: str = "/wiki/"
    image_url_prefix: str = "/special/"

    default_title: str = "No Title"


@dataclass(frozen=True)
class SearchSettings:
    """Settings for full-text search."""

    max_results: int = 100

    # Tokens of context returned by the FTS5 snippet() function
    snippet_tokens: int = 30

    max_query_length: int = 500


@dataclass(frozen=True)
class AutocompleteSettings:
    """Settings for the autocomplete/suggestion system."""

    # Suggestions returned when the caller gives no limit
    max_suggestions: int = 10

    # Hard cap on a caller-supplied limit
    max_suggestions_limit: int = 50

    # Longer prefixes cannot match any stored word worth suggesting
    max_prefix_length: int = 200


@dataclass
class Settings:
    """
    Top-level settings container.

    Usage:
        settings = get_settings()
        print(settings.vocabulary.min_word_length)
    """

    project_root: Path = field(default_factory=_project_root)
    www_dir: Optional[Path] = None
    # "page" or "image"; see storage.models.DocumentKind
    kind: str = "page"
    storage: StorageSettings = field(default_factory=StorageSettings)
    vocabulary: VocabularySettings = field(default_factory=VocabularySettings)
    indexing: IndexingSettings = field(default_factory=IndexingSettings)
    search: SearchSettings = field(default_factory=SearchSettings)
    autocomplete: AutocompleteSettings = field(default_factory=AutocompleteSettings)

    @property
    def data_dir(self) -> Path:
        """Root directory for all runtime data (DB, logs)."""
        return self.project_root / "data"

    @property
    def db_path(self) -> Path:
        """Full path to the SQLite database file."""
        return self.data_dir / "db" / self.storage.db_name

    @property
    def logs_dir(self) -> Path:
        return self.data_dir / "logs"

    def ensure_dirs(self) -> None:
        """Create all required data directories if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Returns the singleton Settings instance.

    Call this instead of constructing Settings() directly so the entire
    application shares one config object.
    """
    settings = Settings()
    settings.ensure_dirs()
    return settings
