"""
Prefix suggester: the query-time entry point for autocomplete.

Holds the shared, read-only Trie built at startup and turns a raw query
prefix into an ordered list of completions.
"""

from __future__ import annotations

import logging
from typing import Optional

from localsearch.autocomplete.builder import AutocompleteBuilder
from localsearch.autocomplete.trie import Trie
from localsearch.config.settings import AutocompleteSettings, Settings, get_settings
from localsearch.preprocessing.tokenizer import normalize_prefix
from localsearch.storage.vocabulary_store import VocabularyStore

logger = logging.getLogger(__name__)


class PrefixSuggester:
    """Answer autocomplete queries against one in-memory trie."""

    def __init__(
        self,
        trie: Optional[Trie] = None,
        ac_settings: Optional[AutocompleteSettings] = None,
    ) -> None:
        self._trie = trie if trie is not None else Trie()
        self._ac = ac_settings or get_settings().autocomplete

    @classmethod
    def from_store(
        cls,
        vocabulary_store: VocabularyStore,
        settings: Optional[Settings] = None,
        kind: Optional[str] = None,
    ) -> "PrefixSuggester":
        """Build the trie from *vocabulary_store* and wrap it. Blocks until done."""
        settings = settings or get_settings()
        builder = AutocompleteBuilder(vocabulary_store, settings.vocabulary)
        return cls(builder.build(kind), settings.autocomplete)

    @property
    def word_count(self) -> int:
        return self._trie.size

    def suggest(self, query: str, top_k: Optional[int] = None) -> list[str]:
        """
        Return up to *top_k* stored words starting with *query*.

        The query is trimmed and lowercased. *top_k* defaults to
        max_suggestions and is capped at max_suggestions_limit; zero or
        negative returns nothing.
        """
        if top_k is None:
            top_k = self._ac.max_suggestions
        top_k = min(top_k, self._ac.max_suggestions_limit)
        if top_k <= 0:
            return []

        prefix = normalize_prefix(query)
        if len(prefix) > self._ac.max_prefix_length:
            return []

        suggestions = self._trie.collect_suggestions(prefix, top_k)
        logger.debug("Prefix %r -> %d suggestions", prefix, len(suggestions))
        return suggestions
