"""
Autocomplete trie builder.

Reads every persisted vocabulary row, tokenizes it with the shared
minimum word length and inserts each word into a fresh Trie. Runs once
at service startup; the service must not answer autocomplete requests
until build() has returned.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from localsearch.autocomplete.trie import Trie
from localsearch.config.settings import VocabularySettings, get_settings
from localsearch.preprocessing.tokenizer import iter_tokens
from localsearch.storage.vocabulary_store import VocabularyStore

logger = logging.getLogger(__name__)


class AutocompleteBuilder:
    """Build a Trie from the persisted vocabulary rows."""

    def __init__(
        self,
        vocabulary_store: Optional[VocabularyStore] = None,
        vocab_settings: Optional[VocabularySettings] = None,
    ) -> None:
        self._store = vocabulary_store or VocabularyStore()
        self._vocab = vocab_settings or get_settings().vocabulary

    def build(self, kind: Optional[str] = None) -> Trie:
        """
        Return a trie holding every word of every row of *kind*.

        * A row that is not valid UTF-8 is logged and skipped.
        * An unreadable store yields an empty trie, so autocomplete
          answers nothing while the rest of the service keeps working.
        * MemoryError is not handled: a partial vocabulary must not be
          served as if it were complete.
        """
        trie = Trie()
        min_length = self._vocab.min_word_length
        inserted = 0
        rows = 0
        skipped = 0

        try:
            for row_id, blob, row_min_length in self._store.iter_raw_rows(kind):
                rows += 1
                if row_min_length and row_min_length != min_length:
                    logger.warning(
                        "Vocabulary row %d was written with min_word_length=%d but %d is "
                        "configured; re-index to apply the new threshold",
                        row_id, row_min_length, min_length,
                    )
                try:
                    for word in iter_tokens(blob, min_length):
                        trie.insert(word)
                        inserted += 1
                        if inserted % self._vocab.progress_every == 0:
                            logger.debug("Words inserted: %d", inserted)
                except UnicodeDecodeError as exc:
                    skipped += 1
                    logger.warning("Skipping undecodable vocabulary row %d: %s", row_id, exc)
        except sqlite3.Error as exc:
            logger.error("Could not read vocabulary, autocomplete disabled: %s", exc)
            return Trie()

        logger.info(
            "Built autocomplete trie (%s): %d rows, %d skipped, %d words inserted, %d distinct",
            kind or "all", rows, skipped, inserted, trie.size,
        )
        return trie
