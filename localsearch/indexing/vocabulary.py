"""
Per-run vocabulary accumulation and its persisted string form.

A run's vocabulary is the deduplicated set of words seen across the
corpus. It is stored as one string of words joined by single spaces;
words are alphabetic-only, so the separator can never occur inside one.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from localsearch.preprocessing.tokenizer import tokenize
from localsearch.storage.models import VocabularyEntry

SEPARATOR = " "


class Vocabulary:
    """Deduplicated word set for one indexing run."""

    def __init__(self, min_length: int) -> None:
        self._min_length = min_length
        self._words: set[str] = set()

    @property
    def min_length(self) -> int:
        return self._min_length

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def add_text(self, text: bytes | str) -> set[str]:
        """
        Tokenize one document's text and merge its words.

        Returns the set of words extracted from *text*.

        Raises:
            UnicodeDecodeError: *text* is bytes and not valid UTF-8.
        """
        words = set(tokenize(text, self._min_length))
        self._words.update(words)
        return words

    def add_words(self, words: Iterable[str]) -> None:
        """Merge already-tokenized words, e.g. a previous run's vocabulary."""
        self._words.update(words)

    def serialize(self) -> str:
        """Sorted words joined by SEPARATOR, so equal sets give equal rows."""
        return SEPARATOR.join(sorted(self._words))

    def to_entry(self, kind: str) -> VocabularyEntry:
        return VocabularyEntry(
            kind=kind,
            words=self.serialize(),
            word_count=len(self._words),
            min_word_length=self._min_length,
        )


def parse_vocabulary(blob: bytes | str, min_length: int) -> set[str]:
    """
    Read a persisted vocabulary string back into a word set.

    Tokenizing with the same min_length that wrote the row reproduces
    the original set exactly.
    """
    return set(tokenize(blob, min_length))
