"""
Prefix trie for autocomplete suggestions.

Nodes are keyed by codepoint and each owns its children outright; the
structure is a pure tree, so dropping the Trie drops every node.

The trie is filled once at startup and only read afterwards.
collect_suggestions builds its result list per call and never writes
to the instance, so any number of threads may query it concurrently.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from localsearch.preprocessing.tokenizer import fold_case


@dataclass
class TrieNode:
    """Single node in the trie."""

    children: dict[str, "TrieNode"] = field(default_factory=dict)

    # True iff the path to this node was inserted as a whole word
    is_word: bool = False


class Trie:
    """Prefix trie with bounded, deterministically ordered completion."""

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    @property
    def size(self) -> int:
        """Number of distinct words stored."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def insert(self, word: str) -> bool:
        """
        Insert *word*. Returns True if it was not stored before.

        Inserting a stored word again changes nothing. The empty string
        marks the root itself; the tokenizer never produces one.
        """
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child

        if node.is_word:
            return False
        node.is_word = True
        self._size += 1
        return True

    def _find(self, path: str) -> Optional[TrieNode]:
        node = self._root
        for ch in path:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """True iff *word* was inserted as a whole word."""
        node = self._find(word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        """True iff some path spells *prefix*, whether or not it ends a word."""
        return self._find(prefix) is not None

    def collect_suggestions(self, prefix: str, max_count: Optional[int]) -> list[str]:
        """
        Return up to *max_count* stored words beginning with *prefix*.

        The prefix is folded to lowercase first, since stored words are
        lowercase and lookup itself is exact. Words are produced by a
        pre-order walk visiting children in ascending codepoint order:
        the prefix itself comes first when it is a word, then the
        completions sorted by their suffix. The walk stops as soon as
        the budget is spent. ``max_count=None`` means no limit;
        zero or negative means no results.
        """
        if max_count is not None and max_count <= 0:
            return []

        prefix = "".join(fold_case(ch) for ch in prefix)
        start = self._find(prefix)
        if start is None:
            return []

        results: list[str] = []
        # Explicit stack of (node, suffix); pushing children in reverse
        # order pops them in ascending order.
        stack: list[tuple[TrieNode, str]] = [(start, "")]
        while stack:
            node, suffix = stack.pop()
            if node.is_word:
                results.append(prefix + suffix)
                if max_count is not None and len(results) >= max_count:
                    break
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], suffix + ch))

        return results

    def words(self) -> Iterator[str]:
        """Yield every stored word in ascending codepoint order."""
        yield from self.collect_suggestions("", None)
