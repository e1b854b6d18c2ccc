"""Autocomplete package: trie-based prefix suggestions."""

from localsearch.autocomplete.builder import AutocompleteBuilder
from localsearch.autocomplete.suggester import PrefixSuggester
from localsearch.autocomplete.trie import Trie, TrieNode

__all__ = [
    "AutocompleteBuilder",
    "PrefixSuggester",
    "Trie",
    "TrieNode",
]
