"""Offline indexing: corpus walk and per-run vocabulary."""

from localsearch.indexing.indexer import CorpusIndexer
from localsearch.indexing.vocabulary import SEPARATOR, Vocabulary, parse_vocabulary

__all__ = [
    "CorpusIndexer",
    "SEPARATOR",
    "Vocabulary",
    "parse_vocabulary",
]
