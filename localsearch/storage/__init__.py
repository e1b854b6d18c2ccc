from localsearch.storage.models import Document, DocumentKind, SearchHit, VocabularyEntry
from localsearch.storage.connection import get_connection, close_connection
from localsearch.storage.schema import initialize_database
from localsearch.storage.document_store import DocumentStore
from localsearch.storage.vocabulary_store import VocabularyStore

__all__ = [
    "Document",
    "DocumentKind",
    "SearchHit",
    "VocabularyEntry",
    "get_connection",
    "close_connection",
    "initialize_database",
    "DocumentStore",
    "VocabularyStore",
]
