"""
Offline corpus indexer.

One sequential pass over a folder: every matching file becomes a
Document, every document's text feeds the run's Vocabulary, and the
whole run is committed in one transaction at the end. Files that cannot
be read or decoded are logged and skipped; they never abort the run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional

from localsearch.config.settings import IndexingSettings, VocabularySettings, get_settings
from localsearch.indexing.vocabulary import Vocabulary
from localsearch.preprocessing.html_text import clean_title, extract_page
from localsearch.storage.document_store import DocumentStore
from localsearch.storage.models import Document, DocumentKind

logger = logging.getLogger(__name__)


def _iter_files(folder: Path, extensions: tuple[str, ...]) -> Iterator[Path]:
    """Regular files under *folder* with a matching extension, in stable order."""
    wanted = {ext.lower() for ext in extensions}
    for path in sorted(folder.rglob("*")):
        if path.is_file() and path.suffix.lower() in wanted:
            yield path


def _storable_name(path: Path) -> bool:
    # Undecodable filenames come back with surrogate escapes SQLite cannot store
    try:
        path.name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class CorpusIndexer:
    """Index a folder of HTML pages or images into the document store."""

    def __init__(
        self,
        document_store: Optional[DocumentStore] = None,
        vocab_settings: Optional[VocabularySettings] = None,
        indexing_settings: Optional[IndexingSettings] = None,
    ) -> None:
        self._store = document_store or DocumentStore()
        self._vocab = vocab_settings or get_settings().vocabulary
        self._indexing = indexing_settings or get_settings().indexing

    def index_pages(self, folder: Path, replace_vocabulary: bool = False) -> dict:
        """Index every HTML page under *folder*. Returns a run summary."""
        folder = self._check_folder(folder)
        vocabulary = Vocabulary(self._vocab.min_word_length)
        documents: list[Document] = []
        skipped = 0

        for path in _iter_files(folder, self._indexing.page_extensions):
            document = self._read_page(path)
            if document is None:
                skipped += 1
                continue
            vocabulary.add_text(document.title)
            vocabulary.add_text(document.content)
            documents.append(document)

        return self._commit(DocumentKind.PAGE, documents, vocabulary, skipped, replace_vocabulary)

    def index_images(self, folder: Path, replace_vocabulary: bool = False) -> dict:
        """
        Index every image under *folder*.

        Images carry no text, so the file stem stands in for both
        the content and (cleaned up) the title.
        """
        folder = self._check_folder(folder)
        vocabulary = Vocabulary(self._vocab.min_word_length)
        documents: list[Document] = []
        skipped = 0

        for path in _iter_files(folder, self._indexing.image_extensions):
            if not _storable_name(path):
                logger.warning("Skipping image with undecodable name: %r", path.name)
                skipped += 1
                continue
            logger.debug("Processing: %s", path.name)
            vocabulary.add_text(path.stem)
            documents.append(
                Document(
                    path=self._indexing.image_url_prefix + path.name,
                    title=clean_title(path.stem) or path.stem,
                    content=path.stem,
                    kind=DocumentKind.IMAGE.value,
                )
            )

        return self._commit(DocumentKind.IMAGE, documents, vocabulary, skipped, replace_vocabulary)

    def _read_page(self, path: Path) -> Optional[Document]:
        if not _storable_name(path):
            logger.warning("Skipping page with undecodable name: %r", path.name)
            return None
        try:
            raw = path.read_bytes()
        except OSError as exc:
            logger.warning("Error opening %s, skipping: %s", path, exc)
            return None
        try:
            html = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.warning("Skipping %s: not valid UTF-8 (%s)", path, exc)
            return None

        logger.debug("Processing: %s", path.name)
        title, text = extract_page(html, self._indexing.default_title)
        return Document(
            path=self._indexing.page_url_prefix + path.name,
            title=title,
            content=text,
            kind=DocumentKind.PAGE.value,
        )

    def _check_folder(self, folder: Path) -> Path:
        folder = Path(folder)
        if not folder.is_dir():
            raise FileNotFoundError(f"Input folder not found: {folder}")
        return folder

    def _commit(
        self,
        kind: DocumentKind,
        documents: list[Document],
        vocabulary: Vocabulary,
        skipped: int,
        replace_vocabulary: bool,
    ) -> dict:
        count = self._store.commit_run(
            kind.value,
            documents,
            vocabulary.to_entry(kind.value),
            replace_vocabulary=replace_vocabulary,
        )
        summary = {
            "kind": kind.value,
            "documents": count,
            "skipped": skipped,
            "vocabulary_words": len(vocabulary),
            "min_word_length": vocabulary.min_length,
        }
        logger.info("Indexing run summary: %s", summary)
        return summary
