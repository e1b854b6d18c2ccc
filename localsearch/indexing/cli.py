"""CLI for indexing a folder of pages or images."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from localsearch.config.logging_config import setup_logging
from localsearch.config.settings import get_settings
from localsearch.indexing.indexer import CorpusIndexer
from localsearch.storage.document_store import DocumentStore
from localsearch.storage.schema import initialize_database


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(description="Index a local corpus for search and autocomplete.")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-w", "--pages", type=Path, help="Folder of HTML pages, e.g. ../www/wiki")
    mode.add_argument("-s", "--images", type=Path, help="Folder of images, e.g. ../www/special")
    parser.add_argument(
        "--replace-vocabulary",
        action="store_true",
        help="Drop earlier vocabulary rows of this kind instead of accumulating.",
    )
    return parser


def main() -> int:
    """Run one indexing pass and print its summary."""
    args = build_parser().parse_args()

    settings = get_settings()
    setup_logging(log_dir=settings.logs_dir)
    initialize_database(settings.db_path)

    logger = logging.getLogger(__name__)

    indexer = CorpusIndexer(
        DocumentStore(settings.db_path),
        vocab_settings=settings.vocabulary,
        indexing_settings=settings.indexing,
    )
    try:
        if args.pages is not None:
            summary = indexer.index_pages(args.pages, replace_vocabulary=args.replace_vocabulary)
        else:
            summary = indexer.index_images(args.images, replace_vocabulary=args.replace_vocabulary)
    except Exception as exc:
        logger.exception("Indexing failed: %s", exc)
        return 1

    print(
        "kind={kind} documents={documents} skipped={skipped} "
        "vocabulary={vocabulary_words} min_word_length={min_word_length}".format(**summary)
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
