"""Autocomplete CLI: load the persisted vocabulary and query suggestions."""

from __future__ import annotations

import argparse
import json
import logging

from localsearch.autocomplete.suggester import PrefixSuggester
from localsearch.config.logging_config import setup_logging
from localsearch.config.settings import get_settings
from localsearch.storage.models import DocumentKind
from localsearch.storage.schema import initialize_database
from localsearch.storage.vocabulary_store import VocabularyStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Autocomplete tools.")
    parser.add_argument(
        "--mode",
        choices=[k.value for k in DocumentKind],
        default=None,
        help="Vocabulary to load (default: settings kind).",
    )
    sub = parser.add_subparsers(dest="command")

    query = sub.add_parser("query", help="Query autocomplete suggestions.")
    query.add_argument("prefix", help="Prefix to complete.")
    query.add_argument("--limit", type=int, default=None, help="Max suggestions.")

    sub.add_parser("stats", help="Show vocabulary statistics.")

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        return 1

    settings = get_settings()
    setup_logging(log_dir=settings.logs_dir)
    initialize_database(settings.db_path)
    logger = logging.getLogger(__name__)

    kind = args.mode or settings.kind
    store = VocabularyStore(settings.db_path)

    try:
        suggester = PrefixSuggester.from_store(store, settings, kind=kind)
    except Exception as exc:
        logger.exception("Could not load vocabulary: %s", exc)
        return 1

    if args.command == "query":
        for word in suggester.suggest(args.prefix, top_k=args.limit):
            print(word)
    else:
        summary = {
            "kind": kind,
            "vocabulary_rows": store.count(kind),
            "distinct_words": suggester.word_count,
            "min_word_length": settings.vocabulary.min_word_length,
        }
        print(json.dumps(summary, indent=2))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
