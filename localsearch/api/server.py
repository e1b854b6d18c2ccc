"""Uvicorn entrypoint for running the API server."""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path

import uvicorn

from localsearch.api.app import create_app
from localsearch.config.logging_config import setup_logging
from localsearch.config.settings import get_settings
from localsearch.storage.connection import close_all_connections
from localsearch.storage.models import DocumentKind


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the local search server.")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address.")
    parser.add_argument("-p", "--port", type=int, default=8000, help="Bind port.")
    parser.add_argument("-H", "--www", type=Path, default=None, help="Folder served as static files.")
    parser.add_argument(
        "-m",
        "--mode",
        choices=[k.value for k in DocumentKind],
        default=None,
        help="Corpus to serve (default: page).",
    )
    return parser


def main() -> int:
    args = build_parser().parse_args()

    settings = get_settings()
    setup_logging(log_dir=settings.logs_dir)
    logger = logging.getLogger(__name__)

    overrides = {}
    if args.www is not None:
        if not args.www.is_dir():
            logger.error("www folder not found: %s", args.www)
            return 1
        overrides["www_dir"] = args.www
    if args.mode is not None:
        overrides["kind"] = args.mode
    settings = dataclasses.replace(settings, **overrides)

    try:
        app = create_app(settings)
    except Exception as exc:
        logger.exception("Could not start the server: %s", exc)
        return 1

    logger.info("Starting %s server on %s:%d", settings.kind, args.host, args.port)
    try:
        uvicorn.run(app, host=args.host, port=args.port)
    finally:
        close_all_connections()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
