"""
SQLite connection factory.

One shared connection per database path, opened in WAL mode with
check_same_thread=False so the API's worker threads can read while
an indexing run writes. SQLite's locking plus the busy timeout does
the rest.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from pathlib import Path
from typing import Optional

from localsearch.config.settings import get_settings

logger = logging.getLogger(__name__)

_lock = threading.Lock()

_connections: dict[str, sqlite3.Connection] = {}


def _resolve(db_path: Optional[Path]) -> Path:
    return db_path if db_path is not None else get_settings().db_path


def get_connection(db_path: Optional[Path] = None) -> sqlite3.Connection:
    """
    Get the shared connection for *db_path* (default: the settings DB).

    Rows come back as sqlite3.Row for name-based access.
    """
    db_path = _resolve(db_path)
    db_key = str(db_path)

    with _lock:
        if db_key in _connections:
            return _connections[db_key]

        db_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Opening SQLite database: %s", db_path)

        conn = sqlite3.connect(
            str(db_path),
            check_same_thread=False,
            timeout=10.0,
        )

        storage = get_settings().storage
        conn.execute(f"PRAGMA journal_mode={storage.journal_mode}")
        conn.execute(f"PRAGMA busy_timeout={storage.busy_timeout_ms}")
        conn.execute("PRAGMA synchronous=NORMAL")
        conn.row_factory = sqlite3.Row

        _connections[db_key] = conn
        return conn


def close_connection(db_path: Optional[Path] = None) -> None:
    """Close the connection for *db_path*. Used by tests and shutdown hooks."""
    db_path = _resolve(db_path)

    with _lock:
        conn = _connections.pop(str(db_path), None)
        if conn is not None:
            conn.close()
            logger.info("Database connection closed: %s", db_path)


def close_all_connections() -> None:
    """Close all open connections. Used during shutdown."""
    with _lock:
        for key, conn in list(_connections.items()):
            conn.close()
            logger.info("Database connection closed: %s", key)
        _connections.clear()
