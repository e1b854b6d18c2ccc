"""
Logging configuration for the local search tool.

Console output plus an optional rotating log file. Modules log through
    logger = logging.getLogger(__name__)
so everything lands under the "localsearch" logger configured here.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(
    log_dir: Path | None = None,
    level: int = logging.INFO,
    log_file: str = "localsearch.log",
) -> None:
    """
    Configure the "localsearch" logger.

    Args:
        log_dir: Directory for the rotating log file. Console only if None.
        level: Minimum log level.
        log_file: Name of the log file inside log_dir.
    """
    package_logger = logging.getLogger("localsearch")
    package_logger.setLevel(level)

    # Repeated calls (tests, nested CLIs) must not stack handlers
    if package_logger.handlers:
        return

    formatter = logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_dir is None:
        return

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_dir / log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    except OSError as e:
        package_logger.warning("Could not set up file logging: %s", e)
        return

    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    package_logger.addHandler(file_handler)
