"""
Static file route for the www folder.

Registered last: it catches every path the other routers do not own.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["files"])

_INDEX_FILE = "index.html"


def resolve_within(root: Path, url_path: str) -> Optional[Path]:
    """
    Map *url_path* onto a file path inside *root*.

    Returns None when the resolved path escapes *root* (``..`` segments,
    absolute components, symlinks pointing outside) or cannot name a
    file at all (an embedded NUL byte).
    """
    base = root.resolve()
    try:
        candidate = (base / url_path.lstrip("/")).resolve()
    except (ValueError, OSError):
        return None
    if candidate != base and base not in candidate.parents:
        return None
    return candidate


@router.get("/{url_path:path}", include_in_schema=False)
def serve_file(request: Request, url_path: str) -> FileResponse:
    """Serve a file from settings.www_dir; "/" serves index.html."""
    www_dir = request.app.state.settings.www_dir
    if www_dir is None:
        raise HTTPException(status_code=404, detail="Not found")

    path = resolve_within(www_dir, url_path or _INDEX_FILE)
    if path is None:
        logger.warning("Refused path outside www folder: %s", url_path)
        raise HTTPException(status_code=404, detail="Not found")
    if path.is_dir():
        path = path / _INDEX_FILE
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Not found")

    return FileResponse(path)
