"""FastAPI REST API: search, autocomplete and static files."""

from localsearch.api.app import create_app

__all__ = [
    "create_app",
]
