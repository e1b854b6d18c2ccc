"""Plain-text and title extraction for indexed files."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

_WHITESPACE_RE = re.compile(r"\s+")
_PARENTHESIZED_RE = re.compile(r"\([^)]*\)")

# Elements whose text is never shown to a reader
_INVISIBLE_TAGS = ["script", "style", "noscript", "template"]


def _collapse(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def extract_page(html: str, default_title: str = "No Title") -> tuple[str, str]:
    """
    Return (title, text) for an HTML document.

    The title is the first <title> element; the text is everything
    visible with script/style content dropped and whitespace runs
    collapsed to single spaces.
    """
    soup = BeautifulSoup(html, "lxml")

    title = default_title
    if soup.title is not None:
        title = _collapse(soup.title.get_text()) or default_title

    for tag in soup(_INVISIBLE_TAGS):
        tag.decompose()

    return title, _collapse(soup.get_text(" "))


def clean_title(stem: str) -> str:
    """
    Turn a file stem into a display title.

    "eiffel_tower_(night)" -> "Eiffel Tower"
    """
    value = stem.replace("_", " ")
    value = _PARENTHESIZED_RE.sub("", value)
    words = _collapse(value).split(" ")
    return " ".join(w[:1].upper() + w[1:] for w in words if w)
