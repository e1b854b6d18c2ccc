"""Text preprocessing: word tokenizer and HTML text extraction."""

from localsearch.preprocessing.html_text import clean_title, extract_page
from localsearch.preprocessing.tokenizer import (
    fold_case,
    is_alpha,
    iter_tokens,
    normalize_prefix,
    tokenize,
)

__all__ = [
    "clean_title",
    "extract_page",
    "fold_case",
    "is_alpha",
    "iter_tokens",
    "normalize_prefix",
    "tokenize",
]
