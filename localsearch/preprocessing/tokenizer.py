"""
Word tokenizer shared by vocabulary extraction and trie population.

A word is a maximal run of alphabetic codepoints, folded to lowercase,
at least `min_length` codepoints long. Everything else separates words:
"The quick-brown Fox123" yields "quick", "brown" (and "the", "fox" when
min_length <= 3).

Alphabetic classification is str.isalpha() and case folding is a
single-codepoint lowercase mapping. Full Unicode case folding and
locale-aware classification are not attempted; both
hooks can be replaced through the is_alpha / fold_case arguments.
"""

from __future__ import annotations

from typing import Callable, Iterator

CharPredicate = Callable[[str], bool]
CharMapping = Callable[[str], str]


def is_alpha(ch: str) -> bool:
    return ch.isalpha()


def fold_case(ch: str) -> str:
    """
    Simple lowercase mapping of one codepoint.

    str.lower() applies the full mapping, which can expand a single
    codepoint ("İ" -> "i" + combining dot). Only the first codepoint is
    kept then, so a word stays alphabetic and one codepoint per input
    character.
    """
    lowered = ch.lower()
    if len(lowered) == 1:
        return lowered
    return lowered[0] if lowered[0].isalpha() else ch


def _decode(text: bytes | str) -> str:
    # Strict: malformed UTF-8 raises UnicodeDecodeError for the caller to skip
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text).decode("utf-8")
    return text


def iter_tokens(
    text: bytes | str,
    min_length: int,
    *,
    is_alpha: CharPredicate = is_alpha,
    fold_case: CharMapping = fold_case,
) -> Iterator[str]:
    """
    Lazily yield the words of *text* in order of appearance.

    Bytes are decoded as UTF-8 before the first word is produced, so a
    decode error surfaces before anything is yielded.
    """
    decoded = _decode(text)
    buffer: list[str] = []

    for ch in decoded:
        if is_alpha(ch):
            buffer.append(fold_case(ch))
            continue
        if buffer and len(buffer) >= min_length:
            yield "".join(buffer)
        buffer.clear()

    if buffer and len(buffer) >= min_length:
        yield "".join(buffer)


def tokenize(
    text: bytes | str,
    min_length: int,
    *,
    is_alpha: CharPredicate = is_alpha,
    fold_case: CharMapping = fold_case,
) -> list[str]:
    """
    Return the words of *text*, duplicates included.

    Raises:
        UnicodeDecodeError: *text* is bytes and not valid UTF-8.
    """
    return list(iter_tokens(text, min_length, is_alpha=is_alpha, fold_case=fold_case))


def normalize_prefix(query: str, *, fold_case: CharMapping = fold_case) -> str:
    """
    Trim a query prefix and fold each codepoint to lowercase.

    Non-alphabetic codepoints are kept; they simply match nothing.
    """
    return "".join(fold_case(ch) for ch in query.strip())
