"""Tests for the word tokenizer."""

from __future__ import annotations

import pytest

from localsearch.preprocessing.tokenizer import (
    fold_case,
    iter_tokens,
    normalize_prefix,
    tokenize,
)


class TestTokenize:
    def test_drops_short_words_and_splits_on_non_letters(self):
        assert tokenize("The quick-brown Fox123 jumps!!", 5) == ["quick", "brown", "jumps"]

    def test_lower_threshold_keeps_short_words(self):
        assert tokenize("The quick-brown Fox123 jumps!!", 3) == [
            "the", "quick", "brown", "fox", "jumps",
        ]

    def test_words_are_lowercased(self):
        assert tokenize("HELLO World", 5) == ["hello", "world"]

    def test_trailing_word_is_flushed(self):
        assert tokenize("alpha beta gamma", 5) == ["alpha", "gamma"]

    def test_digits_split_words(self):
        assert tokenize("abcde12fghij", 5) == ["abcde", "fghij"]

    def test_duplicates_are_kept(self):
        assert tokenize("hello hello", 5) == ["hello", "hello"]

    def test_empty_and_separator_only_input(self):
        assert tokenize("", 1) == []
        assert tokenize(" ,.;-- 123 ", 1) == []

    def test_non_ascii_letters(self):
        assert tokenize("Ñandú, CAFÉ über straße", 4) == ["ñandú", "café", "über", "straße"]

    def test_non_latin_scripts(self):
        assert tokenize("Москва и Пекин", 5) == ["москва", "пекин"]

    def test_bytes_are_decoded_as_utf8(self):
        assert tokenize("Árboles verdes".encode("utf-8"), 5) == ["árboles", "verdes"]

    def test_malformed_bytes_raise(self):
        with pytest.raises(UnicodeDecodeError):
            tokenize(b"valid \xff\xfe broken", 5)

    def test_zero_threshold_never_yields_empty_words(self):
        assert tokenize("a  b", 0) == ["a", "b"]

    def test_deterministic(self):
        text = "Lorem ipsum dolor sit amet, consectetur adipiscing elit"
        assert tokenize(text, 5) == tokenize(text, 5)

    def test_custom_classifier_and_fold(self):
        tokens = tokenize(
            "abc-def ghi",
            3,
            is_alpha=lambda ch: ch.isalpha() or ch == "-",
            fold_case=str.upper,
        )
        assert tokens == ["ABC-DEF", "GHI"]


class TestIterTokens:
    def test_is_lazy(self):
        tokens = iter_tokens("first second third", 5)
        assert next(tokens) == "first"
        assert next(tokens) == "second"

    def test_decode_error_before_first_word(self):
        tokens = iter_tokens(b"words \xc3\x28 more", 1)
        with pytest.raises(UnicodeDecodeError):
            next(tokens)


class TestFoldCase:
    def test_single_codepoint_mapping(self):
        assert fold_case("A") == "a"
        assert fold_case("Σ") == "σ"

    def test_expanding_mapping_keeps_one_codepoint(self):
        # "İ".lower() is "i" + U+0307
        assert fold_case("İ") == "i"

    def test_uncased_letters_unchanged(self):
        assert fold_case("漢") == "漢"


class TestNormalizePrefix:
    def test_trims_and_lowercases(self):
        assert normalize_prefix("  APPle ") == "apple"

    def test_keeps_non_letters(self):
        assert normalize_prefix("Fox1") == "fox1"

    def test_empty(self):
        assert normalize_prefix("   ") == ""
