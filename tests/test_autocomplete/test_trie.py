"""Tests for the autocomplete Trie data structure."""

from __future__ import annotations

import threading

import pytest

from localsearch.autocomplete.trie import Trie

FRUIT = ["apple", "application", "apply", "banana"]


@pytest.fixture
def fruit_trie() -> Trie:
    t = Trie()
    for word in FRUIT:
        t.insert(word)
    return t


class TestInsertAndSearch:
    def test_inserted_words_are_found(self, fruit_trie: Trie):
        for word in FRUIT:
            assert fruit_trie.search(word)
            assert word in fruit_trie

    def test_prefix_of_word_is_not_a_word(self, fruit_trie: Trie):
        assert not fruit_trie.search("app")
        assert not fruit_trie.search("appl")

    def test_missing_word(self, fruit_trie: Trie):
        assert not fruit_trie.search("cherry")
        assert not fruit_trie.search("apples")

    def test_insert_reports_new_words(self):
        t = Trie()
        assert t.insert("hello") is True
        assert t.insert("hello") is False
        assert t.size == 1
        assert len(t) == 1

    def test_prefix_inserted_later_becomes_word(self):
        t = Trie()
        t.insert("application")
        assert not t.search("apple")
        t.insert("app")
        assert t.search("app")
        assert t.size == 2

    def test_empty_word_marks_root(self):
        t = Trie()
        t.insert("")
        assert t.search("")
        assert t.collect_suggestions("", 5) == [""]

    def test_lookup_is_case_exact(self, fruit_trie: Trie):
        assert not fruit_trie.search("Apple")

    def test_non_string_membership(self, fruit_trie: Trie):
        assert 42 not in fruit_trie


class TestStartsWith:
    def test_every_prefix_of_a_word(self, fruit_trie: Trie):
        for word in FRUIT:
            for end in range(len(word) + 1):
                assert fruit_trie.starts_with(word[:end])

    def test_unknown_prefix(self, fruit_trie: Trie):
        assert not fruit_trie.starts_with("xyz")
        assert not fruit_trie.starts_with("bananas")


class TestCollectSuggestions:
    def test_ordered_by_codepoint(self, fruit_trie: Trie):
        assert fruit_trie.collect_suggestions("app", 10) == ["apple", "application", "apply"]

    def test_single_completion(self, fruit_trie: Trie):
        assert fruit_trie.collect_suggestions("ban", 10) == ["banana"]

    def test_no_match(self, fruit_trie: Trie):
        assert fruit_trie.collect_suggestions("xyz", 5) == []

    def test_empty_prefix_walks_whole_vocabulary(self, fruit_trie: Trie):
        assert fruit_trie.collect_suggestions("", 2) == ["apple", "application"]

    def test_uppercase_prefix_is_folded(self, fruit_trie: Trie):
        assert fruit_trie.collect_suggestions("APP", 10) == ["apple", "application", "apply"]

    def test_exact_match_comes_first(self):
        t = Trie()
        for word in ["carton", "cart", "cartography", "carts"]:
            t.insert(word)
        assert t.collect_suggestions("cart", 10) == ["cart", "cartography", "carton", "carts"]

    def test_budget_stops_traversal(self, fruit_trie: Trie):
        assert fruit_trie.collect_suggestions("app", 1) == ["apple"]

    def test_zero_or_negative_budget(self, fruit_trie: Trie):
        assert fruit_trie.collect_suggestions("app", 0) == []
        assert fruit_trie.collect_suggestions("app", -3) == []

    def test_unbounded_budget(self, fruit_trie: Trie):
        assert fruit_trie.collect_suggestions("", None) == sorted(FRUIT)
        assert fruit_trie.collect_suggestions("", 1000) == sorted(FRUIT)

    def test_results_are_stored_words_with_prefix(self):
        t = Trie()
        words = ["stone", "stones", "stoned", "store", "stork", "storm", "story", "stove"]
        for w in words:
            t.insert(w)
        results = t.collect_suggestions("sto", 5)
        assert len(results) == 5
        assert all(r.startswith("sto") and t.search(r) for r in results)

    def test_repeated_calls_are_identical(self, fruit_trie: Trie):
        first = fruit_trie.collect_suggestions("a", 10)
        assert fruit_trie.collect_suggestions("a", 10) == first

    def test_reinsertion_changes_nothing(self, fruit_trie: Trie):
        before = fruit_trie.collect_suggestions("", None)
        for word in FRUIT:
            fruit_trie.insert(word)
        assert fruit_trie.collect_suggestions("", None) == before
        assert fruit_trie.size == len(FRUIT)

    def test_non_ascii_ordering(self):
        t = Trie()
        for word in ["éclair", "ecrin", "ezine", "zebra"]:
            t.insert(word)
        # 'é' (U+00E9) sorts after every ASCII letter
        assert t.collect_suggestions("", None) == ["ecrin", "ezine", "zebra", "éclair"]

    def test_very_long_word_does_not_recurse(self):
        t = Trie()
        word = "a" * 5000
        t.insert(word)
        assert t.collect_suggestions("aaa", 1) == [word]

    def test_result_list_is_not_shared(self, fruit_trie: Trie):
        first = fruit_trie.collect_suggestions("app", 10)
        first.append("mutated")
        assert fruit_trie.collect_suggestions("app", 10) == ["apple", "application", "apply"]

    def test_concurrent_queries_do_not_interleave(self):
        t = Trie()
        for i in range(500):
            t.insert("alpha" + chr(ord("a") + i % 26) * (i // 26 + 1))
            t.insert("omega" + chr(ord("a") + i % 26) * (i // 26 + 1))
        expected_alpha = t.collect_suggestions("alpha", 50)
        expected_omega = t.collect_suggestions("omega", 50)
        failures: list[str] = []

        def worker(prefix: str, expected: list[str]) -> None:
            for _ in range(200):
                if t.collect_suggestions(prefix, 50) != expected:
                    failures.append(prefix)

        threads = [
            threading.Thread(target=worker, args=("alpha", expected_alpha)),
            threading.Thread(target=worker, args=("omega", expected_omega)),
            threading.Thread(target=worker, args=("alpha", expected_alpha)),
            threading.Thread(target=worker, args=("omega", expected_omega)),
        ]
        for th in threads:
            th.start()
        for th in threads:
            th.join()

        assert failures == []


class TestWords:
    def test_words_sorted(self, fruit_trie: Trie):
        assert list(fruit_trie.words()) == sorted(FRUIT)
