"""Unit tests for word sorting"""

from itertools import permutations

import pytest

from console_kit.domain.words import sort_words


@pytest.mark.parametrize(
    "words",
    [
        ["pear", "apple", "fig"],
        ["delta", "charlie", "bravo"],
        ["b", "a", "c"],
        ["ab", "a", "abc"],
        ["10", "9", "100"],
    ],
)
def test_sort_words_matches_builtin_sort(words):
    """Exchange sort agrees with sorted() on distinct words"""
    assert sort_words(words) == sorted(words)


def test_sort_words_is_idempotent():
    """Sorting an already sorted triple leaves it unchanged"""
    ordered = ["apple", "fig", "pear"]
    assert sort_words(ordered) == ordered
    assert sort_words(sort_words(ordered)) == ordered


def test_sort_words_permutation_invariance():
    """Every input order of the same words gives the same output"""
    results = {tuple(sort_words(list(p))) for p in permutations(["kiwi", "banana", "cherry"])}
    assert results == {("banana", "cherry", "kiwi")}


def test_sort_words_is_ordinal_not_locale_aware():
    """Uppercase sorts before lowercase by code point"""
    assert sort_words(["apple", "Zebra", "mango"]) == ["Zebra", "apple", "mango"]


def test_sort_words_with_duplicates():
    assert sort_words(["same", "other", "same"]) == ["other", "same", "same"]


def test_sort_words_does_not_mutate_input():
    words = ["c", "b", "a"]
    sort_words(words)
    assert words == ["c", "b", "a"]


def test_sort_words_accepts_long_words():
    """No length cap on words"""
    long_word = "z" * 500
    assert sort_words([long_word, "a", "m"]) == ["a", "m", long_word]
