import pytest

from textrecovery.edit_distance import (
    ALPHABET_SIZE,
    WILDCARD,
    char_to_index,
    edit_distance,
)

WORDS = ["", "a", "ab", "abc", "acb", "ca", "kitten", "sitting", "hello", "yellow", "zzz"]


def test_char_to_index_letters():
    assert char_to_index("a") == 0
    assert char_to_index("z") == 25


def test_char_to_index_wildcard_is_last_slot():
    assert char_to_index(WILDCARD) == ALPHABET_SIZE - 1


@pytest.mark.parametrize("c", ["A", "1", " ", "-", "ab", ""])
def test_char_to_index_invalid(c):
    assert char_to_index(c) == -1


def test_alphabet_indices_are_distinct():
    indices = {char_to_index(chr(code)) for code in range(ord("a"), ord("z") + 1)}
    indices.add(char_to_index(WILDCARD))
    assert indices == set(range(ALPHABET_SIZE))


@pytest.mark.parametrize("word", WORDS)
def test_identical_strings_have_zero_distance(word):
    assert edit_distance(word, word) == 0


@pytest.mark.parametrize("word", WORDS)
def test_distance_to_empty_is_length(word):
    assert edit_distance(word, "") == len(word)
    assert edit_distance("", word) == len(word)


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS)
def test_symmetry(a, b):
    assert edit_distance(a, b) == edit_distance(b, a)


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS)
def test_bounded_by_longer_length(a, b):
    assert edit_distance(a, b) <= max(len(a), len(b))
    assert edit_distance(a, b) >= abs(len(a) - len(b))


@pytest.mark.parametrize("a", WORDS[:6])
@pytest.mark.parametrize("b", WORDS[:6])
@pytest.mark.parametrize("c", WORDS[:6])
def test_triangle_inequality(a, b, c):
    assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


def test_adjacent_transposition_counts_once():
    assert edit_distance("abc", "acb") == 1


def test_unrestricted_transposition():
    assert edit_distance("ca", "abc") == 2


def test_classic_example():
    assert edit_distance("kitten", "sitting") == 3


def test_wildcard_matches_any_letter():
    assert edit_distance("a*c", "abc") == 0
    assert edit_distance("abc", "**c") == 0
    assert edit_distance("***", "xyz") == 0


def test_wildcard_does_not_change_length_penalty():
    assert edit_distance("*", "abc") == len("abc") - 1


@pytest.mark.parametrize("a, b", [("Abc", "abc"), ("abc", "ab1"), ("a b", "ab"), ("", "?")])
def test_invalid_characters_raise(a, b):
    with pytest.raises(ValueError):
        edit_distance(a, b)