# tests/test_edit_distance.py
import random
import string

import pytest

from trie_dictionary.core.edit_distance import levenshtein


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("exampl", "example", 1),
        ("tes", "test", 1),
        ("quikc", "quick", 2),  # no transposition: two substitutions
        ("ab", "ba", 2),
        ("same", "same", 0),
    ],
)
def test_known_distances(a, b, expected):
    assert levenshtein(a, b) == expected


def _random_words(seed, n=40, max_len=7):
    rng = random.Random(seed)
    return [
        "".join(rng.choice("abcde") for _ in range(rng.randint(0, max_len)))
        for _ in range(n)
    ]


def test_symmetry():
    words = _random_words(1)
    for a in words:
        for b in words[:10]:
            assert levenshtein(a, b) == levenshtein(b, a)


def test_zero_iff_identical():
    words = _random_words(2)
    for a in words:
        for b in words:
            assert (levenshtein(a, b) == 0) == (a == b)


def test_triangle_inequality():
    words = _random_words(3, n=15)
    for a in words:
        for b in words:
            for c in words:
                assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)


def test_bounded_by_longer_length():
    rng = random.Random(4)
    for _ in range(50):
        a = "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(0, 8)))
        b = "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(0, 8)))
        d = levenshtein(a, b)
        assert abs(len(a) - len(b)) <= d <= max(len(a), len(b))


def test_returns_plain_int():
    assert type(levenshtein("a", "b")) is int
