# tests/test_distance.py
import random

import pytest

from fuzzy_matcher.core.distance import levenshtein, levenshtein_with_cutoff
from fuzzy_matcher.core.protocols import DistanceFunction


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("book", "books", 1),
        ("book", "bo", 2),
        ("example", "samples", 3),
        ("book", "cake", 4),
        ("über", "uber", 1),
    ],
)
def test_levenshtein_known_values(a, b, expected):
    assert levenshtein(a, b) == expected
    assert levenshtein(b, a) == expected


def test_metric_axioms_on_random_strings():
    rng = random.Random(1234)
    words = ["".join(rng.choice("abc") for _ in range(rng.randint(0, 6))) for _ in range(40)]
    for a in words:
        assert levenshtein(a, a) == 0
        for b in words:
            dab = levenshtein(a, b)
            assert dab == levenshtein(b, a)
            assert (dab == 0) == (a == b)
            for c in words[:10]:
                assert levenshtein(a, c) <= dab + levenshtein(b, c)


def test_cutoff_exact_when_within_bound():
    assert levenshtein_with_cutoff("kitten", "sitting", 3) == 3
    assert levenshtein_with_cutoff("kitten", "sitting", 10) == 3
    assert levenshtein_with_cutoff("kitten", "sitting") == 3


def test_cutoff_caps_when_beyond_bound():
    assert levenshtein_with_cutoff("kitten", "sitting", 2) == 3
    assert levenshtein_with_cutoff("kitten", "sitting", 0) == 1
    # length difference alone exceeds the bound
    assert levenshtein_with_cutoff("a", "abcdefgh", 2) == 3


def test_cutoff_agrees_with_exact_below_bound():
    rng = random.Random(99)
    for _ in range(300):
        a = "".join(rng.choice("xyz") for _ in range(rng.randint(0, 8)))
        b = "".join(rng.choice("xyz") for _ in range(rng.randint(0, 8)))
        k = rng.randint(0, 4)
        exact = levenshtein(a, b)
        capped = levenshtein_with_cutoff(a, b, k)
        if exact <= k:
            assert capped == exact
        else:
            assert capped == k + 1


def test_levenshtein_satisfies_protocol():
    assert isinstance(levenshtein, DistanceFunction)


def test_cutoff_rejects_negative_bound():
    with pytest.raises(ValueError):
        levenshtein_with_cutoff("a", "b", -1)
    with pytest.raises(ValueError):
        levenshtein_with_cutoff("a", "a", -3)
