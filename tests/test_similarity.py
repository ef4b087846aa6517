import pytest

from pantry_match.tagging import default_vocabulary
from pantry_match.tagging.similarity import (
    find_best_match,
    levenshtein_distance,
    similarity,
)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("", "abc", 3),
        ("abc", "", 3),
        ("abc", "abc", 0),
    ],
)
def test_levenshtein_distance(a, b, expected):
    assert levenshtein_distance(a, b) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("ui", "ui", 1.0),
        ("UI", "ui", 1.0),
        ("", "", 1.0),
        ("paprika", "paprikapoeder", 0.8),
        ("paprikapoeder", "paprika", 0.8),
        # Flat substring score, however short the substring
        ("ui", "uien in blik", 0.8),
        ("kaas", "kaaz", 0.75),
        ("abc", "xyz", 0.0),
    ],
)
def test_similarity(a, b, expected):
    assert similarity(a, b) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["ui", "olijfolie", "rode biet", ""])
def test_similarity_identity(text):
    assert similarity(text, text) == 1.0


@pytest.fixture
def tags():
    return default_vocabulary().tags


@pytest.mark.parametrize(
    "candidates, expected",
    [
        (["paprika"], "paprika"),
        # Returns the tag as configured, not its normalized form
        (["mais"], "maïs"),
        (["wortelen"], "wortel"),
        (["kaaz"], "kaas"),
        (["xyzzy"], None),
        ([], None),
        # The first candidate scoring 0.8 wins, even if a later one is exact
        (["wortelen", "paprika"], "wortel"),
        (["qwxz", "paprika"], "paprika"),
        # An edit-distance score of 0.8 or more also stops the search
        (["tomaaat", "ui"], "tomaat"),
    ],
)
def test_find_best_match(tags, candidates, expected):
    assert find_best_match(candidates, tags) == expected


def test_find_best_match_threshold(tags):
    assert find_best_match(["kaaz"], tags, threshold=0.8) is None


def test_find_best_match_exact_beats_earlier_substring():
    assert find_best_match(["appel"], ["appelmoes", "appel"]) == "appel"


def test_find_best_match_first_substring_wins():
    assert find_best_match(["kipfilets"], ["kip", "kipfilet"]) == "kip"
