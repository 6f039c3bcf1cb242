import pytest

from wordler.words import WordLists


SMALL_TARGETS = ["apple", "angle", "ankle"]

TARGETS = [
    "crane", "slate", "trace", "crate", "react", "cater", "grace", "brace",
    "place", "plane", "plant", "slant", "scant", "chant", "speed", "sheep",
]

EXTRA_GUESSES = ["raise", "roate", "lymph", "dight"]


@pytest.fixture
def small_lists():
    return WordLists(SMALL_TARGETS)


@pytest.fixture
def word_lists():
    return WordLists(TARGETS, EXTRA_GUESSES)
