import itertools

import pytest

from wordler.errors import InvalidHintError, InvalidWordError
from wordler.hint import Hint, derive_hint, make_hints, matches


TRICKY = [
    "sheep", "speed", "eerie", "geese", "apple", "angle", "ankle", "llama",
    "allot", "total", "stoal", "tally", "alloy", "atoll", "abbey", "kebab",
    "babes", "error", "rover", "robot", "array", "mamma", "evade", "amaze",
]


@pytest.mark.parametrize("target, guess, pattern", [
    ("speed", "sheep", "g.ggy"),
    ("angle", "apple", "g..gg"),
    ("geese", "eerie", "yg..g"),
    ("total", "allot", "yy.yy"),
    ("abbey", "kebab", ".ygyy"),
    ("crane", "crane", "ggggg"),
    ("mamma", "array", "y..y."),
])
def test_derive_hint(target, guess, pattern):
    assert derive_hint(target, guess) == Hint(guess, pattern)


def test_target_matches_its_own_hint():
    for target, guess in itertools.product(TRICKY, repeat=2):
        assert matches(derive_hint(target, guess), target)


def test_matching_is_inverse_of_derivation():
    for guess in TRICKY:
        hints = {t: derive_hint(t, guess) for t in TRICKY}
        for target in TRICKY:
            hint = hints[target]
            for word in TRICKY:
                assert hint.match(word) == (hints[word] == hint), (guess, target, word)


@pytest.mark.parametrize("word, expected", [
    ("geese", False),
    ("evade", True),
    ("amaze", True),
    ("fubar", False),
    ("exact", False),
    ("blend", False),
])
def test_match_words(word, expected):
    assert Hint("raise", ".y..g").match(word) is expected


def test_gray_letter_with_other_copies():
    # one e green, one yellow, one grey: exactly two e's in the answer
    hint = Hint("eerie", "y.y.g")
    assert hint.match("crepe")
    assert hint.match("there")
    assert not hint.match("treee")


def test_same_letter_off_green_rejected():
    hint = Hint("sheep", "g.ggy")
    assert hint.match("speed")
    assert not hint.match("steep")


def test_yellow_cannot_sit_under_itself():
    hint = Hint("eerie", "yg..g")
    assert hint.match("geese")
    assert not hint.match("eeeee")


def test_hint_value_semantics():
    a = Hint("raise", "y.gy.")
    b = Hint("raise", "y.gy.")
    assert a == b
    assert hash(a) == hash(b)
    assert a != Hint("raise", "y.gyg")
    assert str(a) == "raise y.gy."
    assert {a, b} == {a}
    assert not a.is_solved()
    assert Hint("raise", "ggggg").is_solved()


@pytest.mark.parametrize("pattern", ["gg.g", "ggxgg", "GGGGG", "gg.ggg"])
def test_invalid_hint(pattern):
    with pytest.raises(InvalidHintError):
        Hint("raise", pattern)


def test_invalid_guess():
    with pytest.raises(InvalidWordError):
        Hint("RAISE", "g....")
    with pytest.raises(InvalidWordError):
        derive_hint("raise", "rais")


def test_make_hints():
    hints = make_hints(["raise", "y.gy.", "thumb", "yg..."])
    assert hints == (Hint("raise", "y.gy."), Hint("thumb", "yg..."))
    with pytest.raises(InvalidHintError):
        make_hints(["raise", "y.gy.", "thumb"])
