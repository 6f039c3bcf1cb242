"""
Hints
=====

A hint is a guess word paired with one symbol per letter:

- ``g`` (GREEN): letter correct and in the correct position
- ``y`` (YELLOW): letter present elsewhere in the answer
- ``.`` (GRAY): letter absent (beyond the copies already accounted for)

Repeated letters are the tricky part::

    target  guess   hint
    speed   sheep   g.ggy
    angle   apple   g..gg
    geese   eerie   yg..g

Derivation and matching both run as numba kernels on char code arrays and
write into caller-owned buffers, so the scorer's inner loop never allocates.
"""

from typing import Iterable, Tuple

import numpy as np
from numba import jit

from .errors import InvalidHintError
from .words import WORD_LEN, check_word, word_to_chars


# ============================================================================
# CONSTANTS
# ============================================================================

GRAY = 0
YELLOW = 1
GREEN = 2

SYMBOLS = '.yg'  # indexed by code
SOLVED_PATTERN = 'g' * WORD_LEN

_CONSUMED = -1


# ============================================================================
# NUMBA KERNELS
# ============================================================================

@jit(nopython=True, cache=True)
def fill_hint(target: np.ndarray, guess: np.ndarray, hint: np.ndarray,
              scratch: np.ndarray) -> None:
    """
    Compute the hint codes for a guess against a target.

    Args:
        target: shape (5,) array of char codes
        guess: shape (5,) array of char codes
        hint: shape (5,) output array, receives GRAY/YELLOW/GREEN codes
        scratch: shape (5,) work array, holds unconsumed target letters
    """
    for i in range(WORD_LEN):
        scratch[i] = target[i]
        hint[i] = GRAY

    # First pass: greens consume their target letter
    for i in range(WORD_LEN):
        if guess[i] == target[i]:
            hint[i] = GREEN
            scratch[i] = _CONSUMED

    # Second pass: yellows consume the first unconsumed copy
    for i in range(WORD_LEN):
        if hint[i] == GREEN:
            continue
        for j in range(WORD_LEN):
            if scratch[j] == guess[i]:
                hint[i] = YELLOW
                scratch[j] = _CONSUMED
                break


@jit(nopython=True, cache=True)
def match_hint(guess: np.ndarray, hint: np.ndarray, word: np.ndarray,
               claimed: np.ndarray) -> bool:
    """
    Test whether a word is consistent with a guess/hint pair.

    Args:
        guess: shape (5,) char codes of the guessed word
        hint: shape (5,) GRAY/YELLOW/GREEN codes
        word: shape (5,) char codes of the candidate
        claimed: shape (5,) bool work array

    Returns:
        True if guessing ``guess`` against ``word`` would give ``hint``
    """
    for i in range(WORD_LEN):
        claimed[i] = False

    # Greens must be there; any other same-position letter would be green too
    for i in range(WORD_LEN):
        if hint[i] == GREEN:
            if word[i] != guess[i]:
                return False
            claimed[i] = True
        elif word[i] == guess[i]:
            return False

    # Each yellow claims one unclaimed copy. The green pass already rejected
    # copies sitting under the same letter in the guess, so a copy can never
    # satisfy the yellow that points at its own position.
    for i in range(WORD_LEN):
        if hint[i] == YELLOW:
            c = guess[i]
            found = False
            for j in range(WORD_LEN):
                if word[j] == c and not claimed[j]:
                    claimed[j] = True
                    found = True
                    break
            if not found:
                return False

    # A gray letter must have no copies left over
    for i in range(WORD_LEN):
        if hint[i] == GRAY:
            c = guess[i]
            for j in range(WORD_LEN):
                if word[j] == c and not claimed[j]:
                    return False

    return True


# ============================================================================
# HINT CLASS
# ============================================================================

def check_hint(pattern) -> str:
    """Return ``pattern`` if it is 5 of 'g', 'y', '.', else raise InvalidHintError."""
    if (not isinstance(pattern, str) or len(pattern) != WORD_LEN
            or any(ch not in SYMBOLS for ch in pattern)):
        raise InvalidHintError(pattern)
    return pattern


class Hint:
    """
    A guess word and its hint pattern, e.g. ``Hint("raise", "y.gy.")``.

    Hints are immutable values: equal when guess and pattern are equal.
    """

    __slots__ = ('_guess', '_pattern', '_guess_chars', '_codes')

    def __init__(self, guess: str, pattern: str):
        self._guess = check_word(guess)
        self._pattern = check_hint(pattern)
        self._guess_chars = word_to_chars(guess)
        self._codes = np.array([SYMBOLS.index(ch) for ch in pattern], dtype=np.int32)

    @property
    def guess(self) -> str:
        return self._guess

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def guess_chars(self) -> np.ndarray:
        """Guess as a (5,) char code array (do not modify)."""
        return self._guess_chars

    @property
    def codes(self) -> np.ndarray:
        """Pattern as a (5,) GRAY/YELLOW/GREEN code array (do not modify)."""
        return self._codes

    @classmethod
    def from_guess(cls, target: str, guess: str) -> "Hint":
        """Return the hint produced by guessing ``guess`` when the answer is ``target``."""
        check_word(target)
        check_word(guess)
        codes = np.empty(WORD_LEN, dtype=np.int32)
        scratch = np.empty(WORD_LEN, dtype=np.int32)
        fill_hint(word_to_chars(target), word_to_chars(guess), codes, scratch)
        return cls(guess, ''.join(SYMBOLS[c] for c in codes))

    def match(self, word: str) -> bool:
        """True if ``word`` is consistent with this hint."""
        claimed = np.empty(WORD_LEN, dtype=np.bool_)
        return bool(match_hint(self._guess_chars, self._codes,
                               word_to_chars(check_word(word)), claimed))

    def is_solved(self) -> bool:
        return self._pattern == SOLVED_PATTERN

    def __eq__(self, other):
        if not isinstance(other, Hint):
            return NotImplemented
        return self._guess == other._guess and self._pattern == other._pattern

    def __hash__(self):
        return hash((self._guess, self._pattern))

    def __str__(self):
        return f"{self._guess} {self._pattern}"

    def __repr__(self):
        return f"Hint({self._guess!r}, {self._pattern!r})"


def derive_hint(target: str, guess: str) -> Hint:
    """Compute the hint a guess produces against a known target."""
    return Hint.from_guess(target, guess)


def matches(hint: Hint, word: str) -> bool:
    """Test whether ``word`` is consistent with ``hint``."""
    return hint.match(word)


def make_hints(args: Iterable[str]) -> Tuple[Hint, ...]:
    """Build hints from alternating guess/pattern strings."""
    args = list(args)
    if len(args) % 2 != 0:
        raise InvalidHintError(args[-1])
    return tuple(Hint(args[i], args[i + 1]) for i in range(0, len(args), 2))
