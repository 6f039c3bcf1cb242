"""
Word Lists
==========

Words are plain ``str`` values of exactly five lowercase ASCII letters. The
numeric kernels work on ``int32`` arrays of letter indices (0-25 for a-z).

Wordle uses TWO word lists:
- Targets: words that can be the answer
- Guesses: all words you may guess (targets first, then the extra words)
"""

import os
import re
from typing import Iterable, List, Optional

import numpy as np

from .errors import InvalidWordError


# ============================================================================
# CONSTANTS
# ============================================================================

WORD_LEN = 5
_WORD_RE = re.compile(r'[a-z]{5}')

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_ANSWERS_FILE = os.path.join(BASE_DIR, "words", "answers.txt")
DEFAULT_GUESSES_FILE = os.path.join(BASE_DIR, "words", "allowed_guesses.txt")


# ============================================================================
# VALIDATION AND CONVERSION
# ============================================================================

def check_word(word) -> str:
    """Return ``word`` if it is 5 lowercase letters, else raise InvalidWordError."""
    if not isinstance(word, str) or not _WORD_RE.fullmatch(word):
        raise InvalidWordError(word)
    return word


def word_to_chars(word: str) -> np.ndarray:
    """Convert one word to a (5,) char code array."""
    return np.array([ord(c) - ord('a') for c in word], dtype=np.int32)


def words_to_chars(words: List[str]) -> np.ndarray:
    """Convert words to a (n, 5) char code array."""
    arr = np.zeros((len(words), WORD_LEN), dtype=np.int32)
    for i, w in enumerate(words):
        for j, c in enumerate(w):
            arr[i, j] = ord(c) - ord('a')
    return arr


def _unique(words: Iterable[str]) -> List[str]:
    """Validate words and drop repeats, keeping the first occurrence."""
    seen = set()
    result = []
    for w in words:
        check_word(w)
        if w not in seen:
            seen.add(w)
            result.append(w)
    return result


# ============================================================================
# WORD LISTS
# ============================================================================

class WordLists:
    """
    The target and guess word lists for one solver.

    The guess pool always starts with the targets, in target order, followed
    by the extra allowed guesses. Order matters: the scorer breaks ties in
    favour of the earliest word, so words that could also be the answer win.
    """

    def __init__(self, targets: Iterable[str], guesses: Optional[Iterable[str]] = None):
        """
        Args:
            targets: possible answer words
            guesses: allowed guess words; may or may not include the targets
        """
        self.targets = _unique(targets)
        target_set = set(self.targets)
        extra = [w for w in _unique(guesses or []) if w not in target_set]
        self.guesses = self.targets + extra
        self._guess_set = frozenset(self.guesses)

    @classmethod
    def from_files(cls, answers_file: str = DEFAULT_ANSWERS_FILE,
                   guesses_file: Optional[str] = DEFAULT_GUESSES_FILE) -> "WordLists":
        """Load targets and (optionally) extra guesses from text files."""
        targets = load_words(answers_file)
        if guesses_file and os.path.exists(guesses_file):
            guesses = load_words(guesses_file)
        else:
            guesses = None
        return cls(targets, guesses)

    def is_guess(self, word: str) -> bool:
        """True if ``word`` is in the guess pool."""
        return word in self._guess_set

    def __repr__(self):
        return f"<WordLists: {len(self.targets)} targets, {len(self.guesses)} guesses>"


def load_words(filepath: str) -> List[str]:
    """Load word list from file, one word per line."""
    with open(filepath, 'r') as f:
        return [line.strip().lower() for line in f if line.strip()]
