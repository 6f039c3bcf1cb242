"""Filter word lists by hints."""

from typing import Iterable, List, Tuple, Union

import numpy as np
from numba import jit

from .hint import Hint, match_hint
from .words import WORD_LEN, words_to_chars


@jit(nopython=True, cache=True)
def match_mask(hint_guesses: np.ndarray, hint_codes: np.ndarray,
               word_chars: np.ndarray) -> np.ndarray:
    """
    Mark the words that match every hint.

    Args:
        hint_guesses: shape (n_hints, 5) guess char codes
        hint_codes: shape (n_hints, 5) GRAY/YELLOW/GREEN codes
        word_chars: shape (n_words, 5) char codes

    Returns:
        shape (n_words,) boolean mask
    """
    n_hints = hint_guesses.shape[0]
    n_words = word_chars.shape[0]
    mask = np.ones(n_words, dtype=np.bool_)
    claimed = np.zeros(WORD_LEN, dtype=np.bool_)

    for w in range(n_words):
        for h in range(n_hints):
            if not match_hint(hint_guesses[h], hint_codes[h], word_chars[w], claimed):
                mask[w] = False
                break

    return mask


def hints_to_arrays(hints: Iterable[Hint]) -> Tuple[np.ndarray, np.ndarray]:
    """Stack hints into (n, 5) guess and code arrays."""
    hints = list(hints)
    guesses = np.zeros((len(hints), WORD_LEN), dtype=np.int32)
    codes = np.zeros((len(hints), WORD_LEN), dtype=np.int32)
    for i, hint in enumerate(hints):
        guesses[i] = hint.guess_chars
        codes[i] = hint.codes
    return guesses, codes


def filter_words(hints: Union[Hint, Iterable[Hint]], words: List[str]) -> List[str]:
    """
    Return the words that match all the hints, in their original order.

    Args:
        hints: a single Hint or any iterable of hints
        words: word list to filter (not modified)
    """
    if isinstance(hints, Hint):
        hints = (hints,)
    hint_guesses, hint_codes = hints_to_arrays(hints)
    if len(hint_guesses) == 0 or len(words) == 0:
        return list(words)

    mask = match_mask(hint_guesses, hint_codes, words_to_chars(words))
    return [w for w, keep in zip(words, mask) if keep]
