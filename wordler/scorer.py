"""
Guess Scoring
=============

Brute-force search for the guess that best splits the candidates.

For a guess g and candidates C::

    score(g) = sum over t in C of |{c in C : c matches hint(t, g)}|

i.e. the total number of candidates left over all equally likely answers.
Lower is better. This is |C| times the expected number of remaining words,
computed exactly, and costs O(guesses x candidates^2) hint checks.
"""

from typing import List, Tuple

import numpy as np
from numba import jit, prange

from .errors import ExhaustedError
from .hint import fill_hint, match_hint
from .words import WORD_LEN, words_to_chars


# ============================================================================
# NUMBA-ACCELERATED SCORING
# ============================================================================

@jit(nopython=True, parallel=True, cache=True)
def compute_scores(guess_chars: np.ndarray, candidate_chars: np.ndarray) -> np.ndarray:
    """
    Score every guess against the candidate set, in parallel over guesses.

    Args:
        guess_chars: shape (n_guesses, 5) array of char codes
        candidate_chars: shape (n_candidates, 5) array of char codes

    Returns:
        shape (n_guesses,) int64 scores
    """
    n_guesses = guess_chars.shape[0]
    n_candidates = candidate_chars.shape[0]
    scores = np.zeros(n_guesses, dtype=np.int64)

    for g in prange(n_guesses):
        # Per-guess buffers, reused for every target/candidate pair
        hint = np.zeros(WORD_LEN, dtype=np.int32)
        scratch = np.zeros(WORD_LEN, dtype=np.int32)
        claimed = np.zeros(WORD_LEN, dtype=np.bool_)
        guess = guess_chars[g]
        total = 0
        for t in range(n_candidates):
            fill_hint(candidate_chars[t], guess, hint, scratch)
            for c in range(n_candidates):
                if match_hint(guess, hint, candidate_chars[c], claimed):
                    total += 1
        scores[g] = total

    return scores


# ============================================================================
# GUESS SELECTION
# ============================================================================

def score_guesses(candidates: List[str], guesses: List[str]) -> np.ndarray:
    """Return the score of each word in ``guesses`` (same order)."""
    if len(guesses) == 0:
        return np.zeros(0, dtype=np.int64)
    if len(candidates) == 0:
        return np.zeros(len(guesses), dtype=np.int64)
    return compute_scores(words_to_chars(guesses), words_to_chars(candidates))


def best_guess(candidates: List[str], guesses: List[str]) -> str:
    """
    Choose the best word to guess next, given that the answer is one of
    ``candidates``.

    Args:
        candidates: remaining possible answers, in list order
        guesses: permitted guess words, in list order

    Returns:
        The guess with the lowest score; the earliest one on ties.
    """
    if len(candidates) == 0:
        raise ExhaustedError()
    if len(candidates) <= 2:
        # One or two possibilities: guess one rather than a roundabout word
        return candidates[0]
    if len(guesses) == 0:
        raise ExhaustedError("No guess words available.")

    scores = score_guesses(candidates, guesses)
    # argmin returns the first minimum, so ties go to the earlier guess
    return guesses[int(np.argmin(scores))]


def rank_guesses(candidates: List[str], guesses: List[str],
                 top: int = 10) -> List[Tuple[str, int]]:
    """Return the ``top`` best (guess, score) pairs, best first."""
    if len(candidates) == 0:
        raise ExhaustedError()
    scores = score_guesses(candidates, guesses)
    order = np.argsort(scores, kind='stable')[:top]
    return [(guesses[i], int(scores[i])) for i in order]
