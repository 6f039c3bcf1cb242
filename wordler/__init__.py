"""
Wordle Solver - Exhaustive Partition Search
===========================================

Given hints seen so far, picks the guess that leaves the fewest candidate
answers summed over every possible answer.
"""

__version__ = "1.0.0"

from .errors import (WordlerError, InvalidWordError, InvalidHintError,
                     ExhaustedError, NotFoundError, ResultsFormatError)
from .words import WORD_LEN, WordLists, check_word, load_words
from .hint import GRAY, YELLOW, GREEN, Hint, check_hint, derive_hint, matches
from .candidates import filter_words
from .scorer import best_guess, rank_guesses, score_guesses
from .solver import (MAX_GUESSES, SolveState, Solution, WordleSolver,
                     solve_all)
