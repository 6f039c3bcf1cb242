"""
Wordle Solver
=============

Drives the hint matcher and the guess scorer round by round.

Each round picks a guess:
1. Only one candidate left: guess it
2. Round one with a fixed opening word: use it (skips the slowest search)
3. Otherwise: the scorer's best guess

The hint for the guess then narrows the candidates (and, in hard mode, the
guess pool) until the answer is found or the round budget runs out.

Hard mode is not guaranteed to finish in 6 guesses, so its budget defaults
to 99 rounds.
"""

import time
from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

from .candidates import filter_words
from .errors import ExhaustedError, NotFoundError, WordlerError
from .hint import Hint, derive_hint
from .scorer import best_guess
from .words import WordLists, check_word


# ============================================================================
# CONSTANTS
# ============================================================================

MAX_GUESSES = 6
HARD_MODE_MAX_GUESSES = 99
DEFAULT_FIRST_GUESS = "raise"


class SolveState(Enum):
    GUESSING = "guessing"
    SOLVED = "solved"
    FAILED = "failed"


class Solution(NamedTuple):
    """An answer word and the number of guesses it took."""
    word: str
    guesses: int
    history: Tuple[Hint, ...] = ()


# ============================================================================
# SOLVER CLASS
# ============================================================================

class WordleSolver:
    """
    Wordle solver over a fixed pair of word lists.

    Use ``solve()`` for self-play against a known answer, ``suggest()`` for a
    single next guess from known hints, or ``reset()`` / ``next_guess()`` /
    ``update()`` to play step by step with hints from elsewhere.
    """

    def __init__(self, word_lists: WordLists,
                 first_guess: Optional[str] = DEFAULT_FIRST_GUESS,
                 hard_mode: bool = False,
                 max_guesses: Optional[int] = None,
                 verbose: bool = False):
        """
        Initialize solver.

        Args:
            word_lists: targets and permitted guesses
            first_guess: fixed opening guess; None or "" to compute it
            hard_mode: guesses must be consistent with all hints so far
            max_guesses: round budget (default 6, or 99 in hard mode)
            verbose: print each guess as it is made
        """
        self.word_lists = word_lists
        self.first_guess = check_word(first_guess) if first_guess else None
        self.hard_mode = hard_mode
        if max_guesses is None:
            max_guesses = HARD_MODE_MAX_GUESSES if hard_mode else MAX_GUESSES
        self.max_guesses = max_guesses
        self.verbose = verbose

        self._target: Optional[str] = None
        self.reset()

    def __repr__(self):
        cn = self.__class__.__name__
        return (f"<{cn}: {self.word_lists!r}, first_guess={self.first_guess!r}, "
                f"hard_mode={self.hard_mode}>")

    # ------------------------------------------------------------------
    # Step-wise session
    # ------------------------------------------------------------------

    def reset(self, hints: Iterable[Hint] = ()):
        """
        Start a new game, optionally with hints that are already known.

        Raises ExhaustedError if no target matches the hints.
        """
        hints = list(hints)
        self.history: List[Hint] = list(hints)
        self.candidates = filter_words(hints, self.word_lists.targets)
        if self.hard_mode:
            self.guess_pool = filter_words(hints, self.word_lists.guesses)
        else:
            self.guess_pool = list(self.word_lists.guesses)
        self.round = len(hints) + 1
        self.state = SolveState.GUESSING
        if not self.candidates:
            self.state = SolveState.FAILED
            raise ExhaustedError()

    def get_candidates(self) -> List[str]:
        return list(self.candidates)

    def next_guess(self) -> str:
        """Pick the guess for the current round."""
        if self.state is not SolveState.GUESSING:
            raise WordlerError(f"Game is over ({self.state.value}).")
        if len(self.candidates) == 1:
            return self.candidates[0]
        if self.round == 1 and self.first_guess:
            return self.first_guess
        return best_guess(self.candidates, self.guess_pool)

    def update(self, hint: Hint) -> SolveState:
        """
        Apply the hint for this round's guess.

        Returns the new state. Raises ExhaustedError if no candidate is left,
        NotFoundError if the round budget is used up.
        """
        if self.state is not SolveState.GUESSING:
            raise WordlerError(f"Game is over ({self.state.value}).")
        self.history.append(hint)
        if hint.is_solved():
            self.state = SolveState.SOLVED
            return self.state

        self.candidates = [w for w in filter_words(hint, self.candidates) if w != hint.guess]
        if self.hard_mode:
            self.guess_pool = filter_words(hint, self.guess_pool)
        if not self.candidates:
            self.state = SolveState.FAILED
            raise ExhaustedError()

        self.round += 1
        if self.round > self.max_guesses:
            self.state = SolveState.FAILED
            raise NotFoundError(self._target, self.max_guesses)
        return self.state

    # ------------------------------------------------------------------
    # One-shot operations
    # ------------------------------------------------------------------

    def suggest(self, hints: Iterable[Hint] = ()) -> str:
        """Return the best next guess given the hints seen so far."""
        self._target = None
        self.reset(hints)
        return self.next_guess()

    def solve(self, answer: str) -> Solution:
        """
        Solve for a given answer word.

        Args:
            answer: The target word

        Returns:
            Solution(word, guesses, history)
        """
        self._target = check_word(answer)
        try:
            self.reset()
            while True:
                guess = self.next_guess()
                if self.verbose:
                    print(f'Guess #{self.round} is "{guess}"')
                if self.update(derive_hint(answer, guess)) is SolveState.SOLVED:
                    return Solution(guess, self.round, tuple(self.history))
        finally:
            self._target = None


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def solve_all(solver: WordleSolver, test_words: Optional[List[str]] = None,
              verbose: bool = True) -> Iterator[Solution]:
    """
    Solve every word in ``test_words`` (default: all targets).

    Failures are reported with ``max_guesses + 1`` guesses.
    """
    if test_words is None:
        test_words = solver.word_lists.targets

    start = time.time()
    for i, word in enumerate(test_words):
        if verbose and i > 0 and i % 500 == 0:
            elapsed = time.time() - start
            rate = i / elapsed if elapsed > 0 else 0
            print(f"[{i}/{len(test_words)}] {rate:.1f} w/s")
        try:
            yield solver.solve(word)
        except (ExhaustedError, NotFoundError) as e:
            if verbose:
                print(f"Error: {word}: {e}")
            yield Solution(word, solver.max_guesses + 1, tuple(solver.history))
