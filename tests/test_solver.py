import pytest

from wordler.errors import ExhaustedError, NotFoundError, WordlerError
from wordler.hint import Hint, derive_hint
from wordler.solver import (HARD_MODE_MAX_GUESSES, MAX_GUESSES, SolveState,
                            WordleSolver, solve_all)


def test_solve_with_opening_guess(small_lists):
    solver = WordleSolver(small_lists, first_guess="apple")
    solution = solver.solve("angle")
    assert solution.word == "angle"
    assert solution.guesses == 2
    assert [h.pattern for h in solution.history] == ["g..gg", "ggggg"]
    assert solver.state is SolveState.SOLVED


def test_solve_takes_first_of_two(small_lists):
    solver = WordleSolver(small_lists, first_guess="apple")
    solution = solver.solve("ankle")
    assert solution.guesses == 3
    assert [h.guess for h in solution.history] == ["apple", "angle", "ankle"]


def test_solve_without_opening_guess(small_lists):
    solver = WordleSolver(small_lists, first_guess=None)
    solution = solver.solve("ankle")
    assert [h.guess for h in solution.history] == ["angle", "ankle"]


def test_opening_guess_need_not_be_listed(small_lists):
    solver = WordleSolver(small_lists, first_guess="raise")
    assert solver.next_guess() == "raise"
    assert solver.solve("apple").guesses <= MAX_GUESSES


def test_target_outside_lists(small_lists):
    solver = WordleSolver(small_lists, first_guess="apple")
    with pytest.raises(ExhaustedError):
        solver.solve("zebra")
    assert solver.state is SolveState.FAILED


def test_round_budget(small_lists):
    solver = WordleSolver(small_lists, first_guess="apple", max_guesses=1)
    with pytest.raises(NotFoundError, match='"angle" was not found in 1 tries'):
        solver.solve("angle")
    assert solver.state is SolveState.FAILED


def test_contradictory_hints(small_lists):
    solver = WordleSolver(small_lists)
    with pytest.raises(ExhaustedError):
        solver.suggest([Hint("apple", "g...."), Hint("angle", ".....")])
    assert solver.state is SolveState.FAILED


def test_suggest(word_lists):
    solver = WordleSolver(word_lists)
    assert solver.suggest() == "raise"
    hints = [derive_hint("plant", "raise")]
    guess = solver.suggest(hints)
    assert guess in word_lists.guesses
    assert solver.round == 2


def test_suggest_single_candidate(small_lists):
    solver = WordleSolver(small_lists)
    assert solver.suggest([Hint("angle", "gg.gg")]) == "ankle"


def test_step_by_step(small_lists):
    solver = WordleSolver(small_lists, first_guess="apple")
    assert solver.next_guess() == "apple"
    assert solver.update(Hint("apple", "g..gg")) is SolveState.GUESSING
    assert solver.get_candidates() == ["angle", "ankle"]
    assert solver.round == 2
    assert solver.update(Hint("angle", "ggggg")) is SolveState.SOLVED
    with pytest.raises(WordlerError):
        solver.next_guess()
    solver.reset()
    assert solver.state is SolveState.GUESSING
    assert solver.get_candidates() == ["apple", "angle", "ankle"]


def test_guess_is_dropped_from_candidates(small_lists):
    solver = WordleSolver(small_lists, first_guess="apple")
    solver.update(Hint("apple", "g..gg"))
    assert "apple" not in solver.candidates


def test_solve_all_targets(word_lists):
    solver = WordleSolver(word_lists)
    solutions = list(solve_all(solver, verbose=False))
    assert [s.word for s in solutions] == word_lists.targets
    for s in solutions:
        assert 1 <= s.guesses <= MAX_GUESSES
        assert s.history[-1] == Hint(s.word, "ggggg")


def test_solve_all_reports_failures(small_lists):
    solver = WordleSolver(small_lists, first_guess="apple", max_guesses=1)
    solutions = list(solve_all(solver, ["apple", "ankle"], verbose=False))
    assert [s.guesses for s in solutions] == [1, 2]


def test_hard_mode_budget(small_lists):
    assert WordleSolver(small_lists, hard_mode=True).max_guesses == HARD_MODE_MAX_GUESSES
    assert WordleSolver(small_lists).max_guesses == MAX_GUESSES


def test_hard_mode_pool_shrinks(word_lists):
    solver = WordleSolver(word_lists, first_guess="raise", hard_mode=True)
    target = "scant"
    pools = [list(solver.guess_pool)]
    while True:
        guess = solver.next_guess()
        assert guess == "raise" or guess in pools[-1]
        if solver.update(derive_hint(target, guess)) is SolveState.SOLVED:
            break
        pools.append(list(solver.guess_pool))
    for before, after in zip(pools, pools[1:]):
        assert set(after) <= set(before)
    for word in pools[-1]:
        assert all(h.match(word) for h in solver.history[:-1])


def test_hard_mode_keeps_pool_without_hints(word_lists):
    solver = WordleSolver(word_lists, hard_mode=True)
    assert solver.guess_pool == word_lists.guesses
    assert solver.guess_pool is not word_lists.guesses
