"""
Wordle solver - Given a series of hints, compute which word to guess next.

Example: wordler raise y.gy. thumb yg...
"""

import argparse
import random
import sys
import time
from typing import List, Optional, TextIO

from .candidates import filter_words
from .errors import WordlerError
from .hint import Hint, derive_hint, make_hints
from .solver import DEFAULT_FIRST_GUESS, MAX_GUESSES, WordleSolver, solve_all
from .stats import compute_stats, format_stats, load_results, parse_results
from .words import DEFAULT_ANSWERS_FILE, DEFAULT_GUESSES_FILE, WordLists, check_word


PROG = "wordler"

ARGS_HELP = """
Other arguments depend on the options given.
With no options, args are the known hints. Each hint is a pair of args:
    First is the word guessed (5 letters)
    Second is the Wordle hint ('g' for green, 'y' for yellow, '.' for grey)
--solve: args are a list of answer words to solve
--stats: arg is a filename containing output from --all (or stdin if omitted)
--test: args depend on which test is selected.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=ARGS_HELP,
    )
    parser.add_argument('args', nargs='*', help='hints, answers or a file name')
    parser.add_argument('-i', '--init', default=DEFAULT_FIRST_GUESS,
                        help='initial guess word (default "raise", may be empty)')
    parser.add_argument('-d', '--hard', action='store_true',
                        help='hard mode - guesses must match hints')
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('-p', '--play', action='store_true', help='play a game')
    mode.add_argument('-s', '--solve', action='store_true',
                      help='solve for the given answers')
    mode.add_argument('-a', '--all', action='store_true',
                      help='solve all possible answers - slow!')
    mode.add_argument('-x', '--stats', action='store_true',
                      help='display stats from a results file')
    mode.add_argument('-t', '--test', type=int, default=0, help='test mode (1, 2 or 3)')
    parser.add_argument('-q', '--quiet', dest='verbose', action='store_false',
                        help='display less output')
    parser.add_argument('--answers', default=DEFAULT_ANSWERS_FILE,
                        help='file of possible answer words')
    parser.add_argument('--guesses', default=DEFAULT_GUESSES_FILE,
                        help='file of extra allowed guess words')
    return parser


# ============================================================================
# COMMANDS
# ============================================================================

def do_next_guess(solver: WordleSolver, args: List[str], verbose: bool) -> None:
    """Print the best next guess for the hints given as args."""
    if not args and solver.first_guess:
        if verbose:
            print(f'First guess is "{solver.first_guess}"')
        else:
            print(solver.first_guess)
        return

    if len(args) % 2 != 0:
        raise WordlerError("An even number of arguments is required.")
    start = time.time()
    guess = solver.suggest(make_hints(args))
    elapsed = time.time() - start
    if verbose:
        print(f"Time: {elapsed:.2f} seconds")
        print(f'Best guess is "{guess}"')
    else:
        print(guess)


def do_solve(solver: WordleSolver, args: List[str], verbose: bool) -> None:
    """Solve each answer given as args, showing the guesses."""
    solver.verbose = verbose
    for arg in args:
        target = check_word(arg)
        if verbose:
            print(f'Target: "{target}"')
        start = time.time()
        solution = solver.solve(target)
        elapsed = time.time() - start
        if verbose:
            print(f"Time: {elapsed:.2f} seconds")
            print(f'Answer: "{solution.word}" in {solution.guesses} tries')
        else:
            print(solution.guesses)


def do_solve_all(solver: WordleSolver) -> None:
    """Solve every target; print one results file line each."""
    solver.verbose = False
    for solution in solve_all(solver, verbose=False):
        print(f"{solution.word}, {solution.guesses}", flush=True)


def do_show_stats(args: List[str], stdin: TextIO) -> None:
    """Show stats for a results file (stdin if no file name)."""
    if args:
        results = load_results(args[0])
    else:
        results = parse_results(stdin)
    for line in format_stats(compute_stats(results)):
        print(line)


def read_guess(stdin: TextIO, prompt: str, guess_words: List[str],
               verbose: bool) -> Optional[str]:
    """Read a guess word, repeating until it is in ``guess_words``; None on EOF."""
    valid = set(guess_words)
    while True:
        if verbose:
            print(prompt, end='', flush=True)
        line = stdin.readline()
        if not line:
            return None
        word = line.strip()
        if word in valid:
            return word
        print("Invalid guess - try again")


def do_play(word_lists: WordLists, hard_mode: bool, verbose: bool,
            stdin: TextIO, answer: Optional[str] = None) -> Optional[int]:
    """
    Play a game: the user guesses, the program gives hints.

    Returns the number of guesses if the answer was found, else None.
    """
    if answer is None:
        answer = random.choice(word_lists.targets)
    guesses = list(word_lists.guesses)
    for i in range(1, MAX_GUESSES + 1):
        guess = read_guess(stdin, f"Guess #{i}: ", guesses, verbose)
        if guess is None:
            return None
        if guess == answer:
            if verbose:
                print(f'Correct! Answer "{answer}" was found in {i} tries.')
            return i
        hint = derive_hint(answer, guess)
        if verbose:
            print(f"          {hint.pattern}")
        else:
            print(hint.pattern)
        if hard_mode:
            guesses = filter_words(hint, guesses)
    print(f'Answer "{answer}" was not found in {MAX_GUESSES} tries.')
    return None


def do_test(test: int, word_lists: Optional[WordLists], args: List[str], verbose: bool) -> None:
    """
    Diagnostic commands:

    1. match words against a hint: ``raise .y..g geese evade amaze``
    2. list targets matching hints: ``raise .y..g grill y..y.``
    3. derive a hint: ``grade guess`` (target, then guess)
    """
    if test == 1:
        if len(args) < 3:
            raise WordlerError("Requires 3+ args")
        hint = Hint(args[0], args[1])
        if verbose:
            print(f"hint: {hint}")
        for arg in args[2:]:
            print(f"{check_word(arg)} {str(hint.match(arg)).lower()}")
    elif test == 2:
        if len(args) % 2 != 0:
            raise WordlerError("Requires an even number of args")
        found = filter_words(make_hints(args), word_lists.targets)
        if verbose:
            print(f"args: {args}")
            print(f"{len(found)} matches")
        else:
            print(len(found))
        print(' '.join(found))
    elif test == 3:
        if len(args) != 2:
            raise WordlerError("Requires 2 args")
        if verbose:
            print(f"Target: {args[0]} Guess: {args[1]}")
        print(derive_hint(args[0], args[1]))
    else:
        raise WordlerError("Invalid test number")


# ============================================================================
# MAIN
# ============================================================================

def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         word_lists: Optional[WordLists] = None) -> int:
    """Run the command line; return the exit status."""
    opts = build_parser().parse_args(argv)
    if stdin is None:
        stdin = sys.stdin

    try:
        if opts.stats:
            do_show_stats(opts.args, stdin)
            return 0
        if opts.test in (1, 3):
            do_test(opts.test, None, opts.args, opts.verbose)
            return 0

        if word_lists is None:
            word_lists = WordLists.from_files(opts.answers, opts.guesses)
        if opts.play:
            do_play(word_lists, opts.hard, opts.verbose, stdin)
        elif opts.test:
            do_test(opts.test, word_lists, opts.args, opts.verbose)
        else:
            solver = WordleSolver(word_lists, first_guess=opts.init, hard_mode=opts.hard)
            if opts.solve:
                do_solve(solver, opts.args, opts.verbose)
            elif opts.all:
                do_solve_all(solver)
            else:
                do_next_guess(solver, opts.args, opts.verbose)
    except (WordlerError, OSError) as e:
        print(f"{PROG}: Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
