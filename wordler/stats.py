"""
Results Statistics
==================

A results file has one ``word, guesses`` line per solved target, as written
by ``wordler --all``::

    aback, 4
    abase, 3
"""

from typing import Iterable, List, NamedTuple

from .errors import InvalidWordError, ResultsFormatError
from .solver import Solution
from .words import check_word


class ResultStats(NamedTuple):
    count: int
    total_guesses: int
    min: Solution
    max: Solution
    histogram: List[int]

    @property
    def mean(self) -> float:
        return self.total_guesses / self.count


def parse_results(lines: Iterable[str]) -> List[Solution]:
    """Parse results file lines into Solutions. Blank lines are skipped."""
    results = []
    for line in lines:
        line = line.rstrip('\r\n')
        if not line.strip():
            continue
        word, sep, num = line.partition(',')
        word, num = word.strip(), num.strip()
        if not sep or not num.isdigit():
            raise ResultsFormatError(line)
        try:
            check_word(word)
        except InvalidWordError:
            raise ResultsFormatError(line) from None
        results.append(Solution(word, int(num)))
    return results


def load_results(filepath: str) -> List[Solution]:
    """Load a results file."""
    with open(filepath, 'r') as f:
        return parse_results(f)


def compute_stats(results: List[Solution]) -> ResultStats:
    """Summarize results: count, total, first min and first max, histogram."""
    if not results:
        raise ResultsFormatError("(no results)")

    best = worst = results[0]
    total = 0
    for s in results:
        total += s.guesses
        if s.guesses < best.guesses:
            best = s
        if s.guesses > worst.guesses:
            worst = s

    histogram = [0] * (worst.guesses + 1)
    for s in results:
        histogram[s.guesses] += 1

    return ResultStats(len(results), total, best, worst, histogram)


def format_stats(stats: ResultStats) -> List[str]:
    """Render stats as report lines."""
    lines = [
        f"Number of results: {stats.count}",
        f'Min guesses: {stats.min.guesses} for "{stats.min.word}"',
        f'Max guesses: {stats.max.guesses} for e.g. "{stats.max.word}"',
        f"Mean guesses: {stats.mean:.2f}",
        "Histogram stats:",
    ]
    lines.extend(f"{n}, {count}" for n, count in enumerate(stats.histogram))
    return lines
