"""Exception types raised by the solver core."""

from typing import Optional


class WordlerError(Exception):
    """Base class for all solver errors."""


class InvalidWordError(WordlerError, ValueError):
    """A word is not exactly five lowercase letters."""

    def __init__(self, word):
        super().__init__(f"Invalid word: {word}")
        self.word = word


class InvalidHintError(WordlerError, ValueError):
    """A hint pattern is not five of 'g', 'y' or '.'."""

    def __init__(self, hint):
        super().__init__(f"Invalid hint: {hint}")
        self.hint = hint


class ExhaustedError(WordlerError, RuntimeError):
    """No candidate word is consistent with the hints."""

    def __init__(self, message: str = "No matching words found."):
        super().__init__(message)


class NotFoundError(WordlerError, RuntimeError):
    """The solve loop ran out of guesses."""

    def __init__(self, target: Optional[str], max_guesses: int):
        if target is None:
            super().__init__(f"Answer was not found in {max_guesses} tries.")
        else:
            super().__init__(f'Answer "{target}" was not found in {max_guesses} tries.')
        self.target = target
        self.max_guesses = max_guesses


class ResultsFormatError(WordlerError, ValueError):
    """A results file line could not be parsed."""

    def __init__(self, line: str):
        super().__init__(f'Bad results data: "{line}"')
        self.line = line
