"""
Externally judged play (e.g. the daily puzzle, where nobody knows the answer).

The session owns the history; feedback comes from outside as notation text
("wcmww"). Invalid notation yields None so the caller can re-prompt; the
session never retries on its own.
"""

from __future__ import annotations

import logging
from typing import Collection, List, Optional

from wordle_solve.engine import Guess, Word, validate_guess
from wordle_solve.solvers import BaseSolver

from .core import InvalidGuessError

log = logging.getLogger(__name__)


class GameSession:
    def __init__(self, dictionary: Collection[str]):
        self.dictionary = dictionary
        self.history: List[Guess] = []

    @property
    def turns(self) -> int:
        return len(self.history)

    @property
    def solved(self) -> bool:
        return bool(self.history) and self.history[-1].is_correct()

    def recommend(self, solver: BaseSolver) -> Word:
        """Ask `solver` for the next word given the feedback recorded so far."""
        return solver.guess(self.history)

    def validate_guess(self, word: str) -> bool:
        return validate_guess(word, self.dictionary)

    def record(self, word: str, feedback: str) -> Optional[Guess]:
        """
        Append the feedback received for `word`.

        Returns the recorded Guess, or None if `feedback` is not valid notation.
        Raises InvalidGuessError if `word` is not in the dictionary.
        """
        if not self.validate_guess(word):
            raise InvalidGuessError(f"{word!r} is not in the dictionary")

        guess = Guess.parse(word, feedback)
        if guess is None:
            log.debug("rejected feedback %r for %s", feedback, word)
            return None

        log.debug("Guessed: %s", guess)
        self.history.append(guess)
        return guess

    def reset(self) -> None:
        self.history.clear()
