"""
Game harness core primitives.

- run_case:  play one puzzle (one hidden answer) with a given solver.
- play:      same, reduced to "solved in n rounds" or None.
- run_batch: play many puzzles in sequence (optionally a prefix of the list).

The turn budget defaults to Wordle's 6 but may be changed per call.
These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or tests without changes.
"""

from __future__ import annotations
import logging
import time
from typing import Collection, Dict, List, Optional, Sequence

from tqdm import tqdm

from wordle_solve.engine import Guess, as_word, check, format_mask, validate_guess
from wordle_solve.solvers import BaseSolver

log = logging.getLogger(__name__)

# Single source of truth for the Wordle turn budget.
WORDLE_MAX_TURNS = 6


class InvalidGuessError(ValueError):
    """A guess is not a word of the dictionary in play."""


def _assert_turns(max_turns: int) -> None:
    """Guardrail: a game needs at least one turn."""
    if not isinstance(max_turns, int) or max_turns < 1:
        raise ValueError(f"max_turns must be a positive integer; got {max_turns!r}")


def run_case(
        solver: BaseSolver,
        answer: str,
        *,
        max_turns: int = WORDLE_MAX_TURNS,
        allowed: Optional[Collection[str]] = None,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:    an object implementing BaseSolver (guess(history), reset())
        answer:    the hidden word for this case
        max_turns: turn budget (Wordle uses 6)
        allowed:   if given, every guess must be a member (e.g. the Dictionary)

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, mask notation)]), answer (str)
    """
    _assert_turns(max_turns)
    answer = as_word(answer)

    # Each game starts from the full dictionary
    solver.reset()

    history: List[Guess] = []

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        word = solver.guess(history)
        if allowed is not None and not validate_guess(word, allowed):
            raise InvalidGuessError(f"{solver.id} guessed {word!r}, which is not in the dictionary")

        guess = Guess(as_word(word), check(answer, word))
        log.debug("Guessed: %s", guess)
        history.append(guess)

        if guess.word == answer:
            break

    success = bool(history) and history[-1].word == answer
    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": dt,
        "history": [(g.word, format_mask(g.mask)) for g in history],
    }


def play(solver: BaseSolver, answer: str, *, max_turns: int = WORDLE_MAX_TURNS) -> Optional[int]:
    """Number of rounds the solver needed to find `answer`, or None if it ran out."""
    r = run_case(solver, answer, max_turns=max_turns)
    return r["guesses"] if r["success"] else None


def run_batch(
        solver: BaseSolver,
        answers: Sequence[str],
        *,
        max_turns: int = WORDLE_MAX_TURNS,
        allowed: Optional[Collection[str]] = None,
        limit: Optional[int] = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Run many cases back-to-back. If `limit` is provided, only the first K
    answers are used to speed up quick experiments.

    Failures are logged and recorded (success=False); deciding whether a
    failure is fatal is left to the caller.
    """
    _assert_turns(max_turns)

    pool = list(answers)
    if limit is not None:
        pool = pool[:limit]

    out: List[Dict] = []
    for ans in tqdm(pool, desc="Running", unit="game", ncols=80, disable=not progress):
        r = run_case(solver, ans, max_turns=max_turns, allowed=allowed)
        r["solver_id"] = solver.id
        if not r["success"]:
            log.warning("%s failed to guess %s in %d turns", solver.id, ans, max_turns)
        out.append(r)
    return out
