# apps/cli/solve.py
"""
Interactive helper for a puzzle whose answer you don't know (e.g. the daily one).

Each round the solver suggests a word; you type the word you actually played
(blank = the suggestion) and the feedback you got, as five letters:
    c = correct, m = misplaced, w = wrong      e.g.  wwmcw

Usage:
    python -m apps.cli.solve --solver naive --dictionary path/to/dictionary.txt
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable

from wordle_solve.datasets import SAMPLE_DICTIONARY, load_dictionary
from wordle_solve.harness import WORDLE_MAX_TURNS, GameSession
from wordle_solve.solvers import BaseSolver, EmptyCandidatePoolError, create_solver, get_solver_ids


def play_interactive(
        solver: BaseSolver,
        session: GameSession,
        *,
        max_turns: int = WORDLE_MAX_TURNS,
        ask: Callable[[str], str] = input,
        say: Callable[[str], None] = print,
) -> bool:
    """
    Run the prompt loop. Returns True once the user reports all-correct.

    Invalid words and feedback are re-prompted; nothing else is retried.
    """
    while session.turns < max_turns:
        suggestion = session.recommend(solver)
        say(f"Guess: {suggestion}")

        while True:
            played = ask(f"Played [{suggestion}]: ").strip() or suggestion
            if session.validate_guess(played):
                break
            say(f"{played!r} is not in the dictionary")

        while True:
            guess = session.record(played, ask("Correctness: "))
            if guess is not None:
                break
            say("Enter five of c/m/w, e.g. wwmcw")

        if guess.is_correct():
            say("You win!!")
            return True

    say("Out of guesses!")
    return False


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordle-solve: interactive suggestions")
    ap.add_argument("--solver", default="naive", choices=get_solver_ids(), help="solver id")
    ap.add_argument("--dictionary", default=str(SAMPLE_DICTIONARY),
                    help="path to the dictionary (`word frequency` per line)")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS, help="turn budget")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    dictionary = load_dictionary(args.dictionary)
    solver = create_solver(args.solver, dictionary)
    session = GameSession(dictionary)

    try:
        solved = play_interactive(solver, session, max_turns=args.max_turns)
    except EmptyCandidatePoolError as e:
        ap.exit(2, f"No word fits that feedback: {e}\n")
    except (EOFError, KeyboardInterrupt):
        ap.exit(130, "\n")
    ap.exit(0 if solved else 1)


if __name__ == "__main__":
    main()
