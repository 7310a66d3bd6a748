from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Sequence

from wordle_solve.engine import Guess, Weighting, Word

# Maps the 243 per-mask information values of one guess to a single score
GoodnessFn = Callable[[Iterable[float]], float]


class SolverStateError(RuntimeError):
    """The history passed to a solver contradicts what it has already seen."""


class EmptyCandidatePoolError(RuntimeError):
    """No dictionary word is consistent with the history."""


class SolverState(str, Enum):
    FRESH = "fresh"          # pool == dictionary, expects an empty history
    NARROWED = "narrowed"    # pool filtered by at least one guess


@dataclass(frozen=True)
class Strategy:
    id: str
    name: str
    opening: Word
    weighting: Weighting
    goodness: GoodnessFn


# ---- Global strategy registry ----
REGISTRY: Dict[str, Strategy] = {}


def register(sid: str, *, name: str, opening: str,
             weighting: Weighting = Weighting.RAW) -> Callable[[GoodnessFn], GoodnessFn]:
    """
    Decorator: @register("id", ...) on a goodness function adds a Strategy
    built from it to REGISTRY.
    """
    if not sid:
        raise ValueError("strategy id must be non-empty")

    def deco(fn: GoodnessFn) -> GoodnessFn:
        if sid in REGISTRY:
            raise ValueError(f"Duplicate strategy id: {sid}")
        REGISTRY[sid] = Strategy(sid, name, Word(opening), Weighting(weighting), fn)
        return fn

    return deco


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    The contract the game harness relies on:
      guess(history) -> Word   next word to play given all feedback so far
      reset()                  back to the fresh-dictionary state
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def guess(self, history: Sequence[Guess]) -> Word:
        raise NotImplementedError("Override in subclass")

    def reset(self) -> None:
        raise NotImplementedError("Override in subclass")
