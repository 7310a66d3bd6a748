"""
Information-theoretic solver (shared skeleton for every strategy).

Main idea:
  - Keep a CandidatePool of dictionary words consistent with the history,
    folding in each new Guess once (the pool already reflects older ones).
  - For each candidate g and each of the 243 masks m, let p be the share of
    the pool's total weight that would survive "g was played and got m".
    Its Shannon information is -p*log2(p) (0 when p == 0).
  - The strategy's goodness function turns those 243 values into a score;
    the word with the strictly greatest score is played.

Partitioning:
  - `Guess(g, m).matches(w)` holds iff `check(w, g) == m`, so bucketing the
    pool by `check(w, g)` gives exactly the per-mask sums, in one pass over
    the pool instead of 243. Bucket sums accumulate in pool order and the
    information values come out in `permutations()` order.

Tie-break:
  - First word encountered wins. The pool iterates in lexicographic order,
    so this is the alphabetically smallest of the tied words.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from math import log2
from typing import Dict, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

from wordle_solve.engine import SIGMOID_K, CandidatePool, Guess, Mask, Word, check, permutations
from wordle_solve.engine.pool import Weight
from .base import BaseSolver, EmptyCandidatePoolError, SolverState, SolverStateError, Strategy

log = logging.getLogger(__name__)


def information(p: float) -> float:
    """Shannon information -p*log2(p) of one outcome; 0 for an impossible one."""
    if p == 0.0:
        return 0.0
    return p * -log2(p)


def mask_information(guess: Word, candidates: Iterable[Tuple[Word, Weight]],
                     total: Weight) -> Iterator[float]:
    """
    Yield the information of each of the 243 masks, in `permutations()` order,
    if `guess` were played against `candidates`.
    """
    buckets: Dict[Mask, Weight] = defaultdict(int)
    for w, weight in candidates:
        buckets[check(w, guess)] += weight

    for mask in permutations():
        left = buckets.get(mask, 0)
        # A weightless pool carries no information about any outcome
        p = left / total if total else 0.0
        yield information(p)


class InformationSolver(BaseSolver):
    """
    Solver driven by a registered Strategy (opening word, weighting, goodness).

    States:
      FRESH    : pool == dictionary; only an empty history is accepted
      NARROWED : pool filtered by the history seen so far
    `reset()` goes back to FRESH.
    """
    version = "1.0.0"

    def __init__(self, strategy: Strategy, dictionary: Mapping[str, int], *,
                 k: float = SIGMOID_K):
        self.strategy = strategy
        self.id = strategy.id
        self.name = strategy.name
        self.pool = CandidatePool(dictionary, strategy.weighting, k=k)
        self.state = SolverState.FRESH
        self._applied = 0
        if strategy.opening not in self.pool:
            log.warning("%s: opening word %r is not in the dictionary", self.id, strategy.opening)

    def reset(self) -> None:
        self.pool.reset()
        self.state = SolverState.FRESH
        self._applied = 0

    def goodness(self, word: Word, total: Optional[Weight] = None) -> float:
        """Strategy score of playing `word` against the current pool."""
        if total is None:
            total = self.pool.total_weight()
        return self.strategy.goodness(mask_information(word, self.pool.items(), total))

    def _fold(self, history: Sequence[Guess]) -> None:
        if len(history) < self._applied:
            raise SolverStateError(
                f"history has {len(history)} guesses but {self._applied} were already "
                "applied; call reset() between games")

        for g in history[self._applied:]:
            self.pool.apply(g)
        self._applied = len(history)
        self.state = SolverState.NARROWED

    def guess(self, history: Sequence[Guess]) -> Word:
        """Pick the pool word with the greatest goodness."""
        if not history:
            if self.state is SolverState.NARROWED:
                raise SolverStateError("empty history on a narrowed solver; call reset() first")
            return self.strategy.opening

        self._fold(history)
        if not self.pool:
            raise EmptyCandidatePoolError(
                f"no dictionary word is consistent with: {', '.join(map(str, history))}")

        total = self.pool.total_weight()
        best_word: Optional[Word] = None
        best = 0.0
        for word in self.pool:
            g = self.goodness(word, total)
            if best_word is None or g > best:
                best_word, best = word, g

        log.debug("%s: %d candidates left, playing %s (goodness %.4f)",
                  self.id, len(self.pool), best_word, best)
        return best_word
