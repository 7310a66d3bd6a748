"""
Candidate pool: the words still consistent with all feedback so far.

Each entry carries a weight derived from its dictionary frequency, either
the raw count or a saturating sigmoid f / (f + K) that damps very common
words. The pool starts equal to the dictionary and only ever shrinks;
`reset()` restores the initial snapshot without reloading anything.

Iteration follows lexicographic word order, so scoring ties are broken the
same way on every run.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Tuple, Union

from .constraints import Guess, filter_candidates
from .words import Word, as_word

log = logging.getLogger(__name__)

# Frequency at which the sigmoid weight reaches 0.5
SIGMOID_K = 10_000.0

Weight = Union[int, float]


class Weighting(str, Enum):
    RAW = "raw"
    SIGMOID = "sigmoid"


def sigmoid_weight(freq: float, k: float = SIGMOID_K) -> float:
    """f / (f + k); 0 for a zero frequency."""
    freq = float(freq)
    return freq / (freq + k) if freq + k else 0.0


def weigh(freq: int, weighting: Weighting, k: float = SIGMOID_K) -> Weight:
    if weighting is Weighting.SIGMOID:
        return sigmoid_weight(freq, k)
    return freq


class CandidatePool:
    """
    Mapping word -> weight, shrunk monotonically by `apply`.

    Args:
      frequencies : word -> non-negative integer frequency (the dictionary)
      weighting   : how frequencies become weights
      k           : sigmoid constant (ignored for raw weights)
    """

    def __init__(self, frequencies: Mapping[str, int],
                 weighting: Weighting = Weighting.RAW, *, k: float = SIGMOID_K):
        self.weighting = Weighting(weighting)
        initial: Dict[Word, Weight] = {}
        for w, freq in sorted((as_word(w), f) for w, f in frequencies.items()):
            initial[w] = weigh(freq, self.weighting, k)
        self._initial = MappingProxyType(initial)
        self._remaining: Dict[Word, Weight] = dict(initial)

    @property
    def initial(self) -> Mapping[Word, Weight]:
        """Read-only view of the full dictionary weights."""
        return self._initial

    @property
    def is_fresh(self) -> bool:
        return len(self._remaining) == len(self._initial)

    def apply(self, guess: Guess) -> int:
        """Drop every word inconsistent with `guess`; return how many were removed."""
        before = len(self._remaining)
        self._remaining = filter_candidates(self._remaining, [guess])
        removed = before - len(self._remaining)
        log.debug("%s removed %d of %d candidates", guess, removed, before)
        return removed

    def reset(self) -> None:
        self._remaining = dict(self._initial)

    def total_weight(self) -> Weight:
        return sum(self._remaining.values())

    def items(self) -> Iterator[Tuple[Word, Weight]]:
        return iter(self._remaining.items())

    def weight(self, word: str) -> Weight:
        return self._remaining[as_word(word)]

    def snapshot(self) -> Dict[Word, Weight]:
        return dict(self._remaining)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._remaining)

    def __len__(self) -> int:
        return len(self._remaining)

    def __contains__(self, word: object) -> bool:
        return word in self._remaining

    def __repr__(self) -> str:
        return (f"CandidatePool({len(self._remaining)}/{len(self._initial)} words, "
                f"weighting={self.weighting.value})")
