"""
Naive strategy (expected information gain).

goodness(g) = sum over all masks of -p*log2(p), i.e. the Shannon entropy of
the outcome distribution induced by guessing g, with p weighted by raw
word frequencies.
"""

from __future__ import annotations

from typing import Iterable

from wordle_solve.engine import Weighting
from .base import register


@register("naive", name="Naive (Expected Information)", opening="sugar",
          weighting=Weighting.RAW)
def expected_information(information: Iterable[float]) -> float:
    return sum(information)
