"""
Minimax strategy (worst-case information gain).

goodness(g) = the smallest information value among the masks that can
actually occur. Values at or below machine epsilon (impossible outcomes,
and the certain outcome when one word is left) are skipped; if nothing
remains the score is +inf.

Weights are sigmoid-damped frequencies, f / (f + 10000), so a handful of
very common words cannot dominate the worst case.
"""

from __future__ import annotations

import sys
from math import inf
from typing import Iterable

from wordle_solve.engine import Weighting
from .base import register


@register("minimax", name="Minimax (Worst-Case Information)", opening="lasso",
          weighting=Weighting.SIGMOID)
def worst_case_information(information: Iterable[float]) -> float:
    return min((x for x in information if x > sys.float_info.epsilon), default=inf)
