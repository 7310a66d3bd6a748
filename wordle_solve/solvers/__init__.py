from __future__ import annotations
from typing import List, Mapping
from .base import (BaseSolver, EmptyCandidatePoolError, REGISTRY, SolverState,
                   SolverStateError, Strategy, register)
from .entropy import InformationSolver

from . import naive  # noqa: F401
from . import minimax  # noqa: F401


def create_solver(strategy_id: str, dictionary: Mapping[str, int]) -> InformationSolver:
    """
    Factory: instantiate a solver for a registered strategy id.
    """
    try:
        strategy = REGISTRY[strategy_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {strategy_id}. Available: {sorted(REGISTRY.keys())}") from e
    return InformationSolver(strategy, dictionary)


def get_solver_ids() -> List[str]:
    """
    Return all registered strategy ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseSolver", "EmptyCandidatePoolError", "InformationSolver", "REGISTRY",
    "SolverState", "SolverStateError", "Strategy", "create_solver", "get_solver_ids",
    "register",
]
