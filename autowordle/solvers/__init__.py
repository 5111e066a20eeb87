from __future__ import annotations

import random
from typing import List

from .base import REGISTRY, StrategyConfig, register
from .selector import CandidateSelector

from . import random_consistent  # noqa: F401
from . import heuristic  # noqa: F401


def create_solver(solver_id: str, *, seed: int | None = None,
                  rng: random.Random | None = None) -> CandidateSelector:
    """
    Factory: build a CandidateSelector for a registered strategy id.
    """
    try:
        config = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return CandidateSelector(config, seed=seed, rng=rng)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["CandidateSelector", "StrategyConfig", "REGISTRY", "register",
           "create_solver", "get_solver_ids"]
