"""
Random Consistent strategy.

Strategy:
  - Open with one of the high-coverage openers, chosen uniformly at random.
  - Afterwards choose uniformly at random among the unused words that are
    consistent with all feedback so far (flat scoring + random tie-break).

Notes:
  - Deterministic across runs with the same seed (via CandidateSelector.rng).
  - Baseline to compare the heuristic against; it does no ranking.
"""

from __future__ import annotations

from .base import StrategyConfig, register
from .scorers import flat_score

RANDOM_CONSISTENT = register(StrategyConfig(
    id="random_consistent",
    name="Random Consistent",
    scorer=flat_score,
    tie_break="random",
))
