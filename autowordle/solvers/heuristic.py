"""
Heuristic strategy.

Turn 1: random high-coverage opener.
Turn 2: a letter-diverse probe word chosen to avoid letters already tried,
        unless the opener already scored 3+ greens/yellows.
Then:   rank consistent candidates with heuristic_score (yellow relocation
        bonus plus an early common-letter bias); first in list order wins ties.
Late:   relax to greens/yellows from attempt 8, drop everything at attempt 10.

`heuristic_fixed` is the same strategy with a single opener, which makes a
whole session deterministic.
"""

from __future__ import annotations

from dataclasses import replace

from .base import StrategyConfig, register
from .scorers import heuristic_score

DEFAULT_PROBES = ("pudgy", "mound", "chirp", "nymph", "bulky")

HEURISTIC = register(StrategyConfig(
    id="heuristic",
    name="Heuristic (probe + yellow relocation)",
    scorer=heuristic_score,
    probes=DEFAULT_PROBES,
    tie_break="first",
    relax_after=8,
    unconstrained_after=10,
))

HEURISTIC_FIXED = register(replace(
    HEURISTIC,
    id="heuristic_fixed",
    name="Heuristic, fixed opener",
    openers=("slate",),
))
