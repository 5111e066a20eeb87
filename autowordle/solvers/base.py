from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from autowordle.engine import ConstraintState

# A scorer ranks a candidate against the current constraints; higher is better.
Scorer = Callable[[str, ConstraintState], int]

# High-coverage opening words.
DEFAULT_OPENERS: Tuple[str, ...] = (
    "slate", "crane", "soare", "raise", "arise", "audio", "adieu", "react",
)


@dataclass(frozen=True)
class StrategyConfig:
    """
    Everything that distinguishes one guessing strategy from another.

    The selection procedure itself is shared (see selector.CandidateSelector);
    a strategy only picks the openers, the optional second-guess probes, how
    candidates are ranked, and when constraints start being relaxed.
    """
    id: str
    name: str
    scorer: Scorer
    openers: Tuple[str, ...] = DEFAULT_OPENERS
    probes: Tuple[str, ...] = ()       # empty: no second-guess specialization
    probe_skip_known: int = 3          # skip the probe after this many G/Y verdicts on guess 1
    tie_break: str = "first"           # "first" (list order) or "random"
    relax_after: int = 8               # attempt from which only greens/yellows are enforced
    unconstrained_after: int = 10      # attempt from which any unused word is allowed
    version: str = "1.0.0"

    def __post_init__(self):
        if self.tie_break not in ("first", "random"):
            raise ValueError(f"tie_break must be 'first' or 'random', got {self.tie_break!r}")
        if self.unconstrained_after < self.relax_after:
            raise ValueError("unconstrained_after must not precede relax_after")


# ---- Global strategy registry ----
REGISTRY: Dict[str, StrategyConfig] = {}


def register(config: StrategyConfig) -> StrategyConfig:
    """Add a strategy to REGISTRY under its `id`."""
    if not config.id:
        raise ValueError("strategy must define a non-empty `id`")
    if config.id in REGISTRY:
        raise ValueError(f"Duplicate solver id: {config.id}")
    REGISTRY[config.id] = config
    return config


def make_rng(seed: int | None = None, rng: random.Random | None = None) -> random.Random:
    if rng is not None:
        return rng
    return random.Random(seed)
