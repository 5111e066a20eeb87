"""
Candidate selector: decides the next guess for a session.

Selection order (first one that yields a word wins):
  1. attempt 1          -> an opener (random among configured openers present in
                           the word list; a single opener makes it deterministic)
  2. attempt 2          -> a fixed high-diversity probe, unless the first
                           guess got `probe_skip_known` greens + yellows
  3. any attempt        -> best-scoring word satisfying every constraint
  4. attempt >= relax_after
                        -> best-scoring word matching greens and yellows only;
     attempt >= unconstrained_after
                        -> best-scoring unused word, no constraints at all
  5. nothing left       -> StuckError

Every returned word is recorded in `used_words` before it is returned, so a
session never proposes the same word twice.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, List, MutableSet, Sequence

from autowordle.engine import (
    ConstraintState, StuckError, matches, matches_greens_and_yellows,
)
from .base import StrategyConfig, make_rng

log = logging.getLogger(__name__)


class CandidateSelector:
    def __init__(self, config: StrategyConfig, *, seed: int | None = None,
                 rng: random.Random | None = None):
        self.config = config
        self.rng = make_rng(seed, rng)

    @property
    def id(self) -> str:
        return self.config.id

    def reset(self, seed: int | None = None) -> None:
        """Re-seed for a new session (None keeps the current RNG stream)."""
        if seed is not None:
            self.rng.seed(seed)

    # ---- public API ----

    def choose_next_guess(
            self,
            word_list: Sequence[str],
            constraints: ConstraintState,
            used_words: MutableSet[str],
            attempt: int,
    ) -> str:
        """
        Pick the next guess and record it in `used_words`.

        Args:
          word_list   : canonical words of length constraints.N, list order matters
          constraints : the session's accumulated constraints
          used_words  : words already guessed this session (mutated)
          attempt     : 1-based number of the guess being chosen

        Raises:
          StuckError if no unused word can be produced at this attempt.
        """
        word = self._pick(word_list, constraints, used_words, attempt)
        used_words.add(word)
        return word

    # ---- stages ----

    def _pick(self, word_list, constraints, used_words, attempt) -> str:
        cfg = self.config

        if attempt == 1:
            word = self._opener(word_list, used_words)
            if word:
                log.debug("attempt %d: opener %s", attempt, word)
                return word

        if attempt == 2 and cfg.probes:
            if constraints.last_hits >= cfg.probe_skip_known:
                log.debug("attempt %d: first guess got %d hits, skipping probe",
                          attempt, constraints.last_hits)
            else:
                word = self._probe(word_list, used_words)
                if word:
                    log.debug("attempt %d: probe %s", attempt, word)
                    return word

        pool = self._pool(word_list, used_words, constraints.N)

        cands = [w for w in pool if matches(w, constraints)]
        if cands:
            return self._best(cands, constraints)

        if attempt >= cfg.relax_after:
            cands = [w for w in pool if matches_greens_and_yellows(w, constraints)]
            if cands:
                log.debug("attempt %d: relaxed to greens/yellows (%d candidates)",
                          attempt, len(cands))
                return self._best(cands, constraints)

        if attempt >= cfg.unconstrained_after and pool:
            log.debug("attempt %d: all constraints dropped (%d unused words)",
                      attempt, len(pool))
            return self._best(pool, constraints)

        summary = constraints.describe()
        log.warning("stuck at attempt %d: %s, used=%d", attempt, summary, len(used_words))
        raise StuckError(
            f"no candidate left at attempt {attempt} ({summary}, used words: {len(used_words)})",
            attempt=attempt, constraints=summary,
        )

    def _pool(self, word_list: Sequence[str], used_words, N: int) -> List[str]:
        return [w for w in word_list if len(w) == N and w not in used_words]

    def _opener(self, word_list: Sequence[str], used_words) -> str | None:
        words = set(word_list)
        available = [w for w in self.config.openers if w in words and w not in used_words]
        if not available:
            return None
        if len(available) == 1:
            return available[0]
        return available[self.rng.randrange(len(available))]

    def _probe(self, word_list: Sequence[str], used_words) -> str | None:
        # Prefer the probe sharing the fewest letters with what was already tried.
        words = set(word_list)
        seen = set("".join(used_words))
        best_overlap = None
        best = None
        for p in self.config.probes:
            if p not in words or p in used_words:
                continue
            overlap = len(set(p) & seen)
            if best_overlap is None or overlap < best_overlap:
                best_overlap, best = overlap, p
        return best

    def _best(self, cands: List[str], constraints: ConstraintState) -> str:
        score: Callable[[str, ConstraintState], int] = self.config.scorer
        best_score = None
        best: List[str] = []
        for w in cands:
            s = score(w, constraints)
            if best_score is None or s > best_score:
                best_score = s
                best = [w]
            elif s == best_score:
                best.append(w)

        if self.config.tie_break == "random":
            return best[self.rng.randrange(len(best))]
        return best[0]
