"""
Game loop primitives.

- Session:   one self-played game (one hidden secret) with fresh constraints and
             used-word set. Plays until solved; a StuckError ends it early.
- solve:     convenience wrapper, Session(...).play(); StuckError propagates.
- run_case:  like solve, but records a StuckError as a failed result.
- run_batch: run many secrets back to back, each in its own fresh session.
- summarize: aggregate a batch into success rate, averages and distribution.

The 6-guess budget is a success criterion, not a stop condition: a session
keeps guessing after the sixth miss and only flags the budget as exceeded.
The selector's relaxation stages and the finite word list guarantee an end.
"""

from __future__ import annotations

import logging
import random
import sys
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from tqdm import tqdm

from autowordle.engine import (
    ConstraintState, Feedback, StuckError, evaluate, is_solved, normalize_words,
    pattern_string, require_word,
)
from autowordle.solvers import CandidateSelector, create_solver

log = logging.getLogger(__name__)

# Single source of truth for the success budget.
WORDLE_MAX_TURNS = 6
WORD_LENGTH = 5

# Called after every guess with (attempt, guess, feedback).
GuessCallback = Callable[[int, str, Feedback], None]


@dataclass(frozen=True)
class SessionConfig:
    enable_pacing: bool = False       # cosmetic delay before each guess
    pacing_delay: float = 0.2         # seconds
    max_guesses: int = WORDLE_MAX_TURNS
    N: int = WORD_LENGTH


@dataclass
class SolveStats:
    total_guesses: int = 0
    elapsed_ms: float = 0.0
    solved: bool = False
    failed_within_budget: bool = False   # not solved within max_guesses


@dataclass
class SessionResult:
    answer: str
    solver_id: str
    stats: SolveStats
    history: List[Tuple[str, Feedback]] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.stats.solved and not self.stats.failed_within_budget

    @property
    def stuck(self) -> bool:
        return self.error is not None

    def patterns(self) -> List[Tuple[str, str]]:
        return [(g, pattern_string(fb)) for g, fb in self.history]


class Session:
    """
    State owned by a single game: constraints, used words, history, stats.

    Nothing here is shared with other sessions; build a new Session per secret.
    """

    def __init__(
            self,
            secret: str,
            word_list: Iterable[str],
            solver: CandidateSelector,
            *,
            config: SessionConfig | None = None,
            on_guess: GuessCallback | None = None,
            sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config or SessionConfig()
        self.words = normalize_words(word_list, self.config.N)
        self.secret = require_word(secret, self.config.N)
        self.solver = solver
        self.on_guess = on_guess
        self._sleep = sleep

        self.constraints = ConstraintState(N=self.config.N)
        self.used_words: set = set()
        self.history: List[Tuple[str, Feedback]] = []
        self.stats = SolveStats()
        self._t0: float | None = None

    @property
    def attempt(self) -> int:
        return len(self.history)

    def step(self) -> Tuple[str, Feedback]:
        """Make one guess, score it and fold the feedback into the constraints."""
        if self._t0 is None:
            self._t0 = time.perf_counter()
        if self.config.enable_pacing:
            self._sleep(self.config.pacing_delay)

        attempt = self.attempt + 1
        guess = self.solver.choose_next_guess(
            self.words, self.constraints, self.used_words, attempt)
        feedback = evaluate(guess, self.secret)
        self.constraints.apply_feedback(guess, feedback)
        self.history.append((guess, feedback))

        log.debug("[%s] guess %d: %s %s | %s", self.secret, attempt, guess,
                  pattern_string(feedback), self.constraints.describe())
        if self.on_guess is not None:
            self.on_guess(attempt, guess, feedback)
        return guess, feedback

    def play(self) -> SessionResult:
        """
        Guess until solved.

        Raises:
          StuckError when the selector cannot produce another word.
        """
        while True:
            _, feedback = self.step()
            if is_solved(feedback):
                self.finish(solved=True)
                return self.result()

    def finish(self, *, solved: bool) -> None:
        elapsed = 0.0 if self._t0 is None else time.perf_counter() - self._t0
        self.stats.total_guesses = self.attempt
        self.stats.elapsed_ms = elapsed * 1000.0
        self.stats.solved = solved
        self.stats.failed_within_budget = not solved or self.attempt > self.config.max_guesses

    def result(self, error: str | None = None) -> SessionResult:
        return SessionResult(
            answer=self.secret,
            solver_id=self.solver.id,
            stats=self.stats,
            history=list(self.history),
            error=error,
        )


def solve(
        secret: str,
        word_list: Iterable[str],
        solver: CandidateSelector,
        *,
        config: SessionConfig | None = None,
        seed: int | None = None,
        on_guess: GuessCallback | None = None,
        sleep: Callable[[float], None] = time.sleep,
) -> SessionResult:
    """
    Self-play one game against `secret`.

    Args:
        secret:    hidden word (validated and canonicalized here)
        word_list: raw word sequence; trimmed, lowercased, length-filtered here
        solver:    a CandidateSelector (see autowordle.solvers.create_solver)
        config:    pacing and budget settings
        seed:      re-seeds the solver RNG for a reproducible session
        on_guess:  optional callback after each guess (display/logging)
        sleep:     pacing function, injectable for tests

    Raises:
        InvalidWordError / EmptyWordListError for malformed input,
        StuckError when the solver runs out of words.
    """
    solver.reset(seed)
    session = Session(secret, word_list, solver, config=config, on_guess=on_guess, sleep=sleep)
    return session.play()


def run_case(
        solver: CandidateSelector,
        secret: str,
        *,
        word_list: Iterable[str],
        config: SessionConfig | None = None,
        seed: int | None = None,
        on_guess: GuessCallback | None = None,
) -> SessionResult:
    """
    Execute one game; a StuckError becomes a failed result instead of an exception.
    """
    solver.reset(seed)
    session = Session(secret, word_list, solver, config=config, on_guess=on_guess)
    try:
        return session.play()
    except StuckError as e:
        log.warning("failed to solve %s: %s", session.secret.upper(), e)
        session.finish(solved=False)
        return session.result(error=str(e))


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def run_batch(
        solver_id: str,
        answers: Iterable[str],
        *,
        word_list: Sequence[str],
        config: SessionConfig | None = None,
        seed: int | None = None,
        sample: int | None = None,
        shuffle: bool = False,
        progress: str = "off",
) -> List[SessionResult]:
    """
    Run many secrets back-to-back with a fresh solver and session per case.

    Answers are canonicalized and deduplicated (order preserved). With
    `shuffle` the order is randomized by `seed`; `sample` keeps the first K.

    progress: "bar" (tqdm), "plain" (one stderr status line), or "off".
    """
    cfg = config or SessionConfig()
    pool = unique_preserve_order(normalize_words(answers, cfg.N))
    base_seed = 0 if seed is None else seed
    if shuffle:
        random.Random(base_seed).shuffle(pool)
    if sample is not None:
        pool = pool[:sample]

    total = len(pool)
    iterator = tqdm(pool, ncols=80, desc=solver_id, unit="game") if progress == "bar" else pool
    start = time.time()
    last_print = 0.0

    out: List[SessionResult] = []
    for idx, secret in enumerate(iterator, start=1):
        # Fresh selector per case: no RNG or used-word leakage between sessions.
        solver = create_solver(solver_id, seed=base_seed + idx)
        out.append(run_case(solver, secret, word_list=word_list, config=cfg))

        if progress == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{solver_id}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if progress == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()
    return out


@dataclass
class BatchSummary:
    attempted: int = 0
    solved: int = 0
    over_budget: int = 0       # solved, but in more than max_guesses
    stuck: int = 0             # ended in a StuckError
    avg_guesses: float = 0.0   # over solved sessions
    avg_time_ms: float = 0.0   # over solved sessions
    distribution: Dict[int, int] = field(default_factory=dict)

    @property
    def failed_within_budget(self) -> int:
        return self.over_budget + self.stuck

    @property
    def success_rate(self) -> float:
        if not self.attempted:
            return 0.0
        return (self.attempted - self.failed_within_budget) / self.attempted


def summarize(results: Sequence[SessionResult]) -> BatchSummary:
    solved = [r for r in results if r.stats.solved]
    dist = Counter(r.stats.total_guesses for r in solved)
    n = len(solved)
    return BatchSummary(
        attempted=len(results),
        solved=n,
        over_budget=sum(1 for r in solved if r.stats.failed_within_budget),
        stuck=sum(1 for r in results if r.stuck),
        avg_guesses=(sum(r.stats.total_guesses for r in solved) / n) if n else 0.0,
        avg_time_ms=(sum(r.stats.elapsed_ms for r in solved) / n) if n else 0.0,
        distribution=dict(sorted(dist.items())),
    )
