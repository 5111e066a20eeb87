"""
Constraint store: everything learned from the feedback seen so far.

A ConstraintState is owned by exactly one solving session. After each guess
the session calls `apply_feedback(guess, feedback)`; solvers then test words
with `matches` (all constraints) or `matches_greens_and_yellows` (fixed and
present letters only, used when relaxing).

Double letters: an ABSENT verdict only blacklists a letter globally when no
other copy of it in the same guess came back CORRECT or PRESENT. Otherwise it
just rules the letter out at that one position. Guessing "sleep" against a
secret with a single 'e' must not ban 'e'.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Set

from .feedback import Feedback, Verdict

WORD_LENGTH = 5


@dataclass
class ConstraintState:
    N: int = WORD_LENGTH
    fixed: Dict[int, str] = field(default_factory=dict)          # position -> letter
    present: Set[str] = field(default_factory=set)               # somewhere, unplaced
    absent: Set[str] = field(default_factory=set)                # nowhere
    exclusions: Dict[int, Set[str]] = field(default_factory=dict)  # position -> not here
    last_hits: int = 0                                           # CORRECT or PRESENT in the latest guess

    def apply_feedback(self, guess: str, feedback: Sequence[Verdict]) -> "ConstraintState":
        """Fold one (guess, feedback) pair into the state, in place. Returns self."""
        self.last_hits = sum(1 for v in feedback if v is not Verdict.ABSENT)
        for i, (ch, verdict) in enumerate(zip(guess, feedback)):
            if verdict is Verdict.CORRECT:
                self.fixed[i] = ch
                self.present.discard(ch)
            elif verdict is Verdict.PRESENT:
                self.present.add(ch)
                self.exclusions.setdefault(i, set()).add(ch)
            elif _accounted_elsewhere(ch, guess, feedback):
                self.exclusions.setdefault(i, set()).add(ch)
            else:
                self.absent.add(ch)
        return self

    def known_letters(self) -> Set[str]:
        return self.present | set(self.fixed.values())

    def describe(self) -> str:
        greens = "".join(self.fixed.get(i, "_") for i in range(self.N))
        excl = ", ".join(f"{i}:{''.join(sorted(s))}" for i, s in sorted(self.exclusions.items()))
        return (f"greens={greens} yellows={''.join(sorted(self.present)) or '-'} "
                f"greys={''.join(sorted(self.absent)) or '-'} exclusions=[{excl}]")


def _accounted_elsewhere(letter: str, guess: str, feedback: Sequence[Verdict]) -> bool:
    # Is some copy of `letter` in this guess CORRECT or PRESENT?
    return any(
        g == letter and v is not Verdict.ABSENT
        for g, v in zip(guess, feedback)
    )


def apply_feedback(guess: str, feedback: Feedback, state: ConstraintState) -> ConstraintState:
    return state.apply_feedback(guess, feedback)


def matches(word: str, state: ConstraintState) -> bool:
    """True if `word` satisfies every constraint in `state`."""
    if not matches_greens_and_yellows(word, state):
        return False
    if any(ch in state.absent for ch in word):
        return False
    for i, banned in state.exclusions.items():
        if word[i] in banned:
            return False
    return True


def matches_greens_and_yellows(word: str, state: ConstraintState) -> bool:
    """Relaxed predicate: fixed positions and present letters only."""
    for i, ch in state.fixed.items():
        if word[i] != ch:
            return False
    return all(ch in word for ch in state.present)


def filter_candidates(
        words: Iterable[str],
        state: ConstraintState,
        used: Iterable[str] = (),
        N: int = WORD_LENGTH,
) -> List[str]:
    """
    Keep words (length == N, not yet used) that satisfy `state`.

    Args:
      words : canonical words, in list order
      state : constraints accumulated so far
      used  : words already guessed this session
      N     : expected word length

    Returns:
      List[str] of candidates, order preserved as in `words`.
    """
    used_set = used if isinstance(used, (set, frozenset)) else set(used)
    return [
        w for w in words
        if len(w) == N and w not in used_set and matches(w, state)
    ]
