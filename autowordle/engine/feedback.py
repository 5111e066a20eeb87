"""
Wordle-style feedback for a single (guess, secret) pair.

Conventions (pattern code in brackets):
  - Verdict.CORRECT ['G'] : correct letter in the correct position
  - Verdict.PRESENT ['Y'] : letter occurs in the secret, but not here
  - Verdict.ABSENT  ['-'] : letter not present (or present fewer times than guessed)

Algorithm (two-pass, duplicate-safe):
  1) First pass marks every exact positional match CORRECT and counts how many
     of each letter those matches consumed.
  2) Second pass walks the remaining positions left to right. A letter is
     PRESENT only while the secret still holds more copies of it than have been
     consumed; otherwise it is ABSENT.

So a letter occurring once in the secret but twice in the guess gets exactly one
non-ABSENT verdict.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Iterable, Tuple

from .errors import InvalidWordError


class Verdict(Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "-"

    @property
    def code(self) -> str:
        return self.value


# One verdict per position; produced fresh for each guess.
Feedback = Tuple[Verdict, ...]


def evaluate(guess: str, secret: str) -> Feedback:
    """
    Compute the verdict sequence for `guess` against `secret`.

    Both words are expected in canonical (lowercase, trimmed) form.

    Raises:
      InvalidWordError if the lengths differ.

    Examples:
      pattern_string(evaluate("slate", "crane")) -> "--G-G"
      pattern_string(evaluate("belle", "level")) -> "-GYYY"
    """
    if len(guess) != len(secret):
        raise InvalidWordError(
            f"guess and secret must be the same length: {guess!r} vs {secret!r}")

    n = len(guess)
    verdicts = [Verdict.ABSENT] * n
    need = Counter(secret)
    consumed: Counter = Counter()

    # Pass 1: exact matches
    for i in range(n):
        if guess[i] == secret[i]:
            verdicts[i] = Verdict.CORRECT
            consumed[guess[i]] += 1

    # Pass 2: misplaced letters, capped by the secret's multiplicity
    for i, ch in enumerate(guess):
        if verdicts[i] is Verdict.CORRECT:
            continue
        if need[ch] > consumed[ch]:
            verdicts[i] = Verdict.PRESENT
            consumed[ch] += 1

    return tuple(verdicts)


def is_solved(feedback: Iterable[Verdict]) -> bool:
    return all(v is Verdict.CORRECT for v in feedback)


def pattern_string(feedback: Iterable[Verdict]) -> str:
    """Feedback -> compact 'G'/'Y'/'-' string, e.g. '--G-G'."""
    return "".join(v.code for v in feedback)


def parse_pattern(pattern: str) -> Feedback:
    """Inverse of pattern_string(); raises ValueError on unknown codes."""
    return tuple(Verdict(ch) for ch in pattern.strip().upper())
