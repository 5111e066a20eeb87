"""
Candidate scoring functions.

heuristic_score:
  - +50 for each position holding a known-present letter where no letter has
    been fixed yet (tries the yellow letters in new slots).
  - While fewer than 3 letters are known, +1 for every occurrence of a common
    letter ("etaoinshrdlu"). This early bias fades once the word takes shape.

flat_score ranks every candidate equally, leaving the choice to the tie-break.
"""

from __future__ import annotations

from autowordle.engine import ConstraintState

COMMON_LETTERS = frozenset("etaoinshrdlu")
PRESENT_BONUS = 50
EARLY_GAME_KNOWN = 3


def flat_score(word: str, state: ConstraintState) -> int:
    return 0


def heuristic_score(word: str, state: ConstraintState) -> int:
    s = 0
    for i, ch in enumerate(word):
        if i not in state.fixed and ch in state.present:
            s += PRESENT_BONUS

    if len(state.known_letters()) < EARLY_GAME_KNOWN:
        s += sum(1 for ch in word if ch in COMMON_LETTERS)
    return s
