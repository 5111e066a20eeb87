"""
Exception types shared by the engine, solvers and harness.

  - WordleError        : base class for everything raised on purpose here.
  - StuckError         : the solver ran out of unused words, even with every
                         constraint relaxed. Terminal for the session.
  - InvalidWordError   : a word with the wrong length or non a-z characters
                         reached a boundary that requires clean input.
  - EmptyWordListError : nothing usable left after normalizing the word list.
"""

from __future__ import annotations


class WordleError(Exception):
    pass


class StuckError(WordleError):
    """Raised when no unused candidate of the right length remains."""

    def __init__(self, message: str, *, attempt: int | None = None, constraints: str = ""):
        super().__init__(message)
        self.attempt = attempt
        self.constraints = constraints


class InvalidWordError(WordleError, ValueError):
    pass


class EmptyWordListError(WordleError, ValueError):
    pass
