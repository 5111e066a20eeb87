from .feedback import Verdict, Feedback, evaluate, is_solved, pattern_string, parse_pattern
from .constraints import (
    ConstraintState, apply_feedback, filter_candidates, matches, matches_greens_and_yellows,
)
from .errors import WordleError, StuckError, InvalidWordError, EmptyWordListError
from .validation import normalize_words, require_word

__all__ = [
    "Verdict", "Feedback", "evaluate", "is_solved", "pattern_string", "parse_pattern",
    "ConstraintState", "apply_feedback", "filter_candidates", "matches",
    "matches_greens_and_yellows",
    "WordleError", "StuckError", "InvalidWordError", "EmptyWordListError",
    "normalize_words", "require_word",
]
