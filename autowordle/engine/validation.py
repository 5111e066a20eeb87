"""
Input normalization at the boundary of a solving session.

Words are canonicalized exactly once, on the way in: trimmed, lowercased and
kept only if they are a-z of the expected length. Everything downstream
(used-word tracking, filtering, feedback) compares canonical strings.
"""

from typing import Iterable, List

from .errors import EmptyWordListError, InvalidWordError


def canonical(word: str) -> str:
    return word.strip().lower()


def is_valid_word(word: str, N: int) -> bool:
    if not isinstance(word, str):
        return False
    w = canonical(word)
    return len(w) == N and w.isalpha() and w.isascii()


def normalize_words(words: Iterable[str], N: int) -> List[str]:
    """
    Canonicalize a raw word sequence and drop anything that isn't N letters.

    Order is preserved and duplicates are tolerated (deduplication is a batch
    concern, not a session one).

    Raises:
      EmptyWordListError if nothing usable remains.
    """
    out = [canonical(w) for w in words if is_valid_word(w, N)]
    if not out:
        raise EmptyWordListError(f"word list contains no valid {N}-letter words")
    return out


def require_word(word: str, N: int) -> str:
    """Return the canonical form of `word` or raise InvalidWordError."""
    if not is_valid_word(word, N):
        raise InvalidWordError(f"expected a {N}-letter a-z word, got {word!r}")
    return canonical(word)
