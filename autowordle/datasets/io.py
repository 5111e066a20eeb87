from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from autowordle.engine import normalize_words

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def default_word_list_path(N: int = 5) -> Path:
    return DATA_DIR / f"words_{N}.txt"


def load_word_list(p: Path | str | None = None, N: int = 5) -> List[str]:
    """
    Load a whitespace/newline separated word list in canonical form.

    Tokens are trimmed and lowercased; anything that isn't N letters is
    dropped. Order and duplicates are kept.

    Raises:
      FileNotFoundError if the file is missing,
      EmptyWordListError if no valid word remains.
    """
    p = Path(p) if p is not None else default_word_list_path(N)
    tokens = [tok for line in read_lines(p) for tok in line.split()]
    words = normalize_words(tokens, N)
    log.debug("loaded %d/%d words from %s", len(words), len(tokens), p)
    return words
