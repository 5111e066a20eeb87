"""
Word-list validator for autowordle.

What this module does:
- Validate a word list (whitespace separated, usually one word per line) for a
  given length N.
- Enforce formatting rules (lowercase, a–z only, exact length N).
- Count duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

The solver itself tolerates messy input (it normalizes on load); this report
exists so batch runs can record exactly which list they were run against.

Typical use:
    from autowordle.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "autowordle/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Tuple


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    N: int
    words: FileReport
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Rules:
      - whitespace separated tokens, any number per line (as load_word_list reads them)
      - must be lowercase a–z
      - must have exact length N
      - blank lines are skipped (not counted as invalid)

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            tokens = raw.split()
            good = [w for w in tokens
                    if w.islower() and w.isalpha() and w.isascii() and len(w) == N]
            valid.extend(good)
            if len(good) != len(tokens):
                invalid += 1

    return valid, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a word list for length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema). `passed`
        requires a non-empty list with no invalid lines; duplicates are
        reported but do not fail validation.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = ValidationReport(
            N=N,
            words=FileReport(path, False, 0, "", 0, 0),
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )

    if report.count == 0:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if report.count != report.unique_count:
        issues.append(f"word list contains {report.count - report.unique_count} duplicate line(s)")

    rep = ValidationReport(
        N=N,
        words=report,
        passed=report.count > 0 and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        N=5 | words=2315 (uniq=2315, sha=abc123...) | OK
    """
    w = report["words"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (w.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={w['count']} (uniq={w['unique_count']}, sha={sha}) "
        f"| invalid={w['invalid_lines']} | {status}"
    )
