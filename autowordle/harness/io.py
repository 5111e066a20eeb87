"""
I/O utilities for batch runs.

Responsibilities:
- write_csv:     flatten per-session results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, word-list report and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-GYY-" as formulas (which would display as #NAME?).
- Sessions can run past the 6-guess budget; the CSV keeps the first
  `max_turns` guesses in columns and the full count in `guesses`.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, Sequence

from .core import SessionResult


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-GYY-" -> "'-GYY-"
    """
    return "'" + patt if patt else patt


def write_csv(results: Sequence[SessionResult], path: str, max_turns: int) -> str:
    """
    Serialize a batch of session results to CSV.

    Schema (columns):
      solver, answer, solved, success, guesses, time_ms, stuck, error,
      guess_1, patt_1, ..., guess_max_turns, patt_max_turns

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "answer", "solved", "success", "guesses", "time_ms", "stuck", "error"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.solver_id,
                "answer": r.answer,
                "solved": r.stats.solved,
                "success": r.success,
                "guesses": r.stats.total_guesses,
                "time_ms": round(float(r.stats.elapsed_ms), 3),
                "stuck": r.stuck,
                "error": r.error or "",
            }

            hist = r.patterns()
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, patt = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list report.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, words path, seed, sample, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - summary: aggregated batch statistics
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

