# autowordle/cli/run.py
"""
CLI entry point for batch self-play evaluation.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads the list and runs one fresh session per secret with the chosen
     strategy, with a live progress indicator. Stuck sessions are recorded as
     failures and the batch carries on.
  3) Prints the summary (success rate, average guesses, guess distribution) and writes:
       - CSV:  per-session results + guess/pattern history columns
       - JSON: manifest with config, word-list report, summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from autowordle.datasets import (
    default_word_list_path, load_word_list, pretty_summary, validate_wordlist,
)
from autowordle.harness import (
    WORDLE_MAX_TURNS, format_summary, run_batch, summarize, write_csv, write_manifest,
)
from autowordle.harness.io import git_commit_or_unknown, timestamp_id
from autowordle.solvers import get_solver_ids


def main(argv=None):
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="autowordle — batch self-play evaluation")
    ap.add_argument("--solver", default="heuristic",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--words", default=str(default_word_list_path()),
                    help="word list used both as guess universe and as secrets")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-write", action="store_true", help="skip CSV/manifest output")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.solver not in get_solver_ids():
        raise SystemExit(f"Unknown solver id: {args.solver}. Registered: {solver_choices}")

    # 1) Validate and summarize the word list
    rep = validate_wordlist(5, args.words)
    print(pretty_summary(rep))

    # 2) Load (trimmed, lowercased, 5-letter only)
    words = load_word_list(args.words)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    # 3) Run the batch; every secret gets a fresh session
    results = run_batch(
        args.solver, words, word_list=words, seed=args.seed,
        sample=args.sample, shuffle=True, progress=mode,
    )
    summary = summarize(results)
    print()
    print(format_summary(summary, WORDLE_MAX_TURNS))

    if args.no_write:
        return

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "solver_id": args.solver,
        "summary": {**asdict(summary), "success_rate": summary.success_rate},
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
