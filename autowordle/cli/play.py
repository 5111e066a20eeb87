# autowordle/cli/play.py
"""
Watch the solver play a single game against a secret word.

    python -m autowordle.cli.play crane --solver heuristic --pace
"""

from __future__ import annotations

import argparse
import logging

from autowordle.datasets import default_word_list_path, load_word_list
from autowordle.engine import StuckError
from autowordle.harness import SessionConfig, render_tiles, solve
from autowordle.harness.display import LEGEND
from autowordle.solvers import create_solver, get_solver_ids


def main(argv=None):
    ap = argparse.ArgumentParser(description="autowordle — watch one self-played game")
    ap.add_argument("secret", help="the hidden 5-letter word")
    ap.add_argument("--solver", default="heuristic",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--words", default=str(default_word_list_path()), help="word list path")
    ap.add_argument("--seed", type=int, help="RNG seed (random opener otherwise)")
    ap.add_argument("--pace", action="store_true", help="pause between guesses")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    words = load_word_list(args.words)
    solver = create_solver(args.solver)
    config = SessionConfig(enable_pacing=args.pace, pacing_delay=0.8)

    print(LEGEND + "\n")

    def show(attempt, guess, feedback):
        print(f"Guess {attempt}:")
        print(render_tiles(guess, feedback) + "\n")

    try:
        result = solve(args.secret, words, solver, config=config, seed=args.seed, on_guess=show)
    except StuckError as e:
        print(f"Failed to solve: {args.secret.upper()}")
        print(f"Reason: {e}")
        raise SystemExit(1)

    stats = result.stats
    print("Word solved!")
    print(f"Total guesses: {stats.total_guesses}")
    print(f"Time taken: {stats.elapsed_ms:.0f} ms")
    if stats.failed_within_budget:
        print("(over the 6-guess budget)")


if __name__ == "__main__":
    main()
