"""Console rendering of guesses and batch summaries."""

from __future__ import annotations

from typing import Sequence

from autowordle.engine import Verdict
from .core import BatchSummary

TILES = {
    Verdict.CORRECT: "\U0001F7E9",   # green square
    Verdict.PRESENT: "\U0001F7E8",   # yellow square
    Verdict.ABSENT: "⬜",        # white square
}

LEGEND = f"{TILES[Verdict.ABSENT]} = Not in word   {TILES[Verdict.PRESENT]} = Wrong position   " \
         f"{TILES[Verdict.CORRECT]} = Correct"


def render_tiles(guess: str, feedback: Sequence[Verdict]) -> str:
    """Two lines: the tile row, then the guessed letters spaced to line up."""
    tiles = " ".join(TILES[v] for v in feedback)
    letters = " ".join(f"{ch.upper()} " for ch in guess).rstrip()
    return f"{tiles}\n{letters}"


def _plural(n: int, word: str, suffix: str = "s") -> str:
    return word if n == 1 else word + suffix


def format_summary(summary: BatchSummary, max_guesses: int = 6) -> str:
    total = summary.attempted or 1
    lines = [
        "========== Summary ==========",
        f"Total words attempted:            {summary.attempted}",
        f"Successfully solved:              {summary.solved} | {100.0 * summary.solved / total:.0f}%",
        f"Failed within {max_guesses} guesses:         {summary.failed_within_budget} | "
        f"{100.0 * summary.failed_within_budget / total:.0f}%",
        f"Got stuck:                        {summary.stuck}",
        f"Average guesses per solved word:  {summary.avg_guesses:.2f}",
        f"Average solve time:               {summary.avg_time_ms:.0f} ms",
        "",
        "Guess Distribution:",
    ]
    for guesses, count in sorted(summary.distribution.items()):
        lines.append(f"{guesses} {_plural(guesses, 'Guess', 'es')} -> {count} {_plural(count, 'time')}")
    lines.append("=============================")
    return "\n".join(lines)
