from .core import (
    WORDLE_MAX_TURNS, BatchSummary, Session, SessionConfig, SessionResult, SolveStats,
    run_batch, run_case, solve, summarize,
)
from .io import write_csv, write_manifest
from .display import render_tiles, format_summary

__all__ = [
    "WORDLE_MAX_TURNS", "BatchSummary", "Session", "SessionConfig", "SessionResult",
    "SolveStats", "run_batch", "run_case", "solve", "summarize",
    "write_csv", "write_manifest", "render_tiles", "format_summary",
]
