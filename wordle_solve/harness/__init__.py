from .core import WORDLE_MAX_TURNS, InvalidGuessError, play, run_case, run_batch
from .io import summarize, write_csv, write_manifest
from .session import GameSession

__all__ = [
    "WORDLE_MAX_TURNS", "InvalidGuessError", "play", "run_case", "run_batch",
    "summarize", "write_csv", "write_manifest", "GameSession",
]
