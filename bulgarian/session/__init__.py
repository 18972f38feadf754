"""
Session Module - Runs a single game from start to finish.

A game is in-memory only: the loop owns one board, plays it until the
terminal configuration, and is discarded.
"""

from .game_loop import (
    GameLoop,
    LoopState,
    RoundRecord,
    GameResult,
    GameOverError,
    RoundLimitExceeded,
    DEFAULT_MAX_ROUNDS,
    round_limit,
)

__all__ = [
    "GameLoop",
    "LoopState",
    "RoundRecord",
    "GameResult",
    "GameOverError",
    "RoundLimitExceeded",
    "DEFAULT_MAX_ROUNDS",
    "round_limit",
]
