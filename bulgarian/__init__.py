"""
Bulgarian Solitaire - Simulator for the Bulgarian Solitaire card game.

Cards are split into piles. Each round one card is taken from every pile
and the taken cards form a new pile. With a triangular number of cards
the game always ends in piles of sizes 1, 2, ..., N.

The package provides:
- The board state machine and configuration validation
- A game loop that plays a board to completion
- A command-line driver
"""

from .engine_core import (
    Board,
    BoardConfig,
    DEFAULT_CONFIG,
    FINAL_PILE_COUNT,
    CARD_TOTAL,
    ValidationError,
    InvariantViolation,
    is_valid_config_string,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "BoardConfig",
    "DEFAULT_CONFIG",
    "FINAL_PILE_COUNT",
    "CARD_TOTAL",
    "ValidationError",
    "InvariantViolation",
    "is_valid_config_string",
]
