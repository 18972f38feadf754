"""
Engine Core - Bulgarian Solitaire board state machine.

The engine:
1. Builds a board (random or from a validated configuration string)
2. Plays rounds, one card from every pile into a new pile
3. Detects the terminal configuration 1, 2, ..., N
"""

from .config import BoardConfig, DEFAULT_CONFIG, FINAL_PILE_COUNT, CARD_TOTAL
from .validation import (
    ValidationError,
    InvariantViolation,
    ValidationResult,
    validate_config_string,
    is_valid_config_string,
    is_valid_configuration,
)
from .board import Board, RandomSource

__all__ = [
    "BoardConfig",
    "DEFAULT_CONFIG",
    "FINAL_PILE_COUNT",
    "CARD_TOTAL",
    "ValidationError",
    "InvariantViolation",
    "ValidationResult",
    "validate_config_string",
    "is_valid_config_string",
    "is_valid_configuration",
    "Board",
    "RandomSource",
]
