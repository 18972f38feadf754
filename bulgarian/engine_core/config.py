"""
Board Configuration - Game parameters for a Bulgarian Solitaire board.

The card total is always derived from the final pile count:

    card_total = final_pile_count * (final_pile_count + 1) / 2

so it is a triangular number and the game is guaranteed to terminate.
See http://en.wikipedia.org/wiki/Bulgarian_solitaire

Environment configuration:
    BULGARIAN_FINAL_PILES        Number of piles in a finished game (default 9)
    BULGARIAN_CHECK_INVARIANTS   Re-check representation invariants (default on)
"""

from __future__ import annotations
import os

from pydantic import BaseModel, Field


FINAL_PILE_COUNT = 9
CARD_TOTAL = FINAL_PILE_COUNT * (FINAL_PILE_COUNT + 1) // 2

MAX_FINAL_PILE_COUNT = 100

_FALSE_VALUES = {"0", "false", "no", "off"}


class BoardConfig(BaseModel):
    """Parameters shared by every board of one game."""
    final_pile_count: int = Field(
        FINAL_PILE_COUNT,
        ge=1,
        le=MAX_FINAL_PILE_COUNT,
        description="Number of piles in a terminal configuration",
    )
    check_invariants: bool = Field(
        True,
        description="Re-verify invariants after construction, rounds and rendering",
    )

    model_config = {"frozen": True}

    @property
    def card_total(self) -> int:
        """Total cards on the board, constant for the lifetime of a game."""
        return self.final_pile_count * (self.final_pile_count + 1) // 2

    @classmethod
    def from_env(cls) -> BoardConfig:
        """Build a config from BULGARIAN_* environment variables."""
        values: dict[str, object] = {}

        final_piles = os.getenv("BULGARIAN_FINAL_PILES")
        if final_piles:
            values["final_pile_count"] = final_piles

        check = os.getenv("BULGARIAN_CHECK_INVARIANTS")
        if check:
            values["check_invariants"] = check.strip().lower() not in _FALSE_VALUES

        return cls(**values)


DEFAULT_CONFIG = BoardConfig()
