"""
Solitaire Board - Pile configuration and the Bulgarian Solitaire round.

Representation invariant:
1. 1 <= number of piles <= card_total
2. 1 <= size of every pile <= card_total
3. The pile sizes add up to card_total

Empty piles are never stored; a pile that loses its last card is removed.
"""

from __future__ import annotations
from typing import Protocol
import random

from .config import BoardConfig, DEFAULT_CONFIG
from .validation import (
    InvariantViolation,
    ValidationError,
    is_valid_configuration,
    validate_config_string,
)


class RandomSource(Protocol):
    """Anything that can draw an int uniformly from [a, b], e.g. random.Random."""

    def randint(self, a: int, b: int) -> int: ...


class Board:
    """
    The board for one game of Bulgarian Solitaire.

    Usage:
        board = Board.random()
        while not board.is_done():
            board.play_round()
            print(board.config_string())
    """

    def __init__(self, piles: list[int], config: BoardConfig | None = None):
        self.config = config or DEFAULT_CONFIG
        self._piles = list(piles)
        self.rounds_played = 0
        self.check_invariants()

    @classmethod
    def random(cls, rng: RandomSource | None = None, config: BoardConfig | None = None) -> Board:
        """
        Create a random initial configuration.

        Each pile size is drawn from [1, cards not yet dealt] until every
        card has been dealt.
        """
        config = config or DEFAULT_CONFIG
        rng = rng or random.Random()

        piles = []
        surplus = config.card_total
        while surplus > 0:
            size = rng.randint(1, surplus)
            piles.append(size)
            surplus -= size

        return cls(piles, config)

    @classmethod
    def from_text(cls, text: str, config: BoardConfig | None = None) -> Board:
        """
        Create a board from a space-separated list of pile sizes.

        Raises ValidationError if the text is not a valid configuration.
        """
        config = config or DEFAULT_CONFIG
        result = validate_config_string(text, config)
        if not result.valid:
            raise ValidationError(result.errors)
        return cls(result.piles, config)

    @property
    def piles(self) -> list[int]:
        """Copy of the current pile sizes in display order."""
        return list(self._piles)

    def play_round(self) -> None:
        """
        Play one round: take one card from each pile and put them all
        together in a new pile at the end.
        """
        harvested = len(self._piles)
        self._piles = [size - 1 for size in self._piles if size > 1]
        self._piles.append(harvested)
        self.rounds_played += 1
        self.check_invariants()

    def is_done(self) -> bool:
        """
        True iff there are final_pile_count piles of sizes 1, 2, ...,
        final_pile_count, in any order.
        """
        n = self.config.final_pile_count
        if len(self._piles) != n:
            return False

        tally = [0] * n
        for size in self._piles:
            if not 1 <= size <= n:
                return False
            tally[size - 1] += 1

        return all(count == 1 for count in tally)

    def config_string(self) -> str:
        """Pile sizes as a space-separated line, no leading or trailing space."""
        self.check_invariants()
        return " ".join(str(size) for size in self._piles)

    def check_invariants(self) -> None:
        """Raise InvariantViolation if the representation invariant is broken."""
        if not self.config.check_invariants:
            return
        if not is_valid_configuration(self._piles, self.config):
            raise InvariantViolation(
                f"Board invariant broken (card total {self.config.card_total}): {self._piles}"
            )

    def __len__(self) -> int:
        return len(self._piles)

    def __str__(self) -> str:
        return self.config_string()

    def __repr__(self) -> str:
        return f"Board(piles={self._piles!r}, final_pile_count={self.config.final_pile_count})"
