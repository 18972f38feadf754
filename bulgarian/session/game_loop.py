"""
Game Loop - Drives a board from its initial configuration to the end.

The loop:
1. Play one round
2. Record the resulting configuration
3. Stop when the board is done (or the round limit is hit)

The loop never prints; callers observe rounds through the returned
records or the on_round callback.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from ..engine_core.board import Board


DEFAULT_MAX_ROUNDS = 1000


def round_limit(board: Board) -> int:
    """
    Default round cap for a board.

    A game with N final piles finishes within N * (N - 1) rounds.
    """
    n = board.config.final_pile_count
    return max(DEFAULT_MAX_ROUNDS, n * (n - 1))


class LoopState(Enum):
    """State of the game loop."""
    READY = "ready"  # No round played yet
    RUNNING = "running"
    DONE = "done"  # Board reached the terminal configuration
    ABORTED = "aborted"  # Round limit hit before finishing


class GameOverError(Exception):
    """Raised when stepping a loop that has already finished."""


class RoundLimitExceeded(Exception):
    """Raised when the board is still not done after max_rounds rounds."""

    def __init__(self, max_rounds: int, config: str):
        self.max_rounds = max_rounds
        self.config = config
        super().__init__(f"Not done after {max_rounds} rounds: {config}")


@dataclass
class RoundRecord:
    """Configuration after a round."""
    round_number: int
    config: str


@dataclass
class GameResult:
    """Outcome of running a game to completion."""
    initial_config: str
    final_config: str
    rounds: int
    history: list[RoundRecord] = field(default_factory=list)


class GameLoop:
    """
    The game loop driver.

    Usage:
        loop = GameLoop(Board.random())
        result = loop.run(on_round=lambda record: print(record.config))
    """

    def __init__(self, board: Board, max_rounds: int | None = None):
        if max_rounds is None:
            max_rounds = round_limit(board)
        if max_rounds < 1:
            raise ValueError("max_rounds must be >= 1")
        self.board = board
        self.max_rounds = max_rounds
        self.initial_config = board.config_string()
        self.history: list[RoundRecord] = []
        self.state = LoopState.DONE if board.is_done() else LoopState.READY

    @property
    def is_finished(self) -> bool:
        return self.state in {LoopState.DONE, LoopState.ABORTED}

    def step(self) -> RoundRecord:
        """
        Play a single round.

        Raises GameOverError if the loop already finished and
        RoundLimitExceeded if this round used up the limit without
        reaching the end.
        """
        record = self._play()
        self._check_limit(record)
        return record

    def run(self, on_round: Callable[[RoundRecord], None] | None = None) -> GameResult:
        """
        Play rounds until the board is done.

        on_round sees every round, including the one that hits the limit.
        """
        while not self.is_finished:
            record = self._play()
            if on_round:
                on_round(record)
            self._check_limit(record)
        return self.result()

    def _play(self) -> RoundRecord:
        if self.is_finished:
            raise GameOverError(f"Game loop is {self.state.value}")

        self.state = LoopState.RUNNING
        self.board.play_round()
        record = RoundRecord(round_number=len(self.history) + 1, config=self.board.config_string())
        self.history.append(record)

        if self.board.is_done():
            self.state = LoopState.DONE
        return record

    def _check_limit(self, record: RoundRecord) -> None:
        if self.state is LoopState.RUNNING and record.round_number >= self.max_rounds:
            self.state = LoopState.ABORTED
            raise RoundLimitExceeded(self.max_rounds, record.config)

    def result(self) -> GameResult:
        return GameResult(
            initial_config=self.initial_config,
            final_config=self.board.config_string(),
            rounds=len(self.history),
            history=list(self.history),
        )
