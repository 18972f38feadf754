"""
Pytest fixtures for Bulgarian Solitaire tests.
"""

import random

import pytest

from ..engine_core import Board, BoardConfig


class ScriptedRandom:
    """Random source that replays fixed draws and records each request."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        value = self.values.pop(0)
        assert a <= value <= b
        return value


def partitions(total, largest=None):
    """All partitions of total as non-increasing lists."""
    largest = total if largest is None else largest
    if total == 0:
        yield []
        return
    for first in range(min(total, largest), 0, -1):
        for rest in partitions(total - first, first):
            yield [first] + rest


@pytest.fixture
def default_config() -> BoardConfig:
    """Standard game: 9 final piles, 45 cards."""
    return BoardConfig()


@pytest.fixture
def small_config() -> BoardConfig:
    """Short game: 4 final piles, 10 cards."""
    return BoardConfig(final_pile_count=4)


@pytest.fixture
def five_config() -> BoardConfig:
    """5 final piles, 15 cards."""
    return BoardConfig(final_pile_count=5)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240601)


@pytest.fixture
def single_pile_board(small_config: BoardConfig) -> Board:
    """All 10 cards in one pile."""
    return Board.from_text("10", small_config)
