"""
Root pytest configuration for lib2048 tests.

This module provides:
- Board creation from plain log2 grids
- Scripted random sources for deterministic spawns
- Common fixed grids
"""

from typing import List, Optional

import pytest

from lib2048.board import Board
from lib2048.config import EngineConfig


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow-running"
    )


class ScriptedRandom:
    """Stand-in for random.Random that replays fixed decisions.

    ``choice`` returns the element at the next scripted index (0 once the
    script runs out); ``random`` returns the next scripted roll (0.99 once
    the script runs out, i.e. a "2" spawn).
    """

    def __init__(self, picks: Optional[List[int]] = None, rolls: Optional[List[float]] = None):
        self.picks = list(picks or [])
        self.rolls = list(rolls or [])
        self.choices_seen = []

    def choice(self, seq):
        self.choices_seen.append(list(seq))
        index = self.picks.pop(0) if self.picks else 0
        return seq[index]

    def random(self) -> float:
        return self.rolls.pop(0) if self.rolls else 0.99


@pytest.fixture
def make_rng():
    """Factory for ScriptedRandom instances.

    Returns:
        Callable (picks, rolls) -> ScriptedRandom
    """
    def _make_rng(picks=None, rolls=None) -> ScriptedRandom:
        return ScriptedRandom(picks, rolls)

    return _make_rng


@pytest.fixture
def board_from_grid():
    """Create a Board from a square grid of log2 values.

    Returns:
        Callable (grid, score=0, rng=None, config=None) -> Board
    """
    def _board_from_grid(
        grid: List[List[int]],
        score: int = 0,
        rng=None,
        config: Optional[EngineConfig] = None,
    ) -> Board:
        return Board.deserialize(
            {"rows": [list(row) for row in grid], "score": score},
            config=config,
            rng=rng,
        )

    return _board_from_grid


@pytest.fixture
def checkerboard():
    """Full 4x4 grid with no equal neighbours in any direction."""
    return [
        [2, 3, 2, 3],
        [3, 2, 3, 2],
        [2, 3, 2, 3],
        [3, 2, 3, 2],
    ]


@pytest.fixture
def empty_grid():
    return [[0] * 4 for _ in range(4)]
