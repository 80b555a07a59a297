"""
Agent-facing vocabulary of the 2048 engine.

Defines the move and game-state enumerations, the coordinate type and the
GameAgent interface. Anything that exposes a 2048 game to a player (the
engine's Board, or an adapter driving some other implementation) implements
GameAgent, so that players never depend on a concrete engine.
"""

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import List, NamedTuple, Optional


class Direction(IntEnum):
    """A move performed by the player."""
    UP = 0
    LEFT = 1
    RIGHT = 2
    DOWN = 3


class GameState(IntEnum):
    """Whether the game is in progress, won or lost."""
    WIN = 0
    ONGOING = 1
    LOSS = 2


class Coordinate(NamedTuple):
    """Board position. ``x`` indexes columns, ``y`` indexes rows."""
    x: int
    y: int


class GameAgent(ABC):
    """Interface between a player and a 2048 game logic provider.

    Implemented by the engine's Board. Site adapters that drive an
    independently maintained game implement it as well, so players can be
    engine-agnostic.
    """

    @abstractmethod
    def move(self, direction: Direction):
        """Perform a move in the given direction."""
        pass

    @abstractmethod
    def get_game_state(self) -> GameState:
        pass

    @abstractmethod
    def get_score(self) -> int:
        pass

    @abstractmethod
    def get_cell_at(self, coord: Coordinate) -> Optional[int]:
        """Return the log2 value at ``coord``, or None if it is off the board."""
        pass

    @abstractmethod
    def get_cells(self) -> List[List[int]]:
        """Return the grid as nested lists indexed ``[y][x]``."""
        pass

    @abstractmethod
    def reset(self) -> None:
        pass
