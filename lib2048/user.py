"""
Players of a 2048 game.

A GameUser is bound to a GameAgent and drives it. Users only talk to the
agent interface, so the same user can play the engine's Board or a site
adapter.
"""

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from lib2048.agent import GameAgent, GameState
from lib2048.common import get_current_state, get_next_actions


logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Outcome of one played game.

    Attributes:
        score: Final score
        max_tile: Largest log2 value on the final grid
        moves: Number of moves performed
        state: Game state when play stopped
    """
    score: int
    max_tile: int
    moves: int
    state: GameState

    @property
    def max_tile_display(self) -> int:
        return 2 ** self.max_tile if self.max_tile else 0


class GameUser(ABC):
    """Something that plays a game through a GameAgent."""

    @abstractmethod
    def bind(self, agent: GameAgent) -> None:
        pass

    @abstractmethod
    def start(self):
        pass

    @abstractmethod
    def stop(self) -> None:
        pass

    @abstractmethod
    def reset(self) -> None:
        pass


class RandomUser(GameUser):
    """Plays uniformly random legal moves.

    Args:
        rng: Random source for move choice (a fresh one if None)
        max_moves: Stop after this many moves even if the game is ongoing
    """

    def __init__(self, rng: Optional[random.Random] = None, max_moves: Optional[int] = None):
        self._rng = rng or random.Random()
        self.max_moves = max_moves
        self.agent: Optional[GameAgent] = None
        self._running = False

    def bind(self, agent: GameAgent) -> None:
        self.agent = agent

    def start(self) -> GameResult:
        """Play until the game leaves ONGOING, no move is legal, or max_moves.

        Raises:
            RuntimeError: If no agent is bound
        """
        if self.agent is None:
            raise RuntimeError("RandomUser.start() called before bind()")

        self._running = True
        moves = 0
        while self._running and self.agent.get_game_state() == GameState.ONGOING:
            if self.max_moves is not None and moves >= self.max_moves:
                break
            actions = get_next_actions(get_current_state(self.agent))
            if not actions:
                break
            self.agent.move(self._rng.choice(actions))
            moves += 1
        self._running = False

        cells = self.agent.get_cells()
        result = GameResult(
            score=self.agent.get_score(),
            max_tile=max(max(row) for row in cells),
            moves=moves,
            state=self.agent.get_game_state(),
        )
        logger.debug("Game finished: %s", result)
        return result

    def stop(self) -> None:
        self._running = False

    def reset(self) -> None:
        if self.agent is not None:
            self.agent.reset()
