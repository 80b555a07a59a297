"""2048 board engine: cells, rows, boards and the agent contract."""

from lib2048.agent import Coordinate, Direction, GameAgent, GameState
from lib2048.board import Board, MalformedBoardError, SerializedBoard
from lib2048.cell import Cell
from lib2048.config import EngineConfig, load_config, save_config
from lib2048.row import Row

__all__ = [
    "Board",
    "Cell",
    "Coordinate",
    "Direction",
    "EngineConfig",
    "GameAgent",
    "GameState",
    "MalformedBoardError",
    "Row",
    "SerializedBoard",
    "load_config",
    "save_config",
]
