"""
2048 Board Engine.

This module provides the Board class, a square grid of Rows with a score and
a game state. It is the engine's top-level entity and the GameAgent players
and agents talk to.

Key design decisions:
- All four move directions reduce to Row.rotate(): LEFT/RIGHT apply it to
  each row directly, UP/DOWN rotate the whole grid 90 degrees so the move
  becomes RIGHT, merge, then rotate back.
- A tile spawns only when the move changed the board (full equality against
  a pre-move snapshot, so a slide without a merge counts).
- Game state is recomputed from the cells after every move and reset.
  Loss detection probes RIGHT and UP on copies of the board; the board
  itself is never touched by the probe and no tile is spawned.
- Each Board owns its random source, so boards never share hidden state.
"""

import copy
import logging
import numbers
import random
from typing import Any, Dict, Iterator, List, Optional

from lib2048.agent import Coordinate, Direction, GameAgent, GameState
from lib2048.config import EngineConfig
from lib2048.row import Row


logger = logging.getLogger(__name__)


# Transport form: {"rows": [[int, ...], ...], "score": int}, rows indexed [y][x]
SerializedBoard = Dict[str, Any]

# Unit step (dx, dy) of each direction in board coordinates
DIRECTION_VECTORS = {
    Direction.UP: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
}


class MalformedBoardError(ValueError):
    """Raised when a serialized board cannot describe a valid Board.

    Covers missing or empty rows, non-square grids, negative or non-integer
    cell values, and negative or non-integer scores.
    """
    pass


def _is_integral(value: Any) -> bool:
    """True for ints and integer-valued floats, False for bools."""
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return isinstance(value, float) and value.is_integer()


def _validate_serialized(ser: Any) -> None:
    """Check the shape and contents of a serialized board.

    Raises:
        MalformedBoardError: On the first problem found
    """
    if not isinstance(ser, dict):
        raise MalformedBoardError(
            f"Serialized board must be a mapping, got {type(ser).__name__}"
        )
    if "rows" not in ser:
        raise MalformedBoardError("Serialized board has no 'rows'")

    rows = ser["rows"]
    if not isinstance(rows, (list, tuple)) or len(rows) == 0:
        raise MalformedBoardError("'rows' must be a non-empty sequence")

    size = len(rows)
    for y, row in enumerate(rows):
        if not isinstance(row, (list, tuple)):
            raise MalformedBoardError(f"Row {y} is not a sequence")
        if len(row) != size:
            raise MalformedBoardError(
                f"Board must be square: row {y} has {len(row)} cells, expected {size}"
            )
        for x, value in enumerate(row):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise MalformedBoardError(
                    f"Cell ({x}, {y}) must be an integer, got {value!r}"
                )
            if value < 0:
                raise MalformedBoardError(f"Cell ({x}, {y}) is negative: {value}")

    score = ser.get("score", 0)
    if isinstance(score, bool) or not isinstance(score, numbers.Integral):
        raise MalformedBoardError(f"Score must be an integer, got {score!r}")
    if score < 0:
        raise MalformedBoardError(f"Score is negative: {score}")


class Board(GameAgent):
    """Square grid of Rows with a score and a game state.

    ``rows[y][x]`` holds the Cell at column x, row y. Rows are exclusively
    owned by the board and Cells by their row.

    Attributes:
        rows: Rows of the grid, top to bottom
        score: Sum of the display values of every merge so far
        game_state: ONGOING, WIN or LOSS
        win_value: log2 tile value that wins the game
        initial_populate_count: Tiles spawned by reset()
        four_probability: Chance that a spawned tile is a "4"
    """

    def __init__(
        self,
        rows: List[Row],
        score: int = 0,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
        game_state: Optional[GameState] = None,
    ):
        """Initialize board.

        Prefer ``new_empty``, ``from_config`` or ``deserialize``.

        Args:
            rows: Rows of the grid, already owned by nobody else
            score: Starting score
            config: Engine configuration (defaults to EngineConfig())
            rng: Random source for spawning; seeded from config.seed if None
            game_state: Known state; computed from the cells if None
        """
        config = config or EngineConfig()
        self.config = config
        self.rows = rows
        self.score = score
        self.win_value = config.win_value
        self.initial_populate_count = config.initial_populate_count
        self.four_probability = config.four_probability
        self._rng = rng if rng is not None else random.Random(config.seed)
        # Probing for a loss copies the board, which reads game_state
        self.game_state = GameState.ONGOING
        self.game_state = game_state if game_state is not None else self._compute_game_state()

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def new_empty(
        cls,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Create an all-empty board with score 0."""
        config = config or EngineConfig()
        rows = [Row.new_empty(config.size) for _ in range(config.size)]
        return cls(rows, 0, config=config, rng=rng, game_state=GameState.ONGOING)

    @classmethod
    def from_config(
        cls,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Create a board ready to play: empty, then reset()."""
        board = cls.new_empty(config=config, rng=rng)
        board.reset()
        return board

    @classmethod
    def deserialize(
        cls,
        ser: SerializedBoard,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Rebuild a board from its serialized form.

        The grid dimensions come from ``ser``; ``config`` only supplies the
        win value and spawning parameters. A missing score defaults to 0.

        Raises:
            MalformedBoardError: If ``ser`` does not describe a square grid of
                non-negative integers with a non-negative integer score
        """
        _validate_serialized(ser)
        rows = [Row.from_values(values) for values in ser["rows"]]
        return cls(rows, ser.get("score", 0), config=config, rng=rng)

    def serialize(self) -> SerializedBoard:
        return {
            "rows": [row.serialize() for row in self.rows],
            "score": self.score,
        }

    def clone(self) -> "Board":
        """Deep copy, including a copy of the random source."""
        return self._copy(rng=copy.deepcopy(self._rng))

    def _copy(self, rng=None) -> "Board":
        return Board(
            [row.clone() for row in self.rows],
            self.score,
            config=self.config,
            rng=rng if rng is not None else self._rng,
            game_state=self.game_state,
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def x_count(self) -> int:
        return len(self.rows[0])

    @property
    def y_count(self) -> int:
        return len(self.rows)

    def get_score(self) -> int:
        return self.score

    def get_game_state(self) -> GameState:
        return self.game_state

    def get_cells(self) -> List[List[int]]:
        return [row.serialize() for row in self.rows]

    def get_rows(self) -> List[Row]:
        """Copies of the rows; mutating them does not affect the board."""
        return [row.clone() for row in self.rows]

    def is_coord_in_range(self, coord) -> bool:
        """Range check only, fractional coordinates are not rejected."""
        try:
            x, y = coord
        except (TypeError, ValueError):
            return False
        if not isinstance(x, numbers.Real) or not isinstance(y, numbers.Real):
            return False
        return 0 <= x < self.x_count and 0 <= y < self.y_count

    def is_coord_valid(self, coord) -> bool:
        """True for an integer-valued coordinate inside the grid."""
        if not self.is_coord_in_range(coord):
            return False
        x, y = coord
        return _is_integral(x) and _is_integral(y)

    def get_cell_at(self, coord) -> Optional[int]:
        if not self.is_coord_valid(coord):
            return None
        x, y = coord
        return self.rows[int(y)][int(x)].val()

    def set_cell_at(self, coord, value: int) -> None:
        """Overwrite one cell's log2 value.

        Raises:
            IndexError: If the coordinate is not valid
            ValueError: If value is not a non-negative integer
        """
        if not self.is_coord_valid(coord):
            raise IndexError(f"Coordinate {coord!r} is off the board")
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValueError(f"Cell value must be an integer, got {value!r}")
        if value < 0:
            raise ValueError(f"Cell value must be non-negative, got {value}")
        x, y = coord
        self.rows[int(y)][int(x)].value = int(value)
        self._update_game_state()

    def get_empty_cells(self) -> List[Coordinate]:
        """Empty positions, scanning columns left to right, each top to bottom."""
        output = []
        for x in range(self.x_count):
            for y in range(self.y_count):
                if self.rows[y][x].is_empty():
                    output.append(Coordinate(x, y))
        return output

    def is_empty(self) -> bool:
        return all(cell.is_empty() for row in self.rows for cell in row)

    def is_full(self) -> bool:
        return not any(cell.is_empty() for row in self.rows for cell in row)

    def iter_line(self, start: Coordinate, direction: Direction) -> Iterator[Coordinate]:
        """Walk from ``start`` toward the wall in ``direction``.

        Yields ``start`` first, then each following coordinate until the
        edge of the board. Call again for a fresh traversal.
        """
        dx, dy = DIRECTION_VECTORS[Direction(direction)]
        x, y = start
        while self.is_coord_valid((x, y)):
            yield Coordinate(x, y)
            x += dx
            y += dy

    def equals(self, other: "Board") -> bool:
        """Same dimensions, same cell values and same score."""
        if not isinstance(other, Board):
            return False
        if self.y_count != other.y_count or self.x_count != other.x_count:
            return False
        if self.score != other.score:
            return False
        return all(a == b for a, b in zip(self.rows, other.rows))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        return (
            f"Board(rows={self.get_cells()}, score={self.score}, "
            f"state={self.game_state.name})"
        )

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def rotate_clockwise(self) -> None:
        """Rotate the grid 90 degrees clockwise; the top edge becomes the right edge."""
        self.rows = [Row(cells) for cells in zip(*reversed(self.rows))]

    def rotate_unclockwise(self) -> None:
        """Rotate the grid 90 degrees anticlockwise; the bottom edge becomes the right edge."""
        self.rows = [Row(cells) for cells in reversed(list(zip(*self.rows)))]

    def _shift(self, direction: Direction) -> int:
        """Slide and merge every line toward ``direction``.

        Does not spawn tiles or update the game state.

        Returns:
            Score gained by merges; also added to ``self.score``
        """
        if direction == Direction.UP:
            self.rotate_clockwise()
            gained = sum(row.rotate_right() for row in self.rows)
            self.rotate_unclockwise()
        elif direction == Direction.DOWN:
            self.rotate_unclockwise()
            gained = sum(row.rotate_right() for row in self.rows)
            self.rotate_clockwise()
        elif direction == Direction.RIGHT:
            gained = sum(row.rotate_right() for row in self.rows)
        else:
            gained = sum(row.rotate_left() for row in self.rows)

        self.score += gained
        return gained

    def move(self, direction: Direction, add_random_tile: bool = True) -> int:
        """Perform a move.

        Args:
            direction: Direction to move every tile
            add_random_tile: Spawn a tile if the move changed the board

        Returns:
            Score gained by merges during this move

        Raises:
            ValueError: If direction is not a Direction
        """
        if isinstance(direction, bool):
            raise ValueError(f"Invalid direction {direction!r}")
        direction = Direction(direction)

        snapshot = self._copy()
        gained = self._shift(direction)

        if add_random_tile and not self.equals(snapshot):
            self.add_random()

        self._update_game_state()
        return gained

    def next_state(self, direction: Direction, add_random_tile: bool = True) -> "Board":
        """Return the board after ``direction``; this board is not modified."""
        board = self.clone()
        board.move(direction, add_random_tile=add_random_tile)
        return board

    def add_random(self) -> bool:
        """Spawn a "2" (or, with ``four_probability``, a "4") on an empty cell.

        Returns:
            False if the board is full, True otherwise
        """
        empty_cells = self.get_empty_cells()
        if not empty_cells:
            return False

        coord = self._rng.choice(empty_cells)
        cell = self.rows[coord.y][coord.x]
        cell.clear()
        cell.increment()
        if self._rng.random() < self.four_probability:
            cell.increment()

        logger.debug("Spawned %d at (%d, %d)", 2 ** cell.val(), coord.x, coord.y)
        return True

    def reset(self) -> None:
        """Clear the grid, spawn the starting tiles and zero the score."""
        for row in self.rows:
            for cell in row:
                cell.clear()
        for _ in range(self.initial_populate_count):
            self.add_random()
        self.score = 0
        self.game_state = GameState.ONGOING
        self._update_game_state()
        logger.debug("Board reset: %s", self.get_cells())

    # -------------------------------------------------------------------------
    # Game state
    # -------------------------------------------------------------------------

    def _compute_game_state(self) -> GameState:
        if any(cell.val() >= self.win_value for row in self.rows for cell in row):
            return GameState.WIN
        if not self.is_full():
            return GameState.ONGOING

        # Full board: lost unless a RIGHT or UP move would change something
        for direction in (Direction.RIGHT, Direction.UP):
            probe = self._copy()
            probe._shift(direction)
            if not probe.equals(self):
                return GameState.ONGOING
        return GameState.LOSS

    def _update_game_state(self) -> None:
        previous = self.game_state
        self.game_state = self._compute_game_state()
        if self.game_state != previous:
            logger.debug(
                "Game state %s -> %s (score %d)",
                previous.name, self.game_state.name, self.score,
            )
