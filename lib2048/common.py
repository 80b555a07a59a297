"""
State helpers for players and agents.

Pure functions over serialized boards. Agents that search the game tree
(minimax, expectimax, learned policies) work on these transport values and
never hold a live Board across calls.

Memoization is left to the caller: ``state_key`` turns a state into a
hashable key for whatever cache the caller owns.
"""

from typing import Iterator, List

from lib2048.agent import Direction, GameAgent, GameState
from lib2048.board import Board, SerializedBoard


# Order in which get_next_actions() reports legal moves
ACTION_ORDER = (Direction.DOWN, Direction.LEFT, Direction.RIGHT, Direction.UP)

# Log2 values a spawned tile can take ("2" and "4")
SPAWN_VALUES = (1, 2)


def next_state(
    state: SerializedBoard,
    action: Direction,
    add_random_tile: bool = True,
) -> SerializedBoard:
    """Apply ``action`` to a serialized board and return the result."""
    board = Board.deserialize(state)
    board.move(action, add_random_tile=add_random_tile)
    return board.serialize()


def is_terminal_state(state: SerializedBoard) -> bool:
    return Board.deserialize(state).get_game_state() != GameState.ONGOING


def get_current_state(agent: GameAgent) -> SerializedBoard:
    """Snapshot any GameAgent into the serialized form."""
    return {
        "rows": agent.get_cells(),
        "score": agent.get_score(),
    }


def are_grids_equal(grid1: List[List[int]], grid2: List[List[int]]) -> bool:
    if len(grid1) != len(grid2):
        return False
    return all(list(a) == list(b) for a, b in zip(grid1, grid2))


def get_next_actions(state: SerializedBoard) -> List[Direction]:
    """Directions that change the grid, in DOWN, LEFT, RIGHT, UP order."""
    return [
        direction for direction in ACTION_ORDER
        if not are_grids_equal(
            next_state(state, direction, add_random_tile=False)["rows"],
            state["rows"],
        )
    ]


def next_random_additions(state: SerializedBoard) -> Iterator[SerializedBoard]:
    """Yield every board a tile spawn can produce from ``state``.

    All "2" placements come first (in get_empty_cells() order), then all
    "4" placements.
    """
    board = Board.deserialize(state)
    empty_coords = board.get_empty_cells()

    for addition in SPAWN_VALUES:
        for coord in empty_coords:
            clone = board.serialize()
            clone["rows"][coord.y][coord.x] = addition
            yield clone


def state_key(state: SerializedBoard) -> int:
    """Pack the cells into one integer, one hex digit per cell.

    Cells above 15 share digits with their neighbours, so keys are only
    collision-free while every tile is below 2^16.
    """
    key = 0
    for row in state["rows"]:
        for value in row:
            key = key * 16 + value
    return key
