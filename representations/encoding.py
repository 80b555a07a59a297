"""
Tensor encoding of boards.

Converts Boards (or their serialized form) into the tensors learning agents
consume. The canonical encoding is one-hot over log2 values:

    (N, size * size, max_value) boolean, position index = y * size + x

Slot 0 marks an empty cell, slot k a tile of 2^k. Values at or above
``max_value`` are clipped into the last slot.
"""

from typing import Iterable, Union

import torch
from torch import Tensor

from lib2048.agent import Direction
from lib2048.board import Board, SerializedBoard


# 0 = empty, 1-16 = 2^1 to 2^16
DEFAULT_MAX_VALUE = 17

BoardLike = Union[Board, SerializedBoard]


def _rows_of(board: BoardLike):
    if isinstance(board, Board):
        return board.get_cells()
    return board["rows"]


def grids_to_tensor(boards: Iterable[BoardLike]) -> Tensor:
    """Stack boards into an (N, size, size) int64 tensor of log2 values.

    Raises:
        ValueError: If no boards are given or their sizes differ
    """
    grids = [_rows_of(board) for board in boards]
    if not grids:
        raise ValueError("At least one board is required")
    sizes = {(len(grid), len(grid[0])) for grid in grids}
    if len(sizes) != 1:
        raise ValueError(f"Boards have different sizes: {sorted(sizes)}")
    return torch.tensor(grids, dtype=torch.int64)


def encode_boards(
    boards: Iterable[BoardLike],
    max_value: int = DEFAULT_MAX_VALUE,
) -> Tensor:
    """One-hot encode boards.

    Args:
        boards: Boards or serialized boards, all the same size
        max_value: Number of one-hot slots per cell

    Returns:
        (N, size * size, max_value) boolean tensor
    """
    if max_value < 2:
        raise ValueError("max_value must be at least 2")
    grids = grids_to_tensor(boards)
    n_boards = grids.shape[0]
    indices = grids.view(n_boards, -1).clamp(max=max_value - 1)
    return torch.nn.functional.one_hot(indices, num_classes=max_value).bool()


def encode_direction(direction: Direction) -> Tensor:
    """One-hot action vector of length 4, in Direction order."""
    vector = torch.zeros(len(Direction), dtype=torch.float32)
    vector[int(Direction(direction))] = 1.0
    return vector
