"""
One-dimensional slide-and-merge.

Row.rotate() is the single merge primitive every move direction reduces to:
compact the row toward one end, merging equal neighbours (after compaction)
so that each cell takes part in at most one merge per operation.

Examples (log2 values):
    [2, 2, 2, 2] rotated RIGHT -> [0, 0, 3, 3], +16
    [0, 0, 2, 2] rotated LEFT  -> [3, 0, 0, 0], +8
    [0, 4, 4, 2] rotated LEFT  -> [5, 2, 0, 0], +32
"""

from typing import Iterable, Iterator, List

from lib2048.cell import Cell


class Row:
    """Fixed-length ordered sequence of Cells.

    The length is set at construction and never changes afterwards.
    """

    # Traversal vectors
    RIGHT = 1
    LEFT = -1

    def __init__(self, cells: Iterable[Cell]):
        self._cells: List[Cell] = list(cells)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "Row":
        """Build a row from plain log2 integers."""
        return cls(Cell(value) for value in values)

    @classmethod
    def new_empty(cls, size: int) -> "Row":
        return cls(Cell.new_empty() for _ in range(size))

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, index: int) -> Cell:
        return self._cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a.equals(b) for a, b in zip(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Row({self.serialize()})"

    def is_index_in_range(self, index: int) -> bool:
        return 0 <= index < len(self._cells)

    def find_farthest_index(self, index: int, vector: int) -> int:
        """Find the last empty cell reached from ``index`` along ``vector``.

        In [3, 0, 0, 4], starting at index 0 with vector RIGHT gives 2.

        Args:
            index: Where the traversal starts
            vector: RIGHT (1) or LEFT (-1)

        Returns:
            Index of the farthest consecutive empty cell, or ``index`` itself
            when the neighbouring cell is occupied or off the row
        """
        farthest = index
        while (
            self.is_index_in_range(farthest + vector)
            and self._cells[farthest + vector].is_empty()
        ):
            farthest += vector
        return farthest

    def build_traversals(self, vector: int) -> List[int]:
        """Indices visited by rotate(), skipping the cell against the wall.

        RIGHT walks from the second-to-last index down to 0; LEFT walks from
        1 up to the last index.
        """
        if vector == Row.RIGHT:
            return list(range(len(self._cells) - 2, -1, -1))
        return list(range(1, len(self._cells)))

    def rotate(self, vector: int) -> int:
        """Slide every cell toward ``vector``, merging where possible.

        Args:
            vector: RIGHT (1) or LEFT (-1)

        Returns:
            Score gained from merges, the sum of the merged tiles' display
            values (0 when nothing merged)

        Raises:
            ValueError: If vector is neither RIGHT nor LEFT
        """
        if vector not in (Row.RIGHT, Row.LEFT):
            raise ValueError(f"Invalid row vector {vector!r}, must be 1 or -1")

        # A merged cell is frozen for the rest of this operation
        merged_targets = set()
        add_score = 0

        for i in self.build_traversals(vector):
            far_index = self.find_farthest_index(i, vector)
            next_cell = far_index + vector

            if (
                self.is_index_in_range(next_cell)
                and not self._cells[next_cell].is_empty()
                and self._cells[next_cell].equals(self._cells[i])
                and next_cell not in merged_targets
            ):
                self._cells[next_cell].increment()
                self._cells[i].clear()
                merged_targets.add(next_cell)
                add_score += 2 ** self._cells[next_cell].val()
            elif far_index != i:
                self._cells[far_index] = self._cells[i].clone()
                self._cells[i].clear()

        return add_score

    def rotate_right(self) -> int:
        return self.rotate(Row.RIGHT)

    def rotate_left(self) -> int:
        return self.rotate(Row.LEFT)

    def clone(self) -> "Row":
        return Row(cell.clone() for cell in self._cells)

    def serialize(self) -> List[int]:
        """Convert to a plain list of log2 integers."""
        return [cell.val() for cell in self._cells]
