"""
Single board position.

A Cell holds the log2 magnitude of the tile displayed at one board position.
A value of 0 means the position is empty, 1 is a "2" tile, 11 is a "2048"
tile, and so on.
"""


class Cell:
    """Mutable holder of one position's log2 tile magnitude.

    Cells are never shared between positions. Copies are made with
    ``clone()`` so that mutating one board never leaks into another.

    Attributes:
        value: Non-negative integer, log2 of the displayed tile (0 = empty)
    """

    __slots__ = ("value",)

    def __init__(self, value: int = 0):
        self.value = value

    @classmethod
    def new_empty(cls) -> "Cell":
        """Create a fresh empty cell."""
        return cls(0)

    def is_empty(self) -> bool:
        return self.value == 0

    def val(self) -> int:
        return self.value

    def equals(self, other: "Cell") -> bool:
        """Compare two cells by value."""
        return self.value == other.value

    def increment(self) -> None:
        """Double the displayed magnitude.

        Call this on the cell another cell merges into. Python integers are
        unbounded, so there is no overflow to guard against.
        """
        self.value += 1

    def clear(self) -> None:
        self.value = 0

    def clone(self) -> "Cell":
        return Cell(self.value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.equals(other)

    # Mutable: increment() and clear() change the compared value
    __hash__ = None

    def __repr__(self) -> str:
        return f"Cell({self.value})"
