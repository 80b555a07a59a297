"""Plain-text rendering of a grid for terminals."""

from typing import Callable, List, Optional


def display_value(value: int) -> str:
    """Display value of a log2 cell, blank when empty."""
    return "" if value == 0 else str(2 ** value)


def format_grid(
    grid: List[List[int]],
    cell_display: Optional[Callable[[int], str]] = None,
) -> str:
    """Render a ``[y][x]`` grid of log2 values as a bordered table.

    Args:
        grid: Nested lists of log2 values
        cell_display: Maps a log2 value to its text (default ``display_value``)

    Returns:
        Multi-line string, one table row per grid row
    """
    cell_display = cell_display or display_value
    cells = [[cell_display(value) for value in row] for row in grid]
    width = max((len(text) for row in cells for text in row), default=0)
    width = max(width, 1)

    border = "+" + "+".join("-" * (width + 2) for _ in cells[0]) + "+" if cells else "++"
    lines = [border]
    for row in cells:
        lines.append("| " + " | ".join(text.rjust(width) for text in row) + " |")
        lines.append(border)
    return "\n".join(lines)


def print_grid(
    grid: List[List[int]],
    cell_display: Optional[Callable[[int], str]] = None,
) -> None:
    print(format_grid(grid, cell_display))
