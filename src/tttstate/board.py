"""
Board basics: grid representation, win-lines, serialization, rendering.
Notes:
- A grid is 3 rows of 3 cells, row-major. A cell is None (empty), "X" or "O".
- "X" is the first mark (scores +1), "O" the second (scores -1).
- Win-lines are scanned rows first, then columns, then the two diagonals.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

SIZE = 3
MARK_X = "X"
MARK_O = "O"
MARKS = (MARK_X, MARK_O)
EMPTY_CHAR = "."

Cell = Optional[str]
Grid = Tuple[Tuple[Cell, ...], ...]

WIN_LINES: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    # rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # columns
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


def empty_cells() -> List[List[Cell]]:
    return [[None] * SIZE for _ in range(SIZE)]


def copy_cells(grid: Sequence[Sequence[Cell]]) -> List[List[Cell]]:
    """Deep-copy a 3x3 grid into fresh row lists, validating every cell.

    Raises ValueError when the grid is not 3x3 or holds anything other than
    None, "X" or "O".
    """
    if len(grid) != SIZE:
        raise ValueError(f"Grid must have {SIZE} rows, got {len(grid)}")
    cells: List[List[Cell]] = []
    for r, row in enumerate(grid):
        if len(row) != SIZE:
            raise ValueError(f"Row {r} must have {SIZE} cells, got {len(row)}")
        for c, v in enumerate(row):
            if v is not None and v not in MARKS:
                raise ValueError(f"Invalid cell value at ({r}, {c}): {v!r}")
        cells.append(list(row))
    return cells


def freeze(cells: Sequence[Sequence[Cell]]) -> Grid:
    return tuple(tuple(row) for row in cells)


def line_winner(cells: Sequence[Sequence[Cell]]) -> Cell:
    """Mark of the first uniform win-line in scan order, or None."""
    for line in WIN_LINES:
        (r0, c0), (r1, c1), (r2, c2) = line
        v = cells[r0][c0]
        if v is not None and v == cells[r1][c1] and v == cells[r2][c2]:
            return v
    return None


def is_full(cells: Sequence[Sequence[Cell]]) -> bool:
    return all(v is not None for row in cells for v in row)


def mark_value(mark: str) -> int:
    return 1 if mark == MARK_X else -1


def serialize_grid(cells: Sequence[Sequence[Cell]]) -> str:
    return ''.join(EMPTY_CHAR if v is None else v for row in cells for v in row)


def deserialize_grid(text: str) -> List[List[Cell]]:
    """Parse a 9-char row-major string of X, O and '.' (case-insensitive)."""
    raw = text.strip().upper()
    if len(raw) != SIZE * SIZE or any(ch not in "XO." for ch in raw):
        raise ValueError(f"Invalid board string {text!r}. Must be 9 chars of X/O/.")
    cells = empty_cells()
    for i, ch in enumerate(raw):
        if ch != EMPTY_CHAR:
            cells[i // SIZE][i % SIZE] = ch
    return cells


def render_grid(cells: Sequence[Sequence[Cell]]) -> str:
    bar = " -------------\n"
    out = bar
    for row in cells:
        for v in row:
            out += " |  " if v is None else f" | {v}"
        out += " |\n"
        out += bar
    return out
