"""
numpy encodings of a grid for evaluators and learning code.
Notes:
- to_array: int8 3x3, X=+1, O=-1, empty=0 (same sign convention as evaluate()).
- to_planes: float32 (3, 3, 3); X cells, O cells, side-to-move constant.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from .board import MARK_O, MARK_X, SIZE, Cell, Grid, copy_cells, freeze

_CODES = {None: 0, MARK_X: 1, MARK_O: -1}
_MARKS = {0: None, 1: MARK_X, -1: MARK_O}


def to_array(grid: Sequence[Sequence[Cell]]) -> np.ndarray:
    """Raises ValueError for a grid that is not 3x3 or holds unknown cells."""
    cells = copy_cells(grid)
    return np.array([[_CODES[v] for v in row] for row in cells], dtype=np.int8)


def to_planes(grid: Sequence[Sequence[Cell]], player_turn: bool) -> np.ndarray:
    arr = to_array(grid)
    planes = np.zeros((3, SIZE, SIZE), dtype=np.float32)
    planes[0] = arr == 1
    planes[1] = arr == -1
    planes[2] = 1.0 if player_turn else 0.0
    return planes


def from_array(array: np.ndarray) -> Grid:
    a = np.asarray(array)
    if a.shape != (SIZE, SIZE):
        raise ValueError(f"Expected shape ({SIZE}, {SIZE}), got {a.shape}")
    if not np.isin(a, (-1, 0, 1)).all():
        raise ValueError("Array values must be in {-1, 0, 1}")
    return freeze([[_MARKS[int(v)] for v in row] for row in a])
