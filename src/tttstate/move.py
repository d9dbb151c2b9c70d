from __future__ import annotations

from dataclasses import dataclass

from .board import SIZE


@dataclass(frozen=True, eq=False)
class Move:
    """A cell coordinate on the grid. Bounds are checked by the state that receives it."""
    row: int
    col: int

    @classmethod
    def from_index(cls, index: int) -> 'Move':
        """Builds a move from a row-major cell index (0..8)."""
        return cls(index // SIZE, index % SIZE)

    @property
    def index(self) -> int:
        return self.row * SIZE + self.col

    def in_bounds(self) -> bool:
        return 0 <= self.row < SIZE and 0 <= self.col < SIZE

    # equal to any Move, subclasses included, with the same coordinates
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Move):
            return self.row == other.row and self.col == other.col
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.row, self.col))

    def __str__(self) -> str:
        return f"row {self.row} column {self.col}"
