"""
Mutable tic-tac-toe state for backtracking search.
Notes:
- The grid is mutated in place by apply_move/undo_move; a search applies a
  move, recurses, then undoes it.
- apply_move never changes whose turn it is. Call next_ply() between plies.
- player_turn=True means "O" is to move, False means "X".
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .board import (
    MARK_O,
    MARK_X,
    SIZE,
    Cell,
    Grid,
    copy_cells,
    deserialize_grid,
    empty_cells,
    freeze,
    is_full,
    line_winner,
    mark_value,
    render_grid,
    serialize_grid,
)
from .config import StateConfig
from .errors import InvalidStateError, UndoOrderError
from .move import Move


class TicTacToeState:
    """Board plus turn indicator, with reversible move application.

    Illegal moves make apply_move return False; evaluate() on an unfinished
    game raises InvalidStateError.
    """

    def __init__(
        self,
        player_turn: bool,
        grid: Optional[Sequence[Sequence[Cell]]] = None,
        config: Optional[StateConfig] = None,
    ) -> None:
        self._cells: List[List[Cell]] = empty_cells() if grid is None else copy_cells(grid)
        self.player_turn = bool(player_turn)
        self.config = config if config is not None else StateConfig()
        self._history: List[Move] = []

    @classmethod
    def from_grid(
        cls,
        grid: Sequence[Sequence[Cell]],
        player_turn: bool,
        config: Optional[StateConfig] = None,
    ) -> 'TicTacToeState':
        """Builds an independent state from a deep copy of ``grid``."""
        return cls(player_turn, grid=grid, config=config)

    @classmethod
    def from_string(
        cls,
        text: str,
        player_turn: bool,
        config: Optional[StateConfig] = None,
    ) -> 'TicTacToeState':
        return cls(player_turn, grid=deserialize_grid(text), config=config)

    def copy(self) -> 'TicTacToeState':
        other = TicTacToeState(self.player_turn, grid=self._cells, config=self.config)
        other._history = list(self._history)
        return other

    def with_turn(self, player_turn: bool) -> 'TicTacToeState':
        other = self.copy()
        other.player_turn = bool(player_turn)
        return other

    # -- accessors --------------------------------------------------------

    def current_mark(self) -> str:
        return MARK_O if self.player_turn else MARK_X

    @property
    def grid(self) -> Grid:
        """Read-only snapshot of the cells."""
        return freeze(self._cells)

    @property
    def history(self) -> Tuple[Move, ...]:
        return tuple(self._history)

    def is_player_turn(self) -> bool:
        return self.player_turn

    def next_ply(self) -> None:
        """Hands the move to the other side."""
        self.player_turn = not self.player_turn

    def mark_count(self) -> Dict[str, int]:
        counts = {MARK_X: 0, MARK_O: 0}
        for row in self._cells:
            for v in row:
                if v is not None:
                    counts[v] += 1
        return counts

    def serialize(self) -> str:
        return serialize_grid(self._cells)

    def render(self) -> str:
        return render_grid(self._cells)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"TicTacToeState({self.serialize()!r}, player_turn={self.player_turn})"

    # -- rules ------------------------------------------------------------

    def legal_moves(self) -> List[Move]:
        """Every empty cell, in row-major order."""
        moves: List[Move] = []
        for r in range(SIZE):
            for c in range(SIZE):
                if self._cells[r][c] is None:
                    moves.append(Move(r, c))
        return moves

    def winner(self) -> Optional[str]:
        return line_winner(self._cells)

    def is_terminal(self) -> bool:
        return line_winner(self._cells) is not None or is_full(self._cells)

    def evaluate(self) -> int:
        """Score of a finished game: +1 if X won, -1 if O won, 0 for a draw.

        The first uniform line in scan order (rows, columns, diagonals)
        decides. Raises InvalidStateError if the game is not over.
        """
        if not self.is_terminal():
            raise InvalidStateError(f"Position {self.serialize()} is not terminal")
        w = line_winner(self._cells)
        if w is None:
            return 0
        return mark_value(w)

    # -- mutation ---------------------------------------------------------

    def apply_move(self, move: Move) -> bool:
        """Places the current mark on ``move`` if it is legal.

        Returns False and leaves the state untouched for out-of-range or
        occupied cells.
        """
        # legal == in bounds and listed by legal_moves(), i.e. the cell is empty
        if not move.in_bounds() or self._cells[move.row][move.col] is not None:
            logging.debug("Rejected move %s on %s", move, self.serialize())
            return False
        self._cells[move.row][move.col] = self.current_mark()
        self._history.append(move)
        return True

    def undo_move(self, move: Move) -> None:
        """Clears the cell of ``move``.

        By default the cell is cleared whatever it holds. With
        ``config.strict_undo`` the move must be the last one applied,
        otherwise UndoOrderError is raised and nothing changes.
        """
        if not move.in_bounds():
            raise IndexError(f"Move outside the grid: {move}")
        if self.config.strict_undo:
            if not self._history or self._history[-1] != move:
                last = self._history[-1] if self._history else None
                raise UndoOrderError(f"Cannot undo {move}; last applied move is {last}")
            self._history.pop()
        elif self._history and self._history[-1] == move:
            self._history.pop()
        elif move in self._history:
            logging.debug("Undoing %s out of order", move)
            idx = len(self._history) - 1 - self._history[::-1].index(move)
            del self._history[idx]
        self._cells[move.row][move.col] = None
