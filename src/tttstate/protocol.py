"""Capability set a game-tree search is written against.

Any game whose state satisfies SearchState can be driven by the same
minimax/backtracking code. Moves are opaque hashable values compared by
equality; TicTacToeState satisfies the protocol structurally.
"""
from __future__ import annotations

from typing import Any, Hashable, List, Protocol, runtime_checkable


@runtime_checkable
class SearchState(Protocol):
    def legal_moves(self) -> List[Hashable]:
        """Legal moves in a deterministic order."""
        ...

    def is_terminal(self) -> bool:
        ...

    def evaluate(self) -> int:
        """Score of a terminal position; raises if the position is not terminal."""
        ...

    def apply_move(self, move: Hashable) -> bool:
        """Applies ``move`` in place. Returns False for an illegal move."""
        ...

    def undo_move(self, move: Hashable) -> None:
        """Reverts the most recently applied ``move``."""
        ...

    def next_ply(self) -> None:
        ...

    def current_mark(self) -> str:
        ...

    @property
    def grid(self) -> Any:
        ...

    def render(self) -> str:
        ...
