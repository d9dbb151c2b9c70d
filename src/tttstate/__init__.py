"""tttstate package.

Mutable tic-tac-toe state with reversible moves, for use by an external
game-tree search.

Convenience imports are exposed for common workflows.
"""

from importlib.metadata import PackageNotFoundError, version as _version

from .config import StateConfig, load_config
from .errors import InvalidStateError, UndoOrderError
from .move import Move
from .protocol import SearchState
from .state import TicTacToeState

try:
    __version__ = _version("tttstate")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "TicTacToeState",
    "Move",
    "SearchState",
    "StateConfig",
    "load_config",
    "InvalidStateError",
    "UndoOrderError",
]
