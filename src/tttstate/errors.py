"""Exceptions raised on precondition violations.

Illegal moves are not errors: apply_move reports them by returning False.
"""


class InvalidStateError(RuntimeError):
    """Operation called on a state that does not satisfy its precondition."""


class UndoOrderError(InvalidStateError):
    """Strict undo called with a move other than the most recently applied one."""
