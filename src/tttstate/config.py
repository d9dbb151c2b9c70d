"""State configuration.

Environment-first for the CLI: TTTSTATE_STRICT_UNDO turns on LIFO checking
of undo_move. States built without a config use StateConfig().
"""
from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class StateConfig:
    strict_undo: bool = False


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def load_config() -> StateConfig:
    return StateConfig(strict_undo=_env_flag("TTTSTATE_STRICT_UNDO", False))
