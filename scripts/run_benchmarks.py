#!/usr/bin/env python3
"""Time a full backtracking walk of the game tree over several repeats."""
from __future__ import annotations

import logging
import math
import statistics as stats
import time
from dataclasses import dataclass
from typing import Dict, List, Tuple

from tttstate import StateConfig, TicTacToeState
from tttstate.cli import walk


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    repeats: int = 5
    strict_undo: bool = False


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    cfg = Config()
    times: List[float] = []
    counts: Dict[str, int] = {}
    for _ in range(cfg.repeats):
        counts = {"nodes": 0, "leaves": 0, "x": 0, "o": 0, "draw": 0}
        s = TicTacToeState(False, config=StateConfig(strict_undo=cfg.strict_undo))
        t0 = time.perf_counter()
        walk(s, counts)
        times.append(time.perf_counter() - t0)
    mean, half = ci95(times)
    logging.info("nodes=%d leaves=%d", counts["nodes"], counts["leaves"])
    logging.info("walk_mean_s=%.3f walk_ci95_half_s=%.3f", mean, half)
    logging.info("nodes_per_s=%.0f", counts["nodes"] / mean if mean else float("nan"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
