from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional

from . import __version__
from .config import StateConfig, load_config
from .state import TicTacToeState


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tttstate", description="Tic-tac-toe state diagnostics")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    p_ins = sub.add_parser(
        "inspect",
        help="Render a board (9 chars, X/O/. row-major) and report terminal status and value",
    )
    p_ins.add_argument("--board", required=True, help="Board string, e.g., X.O.X...O")
    p_ins.add_argument(
        "--player-turn",
        action="store_true",
        help="O is to move (default: X is to move)",
    )

    p_mv = sub.add_parser("moves", help="List legal moves for a board")
    p_mv.add_argument("--board", help="Board string, e.g., X.O.X...O (omit with --stdin)")
    p_mv.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    p_walk = sub.add_parser(
        "walk",
        help="Backtrack through every continuation of a board and count nodes, leaves and results",
    )
    p_walk.add_argument("--board", default=".........", help="Start board (default: empty)")
    p_walk.add_argument(
        "--player-turn",
        action="store_true",
        help="O is to move (default: X is to move)",
    )
    p_walk.add_argument(
        "--strict-undo",
        action="store_true",
        help="Reject undo_move calls that are not the last applied move (overrides TTTSTATE_STRICT_UNDO)",
    )

    return p


def _make_state(raw: str, player_turn: bool, config: StateConfig) -> Optional[TicTacToeState]:
    try:
        return TicTacToeState.from_string(raw, player_turn, config=config)
    except ValueError as e:
        logging.error("%s", e)
        return None


def walk(s: TicTacToeState, counts: Dict[str, int]) -> None:
    """Depth-first apply/undo over every continuation, tallying results."""
    counts["nodes"] += 1
    if s.is_terminal():
        counts["leaves"] += 1
        counts[{1: "x", -1: "o", 0: "draw"}[s.evaluate()]] += 1
        return
    for m in s.legal_moves():
        s.apply_move(m)
        s.next_ply()
        walk(s, counts)
        s.next_ply()
        s.undo_move(m)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        print(__version__)
        return 0

    config = StateConfig()

    if ns.cmd == "inspect":
        state = _make_state(ns.board, ns.player_turn, config)
        if state is None:
            return 2
        logging.info("\n%s", state.render().rstrip("\n"))
        terminal = state.is_terminal()
        logging.info(
            "to_move=%s legal=%s terminal=%s",
            state.current_mark(),
            [(m.row, m.col) for m in state.legal_moves()],
            terminal,
        )
        if terminal:
            logging.info("value=%d", state.evaluate())
        return 0

    if ns.cmd == "moves":
        import sys as _sys
        if ns.stdin:
            import csv as _csv
            w = _csv.writer(_sys.stdout)
            w.writerow(["board", "terminal", "value", "legal_moves"])
            for line in _sys.stdin:
                raw = line.strip()
                if not raw:
                    continue
                try:
                    state = TicTacToeState.from_string(raw, False, config=config)
                except ValueError:
                    logging.debug("Skipping malformed board %r", raw)
                    continue
                terminal = state.is_terminal()
                w.writerow([
                    state.serialize(),
                    int(terminal),
                    state.evaluate() if terminal else '',
                    ' '.join(str(m.index) for m in state.legal_moves()),
                ])
            return 0
        state = _make_state(ns.board or "", False, config)
        if state is None:
            return 2
        logging.info("legal=%s", [(m.row, m.col) for m in state.legal_moves()])
        return 0

    if ns.cmd == "walk":
        if ns.strict_undo:
            config = StateConfig(strict_undo=True)
        else:
            try:
                config = load_config()
            except ValueError as e:
                logging.error("%s", e)
                return 2
        logging.debug("config=%s", config)
        state = _make_state(ns.board, ns.player_turn, config)
        if state is None:
            return 2
        counts = {"nodes": 0, "leaves": 0, "x": 0, "o": 0, "draw": 0}
        walk(state, counts)
        logging.info(
            "strict_undo=%s nodes=%d leaves=%d x=%d o=%d draw=%d",
            config.strict_undo,
            counts["nodes"],
            counts["leaves"],
            counts["x"],
            counts["o"],
            counts["draw"],
        )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
