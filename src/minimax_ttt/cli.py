from __future__ import annotations

import argparse
import csv
import logging
import sys
import time
from typing import List, Optional, TextIO

from .config import EngineConfig
from .game_basics import (
    MARK_SYMBOLS,
    current_player,
    deserialize_board,
    format_board,
    is_valid_state,
    other,
    parse_mark,
    serialize_board,
)
from .outcome import Win, evaluate
from .session import GameSession, IllegalMoveError
from .solver import best_move, pick_best, pick_optimal, score_moves
from .symmetry import canonical_form


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Unbeatable tic-tac-toe engine")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    p_eval = sub.add_parser(
        "evaluate",
        help="Report whether a board is won, drawn or ongoing (9 digits, 0=empty,1=X,2=O)",
    )
    p_eval.add_argument("--board", help="Board string, e.g., 110220000 (omit with --stdin)")
    p_eval.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    p_move = sub.add_parser("move", help="Pick the engine's move for a board")
    p_move.add_argument("--board", help="Board string, e.g., 110220000 (omit with --stdin)")
    p_move.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )
    p_move.add_argument(
        "--ai-mark",
        type=parse_mark,
        default=None,
        help="Mark the engine plays: X/O or 1/2 (default: side to move)",
    )

    p_self = sub.add_parser("selfplay", help="Let the engine play both sides to the end")
    p_self.add_argument("--board", default="000000000", help="Starting board (default: empty)")

    p_play = sub.add_parser("play", help="Play against the engine in the terminal")
    p_play.add_argument(
        "--ai-mark", type=parse_mark, default=None, help="Engine mark: X moves first (default: $TTT_AI_MARK or O)"
    )
    p_play.add_argument(
        "--delay", type=float, default=None, help="Seconds before the engine replies (default: $TTT_THINK_DELAY or 0.5)"
    )

    return p


def _read_board(raw: Optional[str]) -> Optional[List[int]]:
    try:
        board = deserialize_board(raw or "")
    except ValueError as exc:
        logging.error("%s", exc)
        return None
    if not is_valid_state(board):
        logging.error("Board is not a valid reachable state.")
        return None
    return board


def _iter_boards(stream: TextIO):
    for line in stream:
        raw = line.strip()
        if not raw:
            continue
        try:
            board = deserialize_board(raw)
        except ValueError:
            continue
        if not is_valid_state(board):
            continue
        yield raw, board


def _line_str(result) -> str:
    return ",".join(map(str, result.line)) if isinstance(result, Win) else ""


def _cmd_evaluate(ns: argparse.Namespace) -> int:
    if ns.stdin:
        w = csv.writer(sys.stdout)
        w.writerow(["board", "result", "winner", "line"])
        for raw, b in _iter_boards(sys.stdin):
            res = evaluate(b)
            w.writerow([raw, res.describe(), res.winner or "", _line_str(res)])
        return 0

    b = _read_board(ns.board)
    if b is None:
        return 2
    res = evaluate(b)
    logging.info("result=%s winner=%s line=%s", res.describe(), res.winner, _line_str(res))
    return 0


def _cmd_move(ns: argparse.Namespace) -> int:
    if ns.stdin:
        w = csv.writer(sys.stdout)
        w.writerow(["board", "move", "score", "optimal_moves"])
        for raw, b in _iter_boards(sys.stdin):
            if evaluate(b).finished:
                continue
            ai = ns.ai_mark or current_player(b)
            scores = score_moves(b, ai, other(ai))
            mv = pick_best(scores)
            w.writerow([raw, mv, scores[mv], " ".join(map(str, pick_optimal(scores)))])
        return 0

    b = _read_board(ns.board)
    if b is None:
        return 2
    res = evaluate(b)
    if res.finished:
        logging.error("Board is already finished (%s); no move to make.", res.describe())
        return 2
    ai = ns.ai_mark or current_player(b)
    scores = score_moves(b, ai, other(ai))
    mv = pick_best(scores)
    canon, op = canonical_form(b)
    logging.info("move=%d score=%d scores=%s", mv, scores[mv], scores)
    logging.debug("canonical_form=%s op=%s", canon, op)
    return 0


def _cmd_selfplay(ns: argparse.Namespace) -> int:
    b = _read_board(ns.board)
    if b is None:
        return 2
    res = evaluate(b)
    while not res.finished:
        mark = current_player(b)
        mv = best_move(b, mark, other(mark))
        b[mv] = mark
        logging.info("%s -> %d  board=%s", MARK_SYMBOLS[mark], mv, serialize_board(b))
        res = evaluate(b)
    logging.info("result=%s winner=%s line=%s", res.describe(), res.winner, _line_str(res))
    return 0


def _show(session: GameSession) -> None:
    print(format_board(session.board))
    s = session.scores
    print(f"X={s.x_wins} O={s.o_wins} draws={s.draws}")


def _cmd_play(ns: argparse.Namespace) -> int:
    try:
        config = EngineConfig.from_env().with_overrides(ai_mark=ns.ai_mark, think_delay=ns.delay)
    except ValueError as exc:
        logging.error("%s", exc)
        return 2
    session = GameSession(config)
    print("Cells are numbered 0-8 row by row. r=new round, R=reset scores, q=quit.")
    _show(session)
    for line in sys.stdin:
        cmd = line.strip()
        if not cmd:
            continue
        if cmd == "q":
            break
        if cmd == "r":
            session.reset()
        elif cmd == "R":
            session.reset_all()
        else:
            try:
                idx = int(cmd)
            except ValueError:
                logging.error("Enter a cell number 0-8, r, R or q.")
                continue
            previous = session.last_ai_move
            try:
                session.play(idx)
            except IllegalMoveError as exc:
                logging.error("%s", exc)
                continue
            if session.last_ai_move != previous and config.think_delay:
                time.sleep(config.think_delay)
        _show(session)
        if not session.active:
            res = session.result
            if isinstance(res, Win):
                who = "You win" if res.mark == session.human_mark else "Engine wins"
                print(f"{who}! line={_line_str(res)}")
            else:
                print("Draw!")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("minimax-ttt"))
        except Exception:
            print("unknown")
        return 0

    if ns.cmd == "evaluate":
        return _cmd_evaluate(ns)
    if ns.cmd == "move":
        return _cmd_move(ns)
    if ns.cmd == "selfplay":
        return _cmd_selfplay(ns)
    if ns.cmd == "play":
        return _cmd_play(ns)

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
