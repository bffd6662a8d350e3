#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import math
import statistics as stats
import time
from dataclasses import dataclass
from typing import List, Tuple

from minimax_ttt.game_basics import O, X, new_board
from minimax_ttt.solver import best_move


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


def _time_call(board: List[int], ai: int, human: int) -> float:
    t0 = time.perf_counter()
    best_move(board, ai, human)
    return time.perf_counter() - t0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Time full-depth searches from the opening")
    ap.add_argument("--repeats", type=int, default=Config.repeats)
    cfg = Config(repeats=ap.parse_args(argv).repeats)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    empty_times: List[float] = []
    reply_times: List[float] = []
    for _ in range(cfg.repeats):
        empty_times.append(_time_call(new_board(), X, O))
        for opening in range(9):
            b = new_board()
            b[opening] = X
            reply_times.append(_time_call(b, O, X))

    m_empty, h_empty = ci95(empty_times)
    m_reply, h_reply = ci95(reply_times)
    logging.info("best_move(empty board): mean=%.4fs ± %.4fs (95%% CI, N=%d)", m_empty, h_empty, len(empty_times))
    logging.info("best_move(after opening): mean=%.4fs ± %.4fs (95%% CI, N=%d)", m_reply, h_reply, len(reply_times))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
