"""
Exhaustive minimax move selection for the engine's side.

Scoring policy:
- +10 if the engine owns a completed line, -10 if its opponent does, 0 on a full board.
- No depth adjustment: a win is worth the same at any ply, so the engine never
  loses but does not rush wins.
- Among equal root scores the lowest cell index is chosen.

The search mutates the board in place through trial_move() and leaves it exactly
as it found it. The board must not be shared with anything else while a search
runs. Callers are expected to check outcome.evaluate() first: on a full board
best_move() returns None, and on an already decided board its answer is meaningless.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from .game_basics import O, X, empty_cells, is_full, winning_line

WIN_SCORE = 10
LOSS_SCORE = -10
DRAW_SCORE = 0


@contextmanager
def trial_move(board: List[int], idx: int, mark: int) -> Iterator[List[int]]:
    """Place `mark` at `idx` for the duration of the block, then restore the cell."""
    previous = board[idx]
    board[idx] = mark
    try:
        yield board
    finally:
        board[idx] = previous


def terminal_score(board: List[int], ai: int = O, human: int = X) -> Optional[int]:
    line = winning_line(board)
    if line is not None:
        mark = board[line[0]]
        if mark == ai:
            return WIN_SCORE
        if mark == human:
            return LOSS_SCORE
    if is_full(board):
        return DRAW_SCORE
    return None


class _Search:
    """One root search: remembers the two marks and counts visited positions."""

    def __init__(self, ai: int, human: int):
        self.ai = ai
        self.human = human
        self.nodes = 0

    def minimax(self, board: List[int], maximizing: bool) -> int:
        self.nodes += 1
        score = terminal_score(board, self.ai, self.human)
        if score is not None:
            return score

        if maximizing:
            best = LOSS_SCORE - 1
            for i in empty_cells(board):
                with trial_move(board, i, self.ai):
                    best = max(best, self.minimax(board, False))
            return best

        best = WIN_SCORE + 1
        for i in empty_cells(board):
            with trial_move(board, i, self.human):
                best = min(best, self.minimax(board, True))
        return best

    def root_scores(self, board: List[int]) -> List[Optional[int]]:
        scores: List[Optional[int]] = [None] * 9
        for i in empty_cells(board):
            with trial_move(board, i, self.ai):
                scores[i] = self.minimax(board, False)
        return scores


def minimax(board: List[int], maximizing: bool, ai: int = O, human: int = X) -> int:
    """Exact value of `board` for `ai`; `maximizing` says whether `ai` moves next."""
    return _Search(ai, human).minimax(board, maximizing)


def score_moves(board: List[int], ai: int = O, human: int = X) -> List[Optional[int]]:
    """Root score of every empty cell for `ai` to move; None for occupied cells."""
    return _Search(ai, human).root_scores(board)


def pick_best(scores: List[Optional[int]]) -> Optional[int]:
    """Index of the first strictly greatest score, skipping occupied cells."""
    best_idx: Optional[int] = None
    best_score: Optional[int] = None
    for i, s in enumerate(scores):
        if s is None:
            continue
        if best_score is None or s > best_score:
            best_idx, best_score = i, s
    return best_idx


def best_move(board: List[int], ai: int = O, human: int = X) -> Optional[int]:
    search = _Search(ai, human)
    scores = search.root_scores(board)
    move = pick_best(scores)
    logging.debug(
        "best_move=%s score=%s nodes=%d scores=%s",
        move,
        scores[move] if move is not None else None,
        search.nodes,
        scores,
    )
    return move


def optimal_moves(board: List[int], ai: int = O, human: int = X) -> List[int]:
    """Every empty cell sharing the best root score, ascending."""
    return pick_optimal(score_moves(board, ai, human))


def pick_optimal(scores: List[Optional[int]]) -> List[int]:
    legal = [s for s in scores if s is not None]
    if not legal:
        return []
    top = max(legal)
    return [i for i, s in enumerate(scores) if s == top]
