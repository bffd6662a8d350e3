from typing import List

from hypothesis import assume, given, settings, strategies as st

from minimax_ttt.game_basics import O, X, is_valid_state, other
from minimax_ttt.outcome import evaluate
from minimax_ttt.solver import best_move, pick_best, score_moves
from minimax_ttt.symmetry import ALL_SYMS, apply_action_transform, transform_board


def _play_out(order: List[int], plies: int) -> List[int]:
    b = [0] * 9
    mark = X
    for idx in order[:plies]:
        b[idx] = mark
        if evaluate(b).finished:
            break
        mark = other(mark)
    return b


reachable_midgames = st.builds(
    _play_out, st.permutations(range(9)), st.integers(min_value=3, max_value=8)
)


@settings(max_examples=60, deadline=None)
@given(reachable_midgames)
def test_search_leaves_board_untouched(board: List[int]):
    assume(not evaluate(board).finished)
    assert is_valid_state(board)
    mark = X if board.count(X) == board.count(O) else O
    before = list(board)
    mv = best_move(board, mark, other(mark))
    assert board == before
    assert board[mv] == 0


@settings(max_examples=60, deadline=None)
@given(reachable_midgames)
def test_best_move_is_first_maximum(board: List[int]):
    assume(not evaluate(board).finished)
    mark = X if board.count(X) == board.count(O) else O
    scores = score_moves(board, mark, other(mark))
    mv = best_move(board, mark, other(mark))
    legal = [s for s in scores if s is not None]
    assert scores[mv] == max(legal)
    assert all(s is None or s < scores[mv] for s in scores[:mv])
    assert mv == pick_best(scores)


@settings(max_examples=40, deadline=None)
@given(reachable_midgames, st.sampled_from(ALL_SYMS))
def test_scores_follow_board_symmetry(board: List[int], op: str):
    assume(not evaluate(board).finished)
    mark = X if board.count(X) == board.count(O) else O
    scores = score_moves(board, mark, other(mark))
    moved = score_moves(transform_board(board, op), mark, other(mark))
    for i, s in enumerate(scores):
        assert moved[apply_action_transform(i, op)] == s
