from typing import List

import pytest
from hypothesis import given, strategies as st

from minimax_ttt.game_basics import EMPTY, O, WIN_LINES, X, new_board
from minimax_ttt.outcome import Draw, Ongoing, Win, evaluate


def test_empty_board_is_ongoing():
    res = evaluate(new_board())
    assert res == Ongoing()
    assert res.finished is False
    assert res.winner is None


def test_full_board_without_line_is_draw():
    res = evaluate([1, 2, 1, 1, 2, 2, 2, 1, 1])
    assert res == Draw()
    assert res.finished is True
    assert res.winner is None


@pytest.mark.parametrize("line", WIN_LINES)
@pytest.mark.parametrize("mark", [X, O])
def test_every_line_is_reported(line, mark):
    b = new_board()
    for i in line:
        b[i] = mark
    res = evaluate(b)
    assert res == Win(mark, line)
    assert res.finished and res.winner == mark


def test_win_on_full_board_beats_draw():
    # X completes the anti-diagonal with the last cell
    b = [2, 1, 1, 1, 1, 2, 1, 2, 2]
    assert evaluate(b) == Win(X, (2, 4, 6))


def test_first_line_in_enumeration_order_wins():
    # row 0 and column 0 are both complete; rows come first
    b = [1, 1, 1, 1, 2, 2, 1, 2, 2]
    assert evaluate(b).line == (0, 1, 2)


def test_evaluate_does_not_touch_board():
    b = [1, 2, 0, 0, 1, 0, 2, 0, 0]
    before = list(b)
    evaluate(b)
    assert b == before


@given(st.lists(st.sampled_from([EMPTY, X, O]), min_size=9, max_size=9))
def test_evaluate_classification(board: List[int]):
    res = evaluate(board)
    complete = [line for line in WIN_LINES if board[line[0]] != EMPTY
                and board[line[0]] == board[line[1]] == board[line[2]]]
    if complete:
        assert isinstance(res, Win)
        assert res.line == complete[0]
        assert all(board[i] == res.mark for i in res.line)
    elif EMPTY in board:
        assert isinstance(res, Ongoing)
    else:
        assert isinstance(res, Draw)
