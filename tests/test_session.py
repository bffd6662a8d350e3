import pytest

from minimax_ttt.config import EngineConfig
from minimax_ttt.game_basics import EMPTY, O, X, new_board
from minimax_ttt.outcome import Draw, Ongoing, Win
from minimax_ttt.session import GameSession, IllegalMoveError, Scoreboard


def test_human_opens_by_default():
    s = GameSession(EngineConfig(think_delay=0))
    assert s.board == new_board()
    assert s.human_turn and s.active
    assert s.human_mark == X and s.ai_mark == O


def test_engine_punishes_weak_play_and_scores_it():
    s = GameSession(EngineConfig(think_delay=0))
    assert s.play(0) == Ongoing()
    assert s.last_ai_move == 4
    assert s.play(1) == Ongoing()
    assert s.last_ai_move == 2
    res = s.play(3)
    assert res == Win(O, (2, 4, 6))
    assert s.last_ai_move == 6
    assert not s.active
    assert (s.scores.x_wins, s.scores.o_wins, s.scores.draws) == (0, 1, 0)

    with pytest.raises(IllegalMoveError):
        s.play(8)

    s.reset()
    assert s.board == new_board() and s.active and s.human_turn
    assert s.scores.o_wins == 1
    s.reset_all()
    assert s.scores == Scoreboard()


def test_rejects_bad_moves():
    s = GameSession(EngineConfig(think_delay=0))
    with pytest.raises(IllegalMoveError):
        s.play(9)
    with pytest.raises(IllegalMoveError):
        s.play(-1)
    s.play(4)
    with pytest.raises(IllegalMoveError):
        s.play(4)
    with pytest.raises(IllegalMoveError):
        s.play(s.last_ai_move)
    s.human_turn = False
    with pytest.raises(IllegalMoveError):
        s.play(next(i for i, v in enumerate(s.board) if v == EMPTY))
    # IllegalMoveError is a ValueError for callers that only catch that
    assert issubclass(IllegalMoveError, ValueError)


def test_engine_as_x_opens_the_round():
    s = GameSession(EngineConfig(ai_mark=X, think_delay=0))
    assert s.board.count(X) == 1 and s.board.count(O) == 0
    assert s.last_ai_move == 0
    assert s.human_turn
    s.play(4)
    assert s.board.count(X) == 2 and s.board.count(O) == 1


def test_engine_never_loses_in_session_against_first_free_cell():
    s = GameSession(EngineConfig(think_delay=0))
    while s.active:
        s.play(s.board.index(EMPTY))
    assert s.scores.x_wins == 0
    assert s.scores.o_wins + s.scores.draws == 1


def test_scoreboard_record():
    sb = Scoreboard()
    sb.record(Win(X, (0, 1, 2)))
    sb.record(Win(O, (2, 4, 6)))
    sb.record(Draw())
    sb.record(Ongoing())
    assert (sb.x_wins, sb.o_wins, sb.draws) == (1, 1, 1)
    sb.clear()
    assert sb == Scoreboard()
