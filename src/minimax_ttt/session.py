"""
Caller-held game session: owns the board, the turn flag and the score tally,
and drives the evaluate -> engine move -> evaluate loop.

The engine modules stay stateless; everything that survives between moves
lives here.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .config import EngineConfig
from .game_basics import EMPTY, X, new_board
from .outcome import EvaluationResult, Ongoing, Win, evaluate
from .solver import best_move


class IllegalMoveError(ValueError):
    """A move the session refuses: game over, wrong turn, bad or taken cell."""


@dataclass
class Scoreboard:
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, result: EvaluationResult) -> None:
        if isinstance(result, Win):
            if result.mark == X:
                self.x_wins += 1
            else:
                self.o_wins += 1
        elif result.finished:
            self.draws += 1

    def clear(self) -> None:
        self.x_wins = self.o_wins = self.draws = 0


@dataclass
class GameSession:
    config: EngineConfig = field(default_factory=EngineConfig)
    scores: Scoreboard = field(default_factory=Scoreboard)
    board: List[int] = field(default_factory=new_board, init=False)
    result: EvaluationResult = field(default_factory=Ongoing, init=False)
    human_turn: bool = field(default=True, init=False)
    last_ai_move: Optional[int] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.reset()

    @property
    def active(self) -> bool:
        return not self.result.finished

    @property
    def ai_mark(self) -> int:
        return self.config.ai_mark

    @property
    def human_mark(self) -> int:
        return self.config.human_mark

    def reset(self) -> EvaluationResult:
        """Start a new round, keeping the scores. An X engine moves first."""
        self.board = new_board()
        self.result = Ongoing()
        self.last_ai_move = None
        self.human_turn = self.human_mark == X
        if not self.human_turn:
            self._engine_turn()
        return self.result

    def reset_all(self) -> EvaluationResult:
        self.scores.clear()
        return self.reset()

    def play(self, idx: int) -> EvaluationResult:
        """Apply the human's move at `idx`, then the engine's reply if the game goes on."""
        if not self.active:
            raise IllegalMoveError("The round is over; reset to play again.")
        if not self.human_turn:
            raise IllegalMoveError("It is not the human player's turn.")
        if not 0 <= idx <= 8:
            raise IllegalMoveError(f"Cell index out of range: {idx}")
        if self.board[idx] != EMPTY:
            raise IllegalMoveError(f"Cell {idx} is already taken.")

        self.board[idx] = self.human_mark
        if self._settle():
            return self.result
        self.human_turn = False
        return self._engine_turn()

    def _engine_turn(self) -> EvaluationResult:
        move = best_move(self.board, self.ai_mark, self.human_mark)
        self.board[move] = self.ai_mark
        self.last_ai_move = move
        logging.debug("engine played %d", move)
        if not self._settle():
            self.human_turn = True
        return self.result

    def _settle(self) -> bool:
        self.result = evaluate(self.board)
        if self.result.finished:
            self.scores.record(self.result)
            logging.info("round over: %s winner=%s", self.result.describe(), self.result.winner)
            return True
        return False
