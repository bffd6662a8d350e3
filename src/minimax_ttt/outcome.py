"""
Outcome evaluation: has the game ended, and who won.

evaluate() is a pure function of the board. Results are small frozen
dataclasses so callers can branch on type or on the `finished`/`winner`
attributes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from .game_basics import is_full, winning_line


@dataclass(frozen=True)
class Ongoing:
    finished = False
    winner = None

    def describe(self) -> str:
        return "ongoing"


@dataclass(frozen=True)
class Win:
    mark: int
    line: Tuple[int, int, int]
    finished = True

    @property
    def winner(self) -> int:
        return self.mark

    def describe(self) -> str:
        return "win"


@dataclass(frozen=True)
class Draw:
    finished = True
    winner = None

    def describe(self) -> str:
        return "draw"


EvaluationResult = Union[Ongoing, Win, Draw]


def evaluate(board: List[int]) -> EvaluationResult:
    """Classify a board as Win, Draw or Ongoing.

    Lines are scanned rows, then columns, then diagonals; the first complete
    line decides the winner.
    """
    line = winning_line(board)
    if line is not None:
        return Win(board[line[0]], line)
    if is_full(board):
        return Draw()
    return Ongoing()
