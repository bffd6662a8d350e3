"""minimax_ttt package.

Unbeatable tic-tac-toe: an outcome evaluator, an exhaustive minimax move
selector, a caller-held game session, and a small CLI.

Convenience imports are exposed for common workflows.
"""

from .outcome import Draw, EvaluationResult, Ongoing, Win, evaluate
from .session import GameSession, IllegalMoveError
from .solver import best_move, score_moves

__all__ = [
    "evaluate",
    "best_move",
    "score_moves",
    "EvaluationResult",
    "Ongoing",
    "Win",
    "Draw",
    "GameSession",
    "IllegalMoveError",
]
