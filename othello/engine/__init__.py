"""Search engine: evaluation, minimax, and the game session driver."""

from othello.engine.evaluator import score
from othello.engine.minimax import MinimaxSearch, SearchConfig, best_move
from othello.engine.session import OthelloSession

__all__ = ["score", "MinimaxSearch", "SearchConfig", "best_move", "OthelloSession"]
