"""AI implementations for Infectious.

    from infectious.ai import NegamaxAI

    ai = NegamaxAI(player_number=1, config=AIConfig(max_depth=4))
    move = ai.select_move(board)

Architecture:
- base.py: BaseAI abstract base class
- heuristic_weights.py: named weight profiles
- evaluator.py: heuristic estimate and game-over score
- negamax_ai.py: depth-limited negamax with alpha-beta pruning
"""

from infectious.ai.base import BaseAI
from infectious.ai.evaluator import PositionEvaluator
from infectious.ai.negamax_ai import NegamaxAI, SearchResult

__all__ = [
    "BaseAI",
    "NegamaxAI",
    "PositionEvaluator",
    "SearchResult",
]
