"""Position scoring for the Infectious AI.

Two scores, both from a given player's point of view and exactly
antisymmetric (``score(p) == -score(opponent(p))``):

* :meth:`PositionEvaluator.estimate`, a linear heuristic used where the
  search stops at its maximum depth;
* :meth:`PositionEvaluator.terminal_score`, the exact result of a finished
  game (neither player can move).

Every term is computed as ``weight * (mine - theirs)`` so that swapping the
player negates each term, and therefore the sum, exactly.
"""

from __future__ import annotations

from ..board import Board
from ..encoding import active, opponent, passive
from ..models import AIConfig, MobilityPolicy
from .heuristic_weights import (
    HEURISTIC_V1_DEFAULT,
    TERMINAL_SCORE_MULTIPLIER,
    HeuristicWeights,
    get_weights,
)


class PositionEvaluator:
    """Scores boards with a weight profile and a mobility policy."""

    def __init__(
        self,
        weights: HeuristicWeights,
        mobility_policy: MobilityPolicy = MobilityPolicy.SUMMED,
        terminal_multiplier: float = TERMINAL_SCORE_MULTIPLIER,
    ):
        self.weights = weights
        self.mobility_policy = mobility_policy
        self.terminal_multiplier = terminal_multiplier

    @classmethod
    def from_config(cls, config: AIConfig) -> PositionEvaluator:
        return cls(
            get_weights(config.heuristic_profile_id),
            mobility_policy=config.mobility_policy,
        )

    @classmethod
    def default(cls) -> PositionEvaluator:
        return cls(get_weights(HEURISTIC_V1_DEFAULT))

    def breakdown(self, board: Board, player: int) -> dict[str, float]:
        """Weighted contribution of each heuristic term, plus ``total``."""
        w = self.weights
        opp = opponent(player)
        terms = {
            "active_colonies": w["WEIGHT_ACTIVE_COLONY"] * (
                board.colony_count(active(player))
                - board.colony_count(active(opp))
            ),
            "passive_colonies": w["WEIGHT_PASSIVE_COLONY"] * (
                board.colony_count(passive(player))
                - board.colony_count(passive(opp))
            ),
            "mobility": w["WEIGHT_MOBILITY"] * (
                board.mobility(player, self.mobility_policy)
                - board.mobility(opp, self.mobility_policy)
            ),
            "passive_blocks": w["WEIGHT_PASSIVE_BLOCK"] * (
                board.block_count(passive(player))
                - board.block_count(passive(opp))
            ),
        }
        terms["total"] = sum(terms.values())
        return terms

    def estimate(self, board: Board, player: int) -> float:
        """Heuristic forecast of the result; positive means ``player`` leads."""
        return self.breakdown(board, player)["total"]

    def terminal_score(self, board: Board, player: int) -> float:
        """Result of a finished game for ``player``.

        Only counts colonies on the current board, so it is wrong for a
        position where either player can still move.
        """
        return self.terminal_multiplier * board.colony_advantage(player)
