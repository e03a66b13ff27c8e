"""Negamax AI implementation for Infectious.

This agent runs a depth-limited negamax search with alpha-beta pruning over
the board's in-place apply/revert primitive. Each node is handled in this
order:

1. neither side can move: the game is over, return the exact result;
2. the node sits at ``config.max_depth``: return the heuristic estimate;
3. only the side to move is stuck: it passes (a single no-op branch), so
   the sign flip across the pass stays correct;
4. otherwise expand the legal moves in generation order, stopping as soon
   as ``alpha >= beta``.

There is no move ordering, transposition table, iterative deepening or
time limit: the fixed depth is the only bound on the search. Keeping the
generation order fixed makes the searched tree, and the choice among equal
moves, reproducible.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..board import Board, indent_string
from ..encoding import opponent
from ..models import AIConfig
from ..move import Move
from .base import BaseAI
from .evaluator import PositionEvaluator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchResult:
    """Outcome of one root search."""

    score: float
    best_move: Move
    boards_evaluated: int
    root_moves: int


class NegamaxAI(BaseAI):
    """AI that uses negamax with alpha-beta pruning.

    The board is mutated in place during :meth:`search`: every apply is
    paired with a revert before the enclosing node returns, so the board
    is back in its original state when the search finishes.
    """

    def __init__(self, player_number: int, config: AIConfig | None = None) -> None:
        super().__init__(player_number, config or AIConfig())
        self.evaluator = PositionEvaluator.from_config(self.config)
        self.max_depth: int = self.config.max_depth
        self.trace_tree: bool = self.config.trace_tree
        self.boards_evaluated: int = 0

    def evaluate_position(self, board: Board) -> float:
        return self.evaluator.estimate(board, self.player_number)

    def get_evaluation_breakdown(self, board: Board) -> dict[str, float]:
        return self.evaluator.breakdown(board, self.player_number)

    def select_move(self, board: Board) -> Move:
        """Best move for this AI on ``board``; a pass move if it cannot move."""
        return self.search(board).best_move

    def search(self, board: Board) -> SearchResult:
        """Run the full search from ``board`` with this AI to move."""
        self.boards_evaluated = 0
        root_moves = len(board.legal_moves(self.player_number))

        score, best_move = self._negamax(
            board, self.player_number, 0, float("-inf"), float("inf")
        )
        if best_move is None:
            # Game over or max_depth reached at the root: nothing to play.
            best_move = Move.pass_move()

        self.move_count += 1
        return SearchResult(
            score=score,
            best_move=best_move,
            boards_evaluated=self.boards_evaluated,
            root_moves=root_moves,
        )

    def _negamax(
        self,
        board: Board,
        player: int,
        depth: int,
        alpha: float,
        beta: float,
    ) -> tuple[float, Move | None]:
        """Score of ``board`` for ``player`` and the move that achieves it.

        The move is only meaningful to the root caller; it is ``None`` at
        leaves and when no move raised ``alpha``.
        """
        self.boards_evaluated += 1
        opp = opponent(player)
        moves = board.legal_moves(player)

        if not moves and not board.has_legal_move(opp):
            score = self.evaluator.terminal_score(board, player)
            if self.trace_tree:
                self._trace(board, player, depth, alpha, beta, f"GORes: {score}")
            return score, None

        if depth == self.max_depth:
            score = self.evaluator.estimate(board, player)
            if self.trace_tree:
                self._trace(board, player, depth, alpha, beta, f"EstRes: {score}")
            return score, None

        if self.trace_tree:
            self._trace(board, player, depth, alpha, beta)

        if not moves:
            moves = [Move.pass_move()]

        best_move: Move | None = None
        for move in moves:
            if alpha >= beta:
                if self.trace_tree:
                    logger.debug(
                        f"*** Search cutoff at depth {depth}. "
                        f"Alpha = {alpha}, Beta = {beta}"
                    )
                return alpha, best_move

            board.apply(move)
            score, _ = self._negamax(board, opp, depth + 1, -beta, -alpha)
            score = -score
            board.revert(move)

            if score > alpha:
                alpha = score
                best_move = move

        return alpha, best_move

    def _trace(
        self,
        board: Board,
        player: int,
        depth: int,
        alpha: float,
        beta: float,
        result: str = "",
    ) -> None:
        header = (
            f"Boards: {self.boards_evaluated} Player: {player} Depth: {depth} "
            f"Alpha: {alpha} Beta: {beta}"
        )
        if result:
            header = f"{header} {result}"
        logger.debug(f"{indent_string(depth)}{header}\n{board.to_text(depth)}")
