"""
Base AI Player class for the Infectious AI
Abstract base class that all AI implementations inherit from
"""

from abc import ABC, abstractmethod
from typing import Dict

from ..board import Board
from ..encoding import is_player, opponent
from ..errors import InvalidMoveError
from ..models import AIConfig
from ..move import Move


class BaseAI(ABC):
    """Abstract base class for all AI implementations"""

    def __init__(self, player_number: int, config: AIConfig):
        """
        Initialize AI player

        Args:
            player_number: The player this AI controls (1 or 2)
            config: AI configuration settings
        """
        if not is_player(player_number):
            raise InvalidMoveError(
                f"Unknown player id {player_number}",
                context={"player": player_number},
            )
        self.player_number = player_number
        self.opponent_number = opponent(player_number)
        self.config = config
        self.move_count = 0

    @abstractmethod
    def select_move(self, board: Board) -> Move:
        """
        Select the best move for the current board

        Args:
            board: Current board; returned to its original state afterwards

        Returns:
            Selected move, a pass move if there is nothing better to do
        """
        pass

    @abstractmethod
    def evaluate_position(self, board: Board) -> float:
        """
        Evaluate the current position from this AI's perspective

        Args:
            board: Current board

        Returns:
            Evaluation score (positive = good for this AI, negative = bad)
        """
        pass

    def get_evaluation_breakdown(self, board: Board) -> Dict[str, float]:
        """
        Get detailed breakdown of position evaluation

        Args:
            board: Current board

        Returns:
            Dictionary with evaluation components
        """
        return {
            "total": self.evaluate_position(board)
        }

    def get_valid_moves(self, board: Board) -> list[Move]:
        """Step moves available to this AI on ``board``, in scan order."""
        return board.legal_moves(self.player_number)

    def __repr__(self) -> str:
        """String representation of AI"""
        return (
            f"{self.__class__.__name__}"
            f"(player={self.player_number}, "
            f"max_depth={self.config.max_depth})"
        )
