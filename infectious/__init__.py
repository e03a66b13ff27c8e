"""Decision core of an automated Infectious player.

    from infectious import choose_move

    command, diagnostics = choose_move(snapshot, player_number=1)
"""

from infectious.board import Board
from infectious.host_adapter import choose_move
from infectious.models import AIConfig, Command, MobilityPolicy, WorldSnapshot
from infectious.move import Move, Square, SquareChange

__all__ = [
    "AIConfig",
    "Board",
    "Command",
    "MobilityPolicy",
    "Move",
    "Square",
    "SquareChange",
    "WorldSnapshot",
    "choose_move",
]

__version__ = "1.0.0"
