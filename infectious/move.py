"""
Moves on an Infectious board.

A step move takes an active colony one square (8-neighbourhood) to an empty
square. On arrival every adjacent enemy colony flips to the mover, keeping
its active/passive kind, and the vacated origin is left holding a passive
colony of the mover. The move keeps the full list of square changes so that
the board can apply it and revert it in place during search.

A pass move carries no squares and no changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .encoding import EMPTY, SQUARE_DIRECTIONS, active, is_player, opponent, passive
from .errors import InvalidMoveError
from .models import Command

if TYPE_CHECKING:
    from .board import Board


@dataclass(frozen=True, slots=True)
class Square:
    """Coordinates of a square."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True, slots=True)
class SquareChange:
    """A single reversible edit of one square.

    Records the old contents too, so the change can be undone.
    """

    x: int
    y: int
    old: int
    new: int

    def __str__(self) -> str:
        return f"[({self.x},{self.y}){self.old}->{self.new}]"


@dataclass(slots=True)
class Move:
    """A pass, or a step from ``origin`` to ``destination`` with its changes.

    Usage:
        move = Move.step(board, Square(2, 2), Square(3, 2), player=1)
        board.apply(move)
        ...
        board.revert(move)
    """

    origin: Square | None = None
    destination: Square | None = None
    changes: list[SquareChange] = field(default_factory=list)

    @classmethod
    def pass_move(cls) -> Move:
        return cls()

    @classmethod
    def step(
        cls,
        board: Board,
        origin: Square,
        destination: Square,
        player: int,
    ) -> Move:
        """Build the step move of ``player`` from ``origin`` to ``destination``.

        Raises:
            InvalidMoveError: if the player id is unknown, the destination is
                off the board or not empty, the origin does not hold the
                player's active colony, or the step is not exactly one square.
        """
        if not is_player(player):
            raise InvalidMoveError(
                f"Unknown player id {player}",
                context={"player": player},
            )
        if not board.is_on_board(destination.x, destination.y):
            raise InvalidMoveError(
                f"Destination {destination} is off the board",
                context={"width": board.width, "height": board.height},
            )
        if not board.is_on_board(origin.x, origin.y) or board.contents(
            origin.x, origin.y
        ) != active(player):
            raise InvalidMoveError(
                f"Origin {origin} does not hold an active colony of player {player}",
                context={"player": player},
            )
        dx = abs(origin.x - destination.x)
        dy = abs(origin.y - destination.y)
        if max(dx, dy) != 1:
            raise InvalidMoveError(
                f"Step {origin} -> {destination} is not exactly one square",
                context={"dx": dx, "dy": dy},
            )
        if board.contents(destination.x, destination.y) != EMPTY:
            raise InvalidMoveError(
                f"Destination {destination} is not empty",
                context={"contents": board.contents(destination.x, destination.y)},
            )

        opp = opponent(player)
        changes: list[SquareChange] = []
        for dx, dy in SQUARE_DIRECTIONS:
            x, y = destination.x + dx, destination.y + dy
            if not board.is_on_board(x, y):
                continue
            contents = board.contents(x, y)
            if contents == active(opp):
                changes.append(SquareChange(x, y, active(opp), active(player)))
            elif contents == passive(opp):
                changes.append(SquareChange(x, y, passive(opp), passive(player)))

        changes.append(
            SquareChange(origin.x, origin.y, active(player), passive(player))
        )
        changes.append(
            SquareChange(destination.x, destination.y, EMPTY, active(player))
        )
        return cls(origin=origin, destination=destination, changes=changes)

    @property
    def is_pass(self) -> bool:
        return self.origin is None

    @property
    def command(self) -> Command | None:
        """Host command for this move, ``None`` for a pass."""
        if self.is_pass:
            return None
        return Command(
            x_from=self.origin.x,
            y_from=self.origin.y,
            x_to=self.destination.x,
            y_to=self.destination.y,
        )

    @property
    def captures(self) -> list[SquareChange]:
        """Changes that flip an enemy colony (everything but origin and destination)."""
        return self.changes[:-2] if not self.is_pass else []

    def __str__(self) -> str:
        if self.is_pass:
            return "PASS"
        changes = " ".join(str(sc) for sc in self.changes)
        return f"{self.origin} -> {self.destination}: Changes: {changes}"
