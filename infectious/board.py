"""Board representation for the Infectious AI.

The board is the one piece of mutable state touched during search. It is
built once per turn from the host snapshot, then moves are applied and
reverted in place (never copied per node), so at any point during the
search the board matches the path from the root to the current node.

Contents use the int encoding from :mod:`infectious.encoding`, stored in a
numpy array of shape ``(width, height)`` indexed ``grid[x, y]``.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .encoding import (
    CONTENT_SYMBOLS,
    EMPTY,
    IMPASSABLE,
    SQUARE_DIRECTIONS,
    SYMBOL_CONTENTS,
    active,
    is_player,
    opponent,
    passive,
)
from .errors import BoardStateMismatchError, SnapshotSchemaError
from .models import MobilityPolicy, SquareContents, WorldSnapshot
from .move import Move, Square

__all__ = ["Board"]

logger = logging.getLogger(__name__)

BLOCK_SIZE = 3


class Board:
    """Grid contents plus the reversible apply/revert primitive.

    The board knows nothing about search strategy; it answers queries about
    colonies, mobility and 3x3 blocks, and generates legal moves.
    """

    def __init__(self, width: int, height: int, grid: np.ndarray | None = None):
        self.width = width
        self.height = height
        if grid is None:
            grid = np.full((width, height), EMPTY, dtype=np.int16)
        elif grid.shape != (width, height):
            raise ValueError(
                f"Grid shape {grid.shape} does not match {width}x{height}"
            )
        self.grid = grid

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_snapshot(cls, snapshot: WorldSnapshot) -> Board:
        """Copy the host snapshot into the board encoding.

        Raises:
            SnapshotSchemaError: if the squares do not match the declared
                dimensions, a square carries an unrecognised contents tag,
                or a colony has no valid owner.
        """
        width, height = snapshot.width, snapshot.height
        if len(snapshot.squares) != width or any(
            len(column) != height for column in snapshot.squares
        ):
            raise SnapshotSchemaError(
                "Snapshot squares do not match the declared grid size",
                context={"width": width, "height": height},
            )

        board = cls(width, height)
        for x in range(width):
            for y in range(height):
                board.grid[x, y] = _encode_square(
                    snapshot.squares[x][y].contents,
                    snapshot.squares[x][y].player,
                    x,
                    y,
                )
        logger.debug(f"Board {width}x{height} built from host snapshot")
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Parse the text rendering of a board (see :meth:`to_text`).

        ``rows[0]`` is the top row of the rendering, i.e. the highest ``y``.
        """
        height = len(rows)
        if height == 0:
            raise ValueError("Board needs at least one row")
        width = len(rows[0])
        board = cls(width, height)
        for row_index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {row_index} has {len(row)} squares, expected {width}")
            y = height - 1 - row_index
            for x, symbol in enumerate(row):
                if symbol not in SYMBOL_CONTENTS:
                    raise ValueError(f"Unknown board symbol {symbol!r}")
                board.grid[x, y] = SYMBOL_CONTENTS[symbol]
        return board

    def copy(self) -> Board:
        return Board(self.width, self.height, self.grid.copy())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_on_board(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def contents(self, x: int, y: int) -> int:
        return int(self.grid[x, y])

    def colony_count(self, kind: int) -> int:
        """Number of squares holding ``kind``."""
        return int(np.count_nonzero(self.grid == kind))

    def block_count(self, kind: int) -> int:
        """Number of fully packed 3x3 blocks of ``kind``.

        Every in-bounds 3x3 window is counted, so overlapping blocks each
        count: a packed 4x3 area holds two blocks.
        """
        if self.width < BLOCK_SIZE or self.height < BLOCK_SIZE:
            return 0
        windows = sliding_window_view(self.grid == kind, (BLOCK_SIZE, BLOCK_SIZE))
        return int(np.count_nonzero(windows.all(axis=(2, 3))))

    def colony_advantage(self, player: int) -> int:
        """Colonies of ``player`` minus colonies of the opponent."""
        opp = opponent(player)
        return (
            self.colony_count(active(player))
            + self.colony_count(passive(player))
            - self.colony_count(active(opp))
            - self.colony_count(passive(opp))
        )

    def total_colonies(self) -> int:
        return sum(
            self.colony_count(kind(player))
            for player in (1, 2)
            for kind in (active, passive)
        )

    def adjacent_empty_squares(self, x: int, y: int) -> list[Square]:
        """Empty squares around ``(x, y)`` in neighbour order."""
        squares = []
        for dx, dy in SQUARE_DIRECTIONS:
            i, j = x + dx, y + dy
            if self.is_on_board(i, j) and self.grid[i, j] == EMPTY:
                squares.append(Square(i, j))
        return squares

    def _active_squares(self, player: int) -> list[tuple[int, int]]:
        # argwhere walks the (x, y) array row-major: x outer, y inner.
        return [(int(x), int(y)) for x, y in np.argwhere(self.grid == active(player))]

    def mobility(
        self,
        player: int,
        policy: MobilityPolicy = MobilityPolicy.SUMMED,
    ) -> int:
        """Free squares next to ``player``'s active colonies.

        With ``SUMMED`` a square next to several colonies is counted once per
        colony, so the value equals the number of legal moves. With
        ``LAST_SCANNED`` only the last active colony in scan order counts.
        """
        colonies = self._active_squares(player)
        if not colonies:
            return 0
        if policy == MobilityPolicy.LAST_SCANNED:
            x, y = colonies[-1]
            return len(self.adjacent_empty_squares(x, y))
        return sum(len(self.adjacent_empty_squares(x, y)) for x, y in colonies)

    # ------------------------------------------------------------------
    # Move generation
    # ------------------------------------------------------------------

    def legal_moves(self, player: int) -> list[Move]:
        """All step moves of ``player`` in scan order.

        Colonies are visited x outer, y inner, and each colony's targets in
        neighbour order. No move ordering is applied; the order decides
        which moves get pruned and which of several equal moves is chosen.
        """
        moves = []
        for x, y in self._active_squares(player):
            origin = Square(x, y)
            for target in self.adjacent_empty_squares(x, y):
                moves.append(Move.step(self, origin, target, player))
        return moves

    def has_legal_move(self, player: int) -> bool:
        for x, y in self._active_squares(player):
            for dx, dy in SQUARE_DIRECTIONS:
                i, j = x + dx, y + dy
                if self.is_on_board(i, j) and self.grid[i, j] == EMPTY:
                    return True
        return False

    # ------------------------------------------------------------------
    # Apply / revert
    # ------------------------------------------------------------------

    def apply(self, move: Move) -> None:
        """Apply ``move`` in place; a pass leaves the board untouched.

        Raises:
            BoardStateMismatchError: if a square does not hold the contents
                the change expects to replace.
        """
        for sc in move.changes:
            actual = int(self.grid[sc.x, sc.y])
            if actual != sc.old:
                raise BoardStateMismatchError(
                    "Square does not hold the contents the move replaces",
                    sc.x, sc.y, expected=sc.old, actual=actual,
                )
            self.grid[sc.x, sc.y] = sc.new

    def revert(self, move: Move) -> None:
        """Undo ``move`` previously applied to this board.

        Raises:
            BoardStateMismatchError: if a square does not hold the contents
                the move left there.
        """
        for sc in move.changes:
            actual = int(self.grid[sc.x, sc.y])
            if actual != sc.new:
                raise BoardStateMismatchError(
                    "Square does not hold the contents the move left there",
                    sc.x, sc.y, expected=sc.new, actual=actual,
                )
            self.grid[sc.x, sc.y] = sc.old

    # ------------------------------------------------------------------
    # Evaluation shortcuts
    # ------------------------------------------------------------------

    def estimate(self, player: int) -> float:
        """Heuristic score from ``player``'s view with the default profile."""
        from .ai.evaluator import PositionEvaluator

        return PositionEvaluator.default().estimate(self, player)

    def terminal_score(self, player: int) -> float:
        """Game-over score from ``player``'s view; assumes the game is over."""
        from .ai.evaluator import PositionEvaluator

        return PositionEvaluator.default().terminal_score(self, player)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_text(self, indent_level: int = 0) -> str:
        """Render the board, top row first, indented for search traces."""
        indent = indent_string(indent_level)
        lines = []
        for y in range(self.height - 1, -1, -1):
            row = "".join(CONTENT_SYMBOLS[int(self.grid[x, y])] for x in range(self.width))
            lines.append(indent + row)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and bool(np.array_equal(self.grid, other.grid))
        )

    __hash__ = None  # mutable


def indent_string(indent_level: int) -> str:
    """Indent used for boards at this depth of a search trace."""
    return "|  " * indent_level


def _encode_square(contents: str, player: int | None, x: int, y: int) -> int:
    try:
        tag = SquareContents(contents)
    except ValueError:
        raise SnapshotSchemaError(
            f"Unrecognised square contents {contents!r}",
            context={"square": f"({x},{y})"},
        ) from None

    if tag == SquareContents.EMPTY:
        return EMPTY
    if tag == SquareContents.IMPASSABLE:
        return IMPASSABLE
    if player is None or not is_player(player):
        raise SnapshotSchemaError(
            f"Colony without a valid owner: {player!r}",
            context={"square": f"({x},{y})", "contents": contents},
        )
    if tag == SquareContents.ACTIVE_COLONY:
        return active(player)
    return passive(player)
