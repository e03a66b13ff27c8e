"""Square contents encoding shared by the board and move construction.

Contents are plain ints so that the board can live in a numpy array:

- ``EMPTY`` (0) and ``IMPASSABLE`` (-1)
- ``active(p)`` is ``p``, so player 1 and 2 active colonies are 1 and 2
- ``passive(p)`` is ``p + 100``, so passive colonies are 101 and 102

The game has exactly two players; ``opponent(p)`` is ``3 - p``.
"""

from __future__ import annotations

EMPTY = 0
IMPASSABLE = -1

PLAYERS: tuple[int, int] = (1, 2)

PASSIVE_OFFSET = 100

# 8-neighbour offsets, dx outer and dy inner. Move generation and capture
# scans walk neighbours in this order, so it fixes the order of moves.
SQUARE_DIRECTIONS: list[tuple[int, int]] = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]

# Symbols used by the text rendering of a board.
#   '1' / '2'  active colony of player 1 / 2
#   '!' / '"'  passive colony of player 1 / 2 (think [Shift] 1 / [Shift] 2)
#   '.'        empty square
#   '#'        impassable square
CONTENT_SYMBOLS: dict[int, str] = {
    EMPTY: ".",
    IMPASSABLE: "#",
    1: "1",
    2: "2",
    1 + PASSIVE_OFFSET: "!",
    2 + PASSIVE_OFFSET: '"',
}
SYMBOL_CONTENTS: dict[str, int] = {v: k for k, v in CONTENT_SYMBOLS.items()}


def active(player: int) -> int:
    """Contents of a square holding an active colony of ``player``."""
    return player


def passive(player: int) -> int:
    """Contents of a square holding a passive colony of ``player``."""
    return player + PASSIVE_OFFSET


def opponent(player: int) -> int:
    return 3 - player


def is_player(player: int) -> bool:
    return player in PLAYERS
