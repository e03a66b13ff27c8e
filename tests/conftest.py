"""
Shared pytest fixtures for Infectious AI tests.

Boards are written in the same text form the board renders itself in:
the first row is the top of the board (highest ``y``) and

    '.' empty, '#' impassable, '1'/'2' active colony, '!'/'"' passive colony
"""

import random
from pathlib import Path
import sys
from typing import Callable, List, Optional, Sequence

import pytest

# Ensure the repository root is on sys.path so `import infectious` works when
# running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from infectious.board import Board
from infectious.models import GridSquare, WorldSnapshot


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def board_factory() -> Callable[[Sequence[str]], Board]:
    """Factory building a Board from its text rendering."""

    def _create_board(rows: Sequence[str]) -> Board:
        return Board.from_rows(list(rows))

    return _create_board


@pytest.fixture
def snapshot_factory() -> Callable[..., WorldSnapshot]:
    """Factory for host snapshots, from text rows or explicit squares."""

    symbol_to_square = {
        ".": GridSquare(contents="empty"),
        "#": GridSquare(contents="impassable"),
        "1": GridSquare(contents="active_colony", player=1),
        "2": GridSquare(contents="active_colony", player=2),
        "!": GridSquare(contents="passive_colony", player=1),
        '"': GridSquare(contents="passive_colony", player=2),
    }

    def _create_snapshot(
        rows: Optional[Sequence[str]] = None,
        squares: Optional[List[List[GridSquare]]] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> WorldSnapshot:
        if squares is None:
            assert rows is not None
            height = len(rows)
            width = len(rows[0])
            squares = [
                [symbol_to_square[rows[height - 1 - y][x]] for y in range(height)]
                for x in range(width)
            ]
        return WorldSnapshot(
            gridWidthInSquares=width if width is not None else len(squares),
            gridHeightInSquares=height if height is not None else len(squares[0]),
            squares=squares,
        )

    return _create_snapshot


def _make_random_board(
    rng: random.Random,
    width: int,
    height: int,
    colonies: int,
    impassable: int = 0,
) -> Board:
    """Board with ``colonies`` random colonies (at least one active each)."""
    cells = [(x, y) for x in range(width) for y in range(height)]
    rng.shuffle(cells)
    rows = [["."] * width for _ in range(height)]

    def put(cell, symbol):
        x, y = cell
        rows[height - 1 - y][x] = symbol

    for cell in cells[:impassable]:
        put(cell, "#")
    colony_cells = cells[impassable:impassable + colonies]
    for i, cell in enumerate(colony_cells):
        if i < 2:
            put(cell, "12"[i])
        else:
            put(cell, rng.choice(["1", "2", "!", '"']))
    return Board.from_rows(["".join(r) for r in rows])


@pytest.fixture
def random_board_factory() -> Callable[..., Board]:
    """Factory for seeded random boards, see ``_make_random_board``."""
    return _make_random_board


@pytest.fixture
def random_boards() -> List[Board]:
    """A fixed, seeded sample of small mid-game boards."""
    rng = random.Random(42)
    boards = []
    for _ in range(25):
        width = rng.randint(3, 6)
        height = rng.randint(3, 6)
        colonies = rng.randint(2, min(8, width * height - 2))
        impassable = rng.randint(0, 2)
        boards.append(_make_random_board(rng, width, height, colonies, impassable))
    return boards


# =============================================================================
# COMMON BOARD FIXTURES
# =============================================================================


@pytest.fixture
def capture_board(board_factory) -> Board:
    """5x5 board: player 1 active at (2,2), player 2 active at (3,3)."""
    return board_factory([
        ".....",
        "...2.",
        "..1..",
        ".....",
        ".....",
    ])


@pytest.fixture
def blocked_board(board_factory) -> Board:
    """Player 1's only colony at (1,3) is walled in; player 2 at (3,2) is free."""
    return board_factory([
        "###..",
        "#1#..",
        "###2.",
        ".....",
        ".....",
    ])


@pytest.fixture
def finished_board(board_factory) -> Board:
    """Neither side can move; player 1 has two colonies, player 2 one."""
    return board_factory([
        "1!#",
        "#2#",
    ])
