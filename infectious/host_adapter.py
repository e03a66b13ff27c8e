"""Host adapter for the Infectious AI.

The host engine calls into the core once per turn with a snapshot of the
world. This module is the only seam between the two: it builds a
:class:`Board` from the snapshot, runs the negamax search and translates the
chosen move back into a host :class:`Command` (``None`` meaning "pass").

Usage:
    from infectious.host_adapter import choose_move

    command, diagnostics = choose_move(snapshot, player_number=1)
    if command is None:
        host.pass_turn()
    else:
        host.move(command.x_from, command.y_from, command.x_to, command.y_to)
"""
from __future__ import annotations

import logging
import time

from .ai.negamax_ai import NegamaxAI
from .board import Board
from .models import AIConfig, Command, SearchDiagnostics, WorldSnapshot

__all__ = ["choose_move"]

logger = logging.getLogger(__name__)


def choose_move(
    snapshot: WorldSnapshot,
    player_number: int,
    config: AIConfig | None = None,
) -> tuple[Command | None, SearchDiagnostics]:
    """Pick this turn's command for ``player_number``.

    Args:
        snapshot: Turn-start world state from the host.
        player_number: The player to move (1 or 2).
        config: Search configuration; defaults to :class:`AIConfig`.

    Returns:
        The step command (``None`` to pass) and the search diagnostics.

    Raises:
        SnapshotSchemaError: if the snapshot cannot be represented.
        InvalidMoveError: if ``player_number`` is not 1 or 2.
    """
    config = config or AIConfig()
    ai = NegamaxAI(player_number, config)
    board = Board.from_snapshot(snapshot)

    start = time.perf_counter()
    result = ai.search(board)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    if result.best_move.is_pass:
        logger.info(
            f"{ai!r}: Best Move - PASS - after {result.boards_evaluated} boards"
        )
    else:
        logger.info(
            f"{ai!r}: Best Move - {result.best_move} - "
            f"after {result.boards_evaluated} boards"
        )

    diagnostics = SearchDiagnostics(
        score=result.score,
        boards_evaluated=result.boards_evaluated,
        max_depth=config.max_depth,
        root_moves=result.root_moves,
        elapsed_ms=elapsed_ms,
        evaluation=ai.get_evaluation_breakdown(board),
    )
    return result.best_move.command, diagnostics
