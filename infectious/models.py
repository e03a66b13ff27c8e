"""
Pydantic Models for the Infectious AI
Mirrors the host engine's world-state snapshot and turn command shapes
"""

import os
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

# Search depth used when AIConfig.max_depth is not given explicitly.
#   export INFECTIOUS_MAX_DEPTH=5
DEFAULT_MAX_DEPTH = int(os.getenv("INFECTIOUS_MAX_DEPTH", "7"))

# Log every search node (and the board at that node) at DEBUG level.
# The tree is very large at the default depth; keep this off outside debugging.
DEFAULT_TRACE_TREE = os.getenv(
    "INFECTIOUS_TRACE_TREE", "false"
).lower() in ("true", "1", "yes")


class SquareContents(str, Enum):
    """Square contents tags understood from the host snapshot"""
    EMPTY = "empty"
    IMPASSABLE = "impassable"
    ACTIVE_COLONY = "active_colony"
    PASSIVE_COLONY = "passive_colony"


class MobilityPolicy(str, Enum):
    """How free squares around a player's active colonies are aggregated.

    SUMMED counts, for every active colony, each adjacent empty square; a
    square next to two colonies counts twice. LAST_SCANNED reports only the
    squares next to the last active colony in scan order, which reproduces
    the search traces of the first version of this player.
    """
    SUMMED = "summed"
    LAST_SCANNED = "last_scanned"


class GridSquare(BaseModel):
    """One square of the host snapshot.

    ``contents`` is kept as the raw host tag so that unknown tags reach
    the board constructor and are reported as a schema mismatch.
    """
    contents: str
    player: Optional[int] = None

    class Config:
        frozen = True


class WorldSnapshot(BaseModel):
    """Turn-start snapshot handed over by the host.

    ``squares`` is indexed ``squares[x][y]``; ``y`` grows upwards.
    """
    width: int = Field(ge=1, alias="gridWidthInSquares")
    height: int = Field(ge=1, alias="gridHeightInSquares")
    squares: List[List[GridSquare]]

    class Config:
        populate_by_name = True


class Command(BaseModel):
    """Step command returned to the host: move one active colony one square"""
    x_from: int = Field(alias="xFrom")
    y_from: int = Field(alias="yFrom")
    x_to: int = Field(alias="xTo")
    y_to: int = Field(alias="yTo")

    class Config:
        populate_by_name = True
        frozen = True

    def __str__(self) -> str:
        return f"({self.x_from},{self.y_from}) -> ({self.x_to},{self.y_to})"


class AIConfig(BaseModel):
    """AI configuration"""
    max_depth: int = Field(DEFAULT_MAX_DEPTH, ge=1, alias="maxDepth")
    heuristic_profile_id: str = Field(
        "infectious_v1_default", alias="heuristicProfileId"
    )
    mobility_policy: MobilityPolicy = Field(
        MobilityPolicy.SUMMED, alias="mobilityPolicy"
    )
    trace_tree: bool = Field(DEFAULT_TRACE_TREE, alias="traceTree")

    class Config:
        populate_by_name = True


class SearchDiagnostics(BaseModel):
    """Diagnostics reported alongside the chosen command"""
    score: float
    boards_evaluated: int = Field(alias="boardsEvaluated")
    max_depth: int = Field(alias="maxDepth")
    root_moves: int = Field(alias="rootMoves")
    elapsed_ms: float = Field(alias="elapsedMs")
    evaluation: Dict[str, float] = Field(default_factory=dict)

    class Config:
        populate_by_name = True
