"""
Infectious AI Error Hierarchy

Unified exception hierarchy for the decision core. All custom exceptions
inherit from InfectiousError so a host can catch and report them in one place.

None of these are caught inside the core: a contract violation aborts the
current search and the turn produces no partial result.

Usage:
    from infectious.errors import InvalidMoveError, SnapshotSchemaError

    try:
        command, diagnostics = choose_move(snapshot, player_number=1)
    except SnapshotSchemaError as e:
        logger.error(f"Host snapshot rejected: {e.message}")
        raise
"""

from typing import Any

__all__ = [
    "BoardStateMismatchError",
    "ConfigurationError",
    # Base error
    "InfectiousError",
    # Game rules errors
    "InvalidMoveError",
    "InvalidStateError",
    # Host boundary errors
    "SnapshotSchemaError",
    # Validation errors
    "ValidationError",
]


class InfectiousError(Exception):
    """Base exception for all Infectious AI errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "INFECTIOUS_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Game Rules Errors
# =============================================================================


class InvalidMoveError(InfectiousError):
    """Step move whose preconditions do not hold.

    Raised while constructing a move: unknown player id, destination off
    the board or not empty, origin not holding the mover's active colony,
    or a step that is not exactly one square.
    """
    code: str = "INVALID_MOVE"


class InvalidStateError(InfectiousError):
    """Corrupted or unexpected board state."""
    code: str = "INVALID_STATE"


class BoardStateMismatchError(InvalidStateError):
    """A square change does not match the board it is applied to.

    Raised by ``Board.apply`` when a square does not hold the change's old
    contents, and by ``Board.revert`` when it does not hold the new contents.
    Either means apply/revert calls were not paired on the search stack.

    Attributes:
        expected: Contents the change expected to find
        actual: Contents actually found on the board
    """
    code: str = "BOARD_STATE_MISMATCH"

    def __init__(
        self,
        message: str,
        x: int,
        y: int,
        expected: int,
        actual: int,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.expected = expected
        self.actual = actual
        self.context["square"] = f"({x},{y})"
        self.context["expected"] = expected
        self.context["actual"] = actual


# =============================================================================
# Host Boundary Errors
# =============================================================================


class SnapshotSchemaError(InfectiousError):
    """Host snapshot the board cannot represent.

    Signals a version or schema mismatch with the host: an unrecognised
    square contents tag, a colony without a valid owner, or a square grid
    that does not match the declared dimensions. Fatal for the turn.
    """
    code: str = "SNAPSHOT_SCHEMA"


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(InfectiousError):
    """Base class for validation errors."""
    code: str = "VALIDATION_ERROR"


class ConfigurationError(ValidationError):
    """Invalid configuration (e.g. unknown heuristic profile)."""
    code: str = "CONFIGURATION_ERROR"
