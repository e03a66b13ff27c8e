"""Tests for step move construction and its capture/flip semantics."""

import pytest

from infectious.encoding import EMPTY, active, passive
from infectious.errors import InvalidMoveError
from infectious.models import Command
from infectious.move import Move, Square, SquareChange


class TestStepMove:
    def test_single_capture(self, capture_board):
        move = Move.step(capture_board, Square(2, 2), Square(3, 2), player=1)

        assert move.changes == [
            SquareChange(3, 3, active(2), active(1)),
            SquareChange(2, 2, active(1), passive(1)),
            SquareChange(3, 2, EMPTY, active(1)),
        ]
        assert move.captures == [SquareChange(3, 3, active(2), active(1))]

    def test_passive_colonies_flip_and_stay_passive(self, board_factory):
        board = board_factory([
            '""2',
            '.1.',
            '...',
        ])
        move = Move.step(board, Square(1, 1), Square(1, 0), player=1)

        # Nothing of player 2 touches (1,0).
        assert move.captures == []

        move = Move.step(board, Square(1, 1), Square(2, 1), player=1)
        assert move.captures == [
            SquareChange(1, 2, passive(2), passive(1)),
            SquareChange(2, 2, active(2), active(1)),
        ]

    def test_own_colonies_and_walls_untouched(self, board_factory):
        board = board_factory([
            '!#1',
            '.1.',
        ])
        move = Move.step(board, Square(1, 0), Square(0, 0), player=1)
        assert move.captures == []
        assert len(move.changes) == 2

    def test_player_two_captures(self, capture_board):
        move = Move.step(capture_board, Square(3, 3), Square(2, 3), player=2)
        assert move.captures == [SquareChange(2, 2, active(1), active(2))]

    def test_command(self, capture_board):
        move = Move.step(capture_board, Square(2, 2), Square(3, 2), player=1)
        assert move.command == Command(x_from=2, y_from=2, x_to=3, y_to=2)
        assert not move.is_pass

    def test_str(self, capture_board):
        move = Move.step(capture_board, Square(2, 2), Square(1, 1), player=1)
        assert str(move) == "(2,2) -> (1,1): Changes: [(2,2)1->101] [(1,1)0->1]"


class TestPassMove:
    def test_pass_has_no_effect(self):
        move = Move.pass_move()
        assert move.is_pass
        assert move.changes == []
        assert move.captures == []
        assert move.command is None
        assert str(move) == "PASS"


class TestPreconditions:
    def test_unknown_player(self, capture_board):
        with pytest.raises(InvalidMoveError):
            Move.step(capture_board, Square(2, 2), Square(2, 3), player=3)

    def test_destination_off_board(self, board_factory):
        board = board_factory(["1.", ".."])
        with pytest.raises(InvalidMoveError):
            Move.step(board, Square(0, 1), Square(-1, 1), player=1)

    def test_origin_not_active_colony_of_mover(self, capture_board):
        with pytest.raises(InvalidMoveError):
            Move.step(capture_board, Square(3, 3), Square(3, 2), player=1)
        with pytest.raises(InvalidMoveError):
            Move.step(capture_board, Square(0, 0), Square(0, 1), player=1)

    def test_origin_off_board(self, capture_board):
        with pytest.raises(InvalidMoveError):
            Move.step(capture_board, Square(-1, 0), Square(0, 0), player=1)

    @pytest.mark.parametrize("destination", [Square(2, 2), Square(4, 2), Square(2, 0)])
    def test_step_must_be_one_square(self, capture_board, destination):
        with pytest.raises(InvalidMoveError):
            Move.step(capture_board, Square(2, 2), destination, player=1)

    def test_destination_must_be_empty(self, capture_board):
        with pytest.raises(InvalidMoveError) as exc_info:
            Move.step(capture_board, Square(2, 2), Square(3, 3), player=1)

        assert exc_info.value.code == "INVALID_MOVE"
