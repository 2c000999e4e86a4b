"""Tests for action legality and turn order."""

import pytest

from engine.board import Board, Move
from engine.pieces import Cell, Side
from engine.rules import (
    Direction,
    IllegalActionError,
    Verdict,
    classify,
    in_bounds,
    side_for_action,
    side_to_move,
)


class TestPrecedence:
    def test_source_out_of_bounds_first(self, initial_board: Board) -> None:
        assert classify(initial_board, (0, 1), (9, 9), Side.BLACK) is Verdict.SOURCE_OUT_OF_BOUNDS
        assert classify(initial_board, (6, 9), (5, 8), Side.BLACK) is Verdict.SOURCE_OUT_OF_BOUNDS

    def test_target_out_of_bounds(self, initial_board: Board) -> None:
        assert classify(initial_board, (6, 1), (5, 0), Side.BLACK) is Verdict.TARGET_OUT_OF_BOUNDS

    def test_empty_source_before_occupied_target(self, initial_board: Board) -> None:
        assert classify(initial_board, (4, 1), (3, 2), Side.BLACK) is Verdict.EMPTY_SOURCE

    def test_occupied_target(self, initial_board: Board) -> None:
        assert classify(initial_board, (7, 2), (6, 1), Side.BLACK) is Verdict.OCCUPIED_TARGET

    def test_wrong_owner(self, initial_board: Board) -> None:
        assert classify(initial_board, (3, 2), (4, 1), Side.BLACK) is Verdict.WRONG_OWNER
        assert classify(initial_board, (6, 1), (5, 2), Side.WHITE) is Verdict.WRONG_OWNER

    def test_opening_moves_are_legal(self, initial_board: Board) -> None:
        assert classify(initial_board, (6, 1), (5, 2), Side.BLACK) is Verdict.LEGAL
        assert classify(initial_board, (3, 2), (4, 1), Side.WHITE) is Verdict.LEGAL


class TestGeometry:
    @pytest.fixture
    def board(self, make_board) -> Board:
        return make_board({(5, 4): Cell.BLACK_MAN, (4, 5): Cell.WHITE_MAN})

    def test_not_diagonal(self, board: Board) -> None:
        assert classify(board, (5, 4), (4, 4), Side.BLACK) is Verdict.ILLEGAL_ACTION

    def test_too_far(self, board: Board) -> None:
        assert classify(board, (5, 4), (2, 1), Side.BLACK) is Verdict.ILLEGAL_ACTION

    def test_jump_over_opponent(self, board: Board) -> None:
        assert classify(board, (5, 4), (3, 6), Side.BLACK) is Verdict.LEGAL
        assert classify(board, (4, 5), (6, 3), Side.WHITE) is Verdict.LEGAL

    def test_jump_over_nothing(self, board: Board) -> None:
        assert classify(board, (5, 4), (3, 2), Side.BLACK) is Verdict.ILLEGAL_ACTION

    def test_jump_over_own_piece(self, make_board) -> None:
        board = make_board({(5, 4): Cell.BLACK_MAN, (4, 5): Cell.BLACK_KING})
        assert classify(board, (5, 4), (3, 6), Side.BLACK) is Verdict.ILLEGAL_ACTION

    def test_men_cannot_move_backwards(self, board: Board) -> None:
        assert classify(board, (5, 4), (6, 5), Side.BLACK) is Verdict.ILLEGAL_ACTION
        assert classify(board, (4, 5), (3, 4), Side.WHITE) is Verdict.ILLEGAL_ACTION

    def test_men_cannot_capture_backwards(self, make_board) -> None:
        board = make_board({(5, 4): Cell.BLACK_MAN, (6, 5): Cell.WHITE_MAN})
        assert classify(board, (5, 4), (7, 6), Side.BLACK) is Verdict.ILLEGAL_ACTION


class TestKings:
    def test_kings_move_backwards(self, make_board) -> None:
        board = make_board({(5, 4): Cell.BLACK_KING, (3, 4): Cell.WHITE_KING})
        assert classify(board, (5, 4), (6, 5), Side.BLACK) is Verdict.LEGAL
        assert classify(board, (3, 4), (2, 3), Side.WHITE) is Verdict.LEGAL

    def test_kings_capture_backwards(self, make_board) -> None:
        board = make_board({(5, 4): Cell.BLACK_KING, (6, 5): Cell.WHITE_MAN})
        assert classify(board, (5, 4), (7, 6), Side.BLACK) is Verdict.LEGAL

    def test_kings_have_no_extra_range(self, make_board) -> None:
        board = make_board({(5, 4): Cell.BLACK_KING})
        assert classify(board, (5, 4), (8, 7), Side.BLACK) is Verdict.ILLEGAL_ACTION
        assert classify(board, (5, 4), (7, 6), Side.BLACK) is Verdict.ILLEGAL_ACTION


class TestHelpers:
    def test_in_bounds(self) -> None:
        assert in_bounds((1, 1))
        assert in_bounds((8, 8))
        assert not in_bounds((0, 4))
        assert not in_bounds((4, 9))

    def test_direction_order_and_steps(self) -> None:
        assert list(Direction) == [Direction.NE, Direction.SE, Direction.SW, Direction.NW]
        assert Direction.NE.step((5, 4), 1) == (4, 5)
        assert Direction.SW.step((5, 4), 2) == (7, 2)

    def test_turn_order(self) -> None:
        assert side_for_action(1) is Side.BLACK
        assert side_for_action(2) is Side.WHITE
        assert side_to_move(0) is Side.BLACK
        assert side_to_move(1) is Side.WHITE
        assert side_to_move(10) is Side.BLACK

    def test_error_carries_verdict(self) -> None:
        move = Move(source=(4, 1), target=(5, 2))
        error = IllegalActionError(Verdict.EMPTY_SOURCE, move)
        assert isinstance(error, ValueError)
        assert error.verdict is Verdict.EMPTY_SOURCE
        assert error.move == move
        assert str(error) == "ERROR: Source cell is empty."
