"""Rules helpers for checkers: geometry, turn order, and action legality."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, Tuple

from engine.pieces import Cell, Side

if TYPE_CHECKING:
    from engine.board import Board, Move

BOARD_SIZE = 8
MOVE_DISTANCE = 1
CAPTURE_DISTANCE = 2

# Rows and columns are 1-indexed, row 1 being White's home row.
Position = Tuple[int, int]


class Direction(Enum):
    """Diagonal directions in the order the search tries them."""

    NE = (-1, 1)
    SE = (1, 1)
    SW = (1, -1)
    NW = (-1, -1)

    def step(self, pos: Position, distance: int) -> Position:
        d_row, d_col = self.value
        return (pos[0] + d_row * distance, pos[1] + d_col * distance)


class Verdict(str, Enum):
    """Outcome of checking a candidate action."""

    LEGAL = "legal"
    SOURCE_OUT_OF_BOUNDS = "source_out_of_bounds"
    TARGET_OUT_OF_BOUNDS = "target_out_of_bounds"
    EMPTY_SOURCE = "empty_source"
    OCCUPIED_TARGET = "occupied_target"
    WRONG_OWNER = "wrong_owner"
    ILLEGAL_ACTION = "illegal_action"

    @property
    def message(self) -> str:
        return VERDICT_MESSAGES[self]


VERDICT_MESSAGES: Dict[Verdict, str] = {
    Verdict.LEGAL: "",
    Verdict.SOURCE_OUT_OF_BOUNDS: "ERROR: Source cell is outside of the board.",
    Verdict.TARGET_OUT_OF_BOUNDS: "ERROR: Target cell is outside of the board.",
    Verdict.EMPTY_SOURCE: "ERROR: Source cell is empty.",
    Verdict.OCCUPIED_TARGET: "ERROR: Target cell is not empty.",
    Verdict.WRONG_OWNER: "ERROR: Source cell holds opponent's piece/tower.",
    Verdict.ILLEGAL_ACTION: "ERROR: Illegal action.",
}


class IllegalActionError(ValueError):
    """A human-entered action failed validation."""

    def __init__(self, verdict: Verdict, move: "Move") -> None:
        super().__init__(verdict.message)
        self.verdict = verdict
        self.move = move


def in_bounds(pos: Position) -> bool:
    """Return whether a position is inside the board."""
    row, col = pos
    return 1 <= row <= BOARD_SIZE and 1 <= col <= BOARD_SIZE


def midpoint(source: Position, target: Position) -> Position:
    """Return the square jumped over by a capture."""
    return ((source[0] + target[0]) // 2, (source[1] + target[1]) // 2)


def side_for_action(action_number: int) -> Side:
    """Side performing the 1-based action number. Black opens the game."""
    return Side.BLACK if action_number % 2 == 1 else Side.WHITE


def side_to_move(last_action_index: int) -> Side:
    """Side to act after ``last_action_index`` actions have been played."""
    return side_for_action(last_action_index + 1)


def classify(board: "Board", source: Position, target: Position, mover: Side) -> Verdict:
    """
    Check whether ``mover`` may play source -> target on ``board``.

    Checks run in a fixed order and the first failure is reported: bounds of
    the source, bounds of the target, empty source, occupied target, piece
    ownership, then geometry (diagonal, at most two squares, a jump must pass
    over an opposing piece, men never move backwards).
    """
    if not in_bounds(source):
        return Verdict.SOURCE_OUT_OF_BOUNDS
    if not in_bounds(target):
        return Verdict.TARGET_OUT_OF_BOUNDS

    piece = board.get_cell(source)
    if piece is Cell.EMPTY:
        return Verdict.EMPTY_SOURCE
    if board.get_cell(target) is not Cell.EMPTY:
        return Verdict.OCCUPIED_TARGET
    if piece.side is not mover:
        return Verdict.WRONG_OWNER

    d_row = target[0] - source[0]
    d_col = target[1] - source[1]
    if abs(d_row) != abs(d_col):
        return Verdict.ILLEGAL_ACTION
    if abs(d_row) > CAPTURE_DISTANCE:
        return Verdict.ILLEGAL_ACTION
    if abs(d_row) == CAPTURE_DISTANCE:
        captured = board.get_cell(midpoint(source, target))
        if captured is Cell.EMPTY or captured.side is mover:
            return Verdict.ILLEGAL_ACTION

    if not piece.is_king:
        if mover is Side.WHITE and d_row < 0:
            return Verdict.ILLEGAL_ACTION
        if mover is Side.BLACK and d_row > 0:
            return Verdict.ILLEGAL_ACTION
    return Verdict.LEGAL
