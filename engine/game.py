"""Game session: the authoritative board and the action counter."""

from __future__ import annotations

import logging
from typing import Optional

from engine.board import Board, Move, MoveResult
from engine.pieces import Side
from engine.rules import IllegalActionError, Verdict, classify, side_to_move

LOGGER = logging.getLogger(__name__)


class GameSession:
    """
    Owns the current board between turns.

    The board is never edited in place: human moves are applied to a copy and
    computed moves arrive as a finished board, and either one replaces the
    current board wholesale.
    """

    def __init__(self, board: Optional[Board] = None) -> None:
        self.board = board if board is not None else Board.initial()
        self.action_count = 0

    @property
    def mover(self) -> Side:
        """Side to act next."""
        return side_to_move(self.action_count)

    def play_human_move(self, move: Move) -> MoveResult:
        """Validate and apply a human action; raise IllegalActionError if it is rejected."""
        action_number = self.action_count + 1
        mover = self.mover
        verdict = classify(self.board, move.source, move.target, mover)
        if verdict is not Verdict.LEGAL:
            LOGGER.info("Rejected action #%d %s: %s", action_number, move, verdict.value)
            raise IllegalActionError(verdict, move)

        next_board = self.board.clone()
        result = next_board.apply_move(move)
        self.commit(next_board)
        return result

    def commit(self, board: Board) -> None:
        """Replace the current board with the result of the next action."""
        self.board = board
        self.action_count += 1
        LOGGER.debug("Action #%d committed, cost=%d", self.action_count, board.material_cost())
