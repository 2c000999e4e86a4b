"""Shared pytest fixtures for checkers tests."""

from __future__ import annotations

from typing import Callable, Dict

import pytest

from engine.board import Board
from engine.pieces import Cell
from engine.rules import Position

BoardFactory = Callable[[Dict[Position, Cell]], Board]


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def make_board() -> BoardFactory:
    """Build a board holding only the given pieces."""

    def _make(pieces: Dict[Position, Cell]) -> Board:
        board = Board.empty()
        for pos, cell in pieces.items():
            board.set_cell(pos, cell)
        return board

    return _make
