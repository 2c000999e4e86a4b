"""Base AI interface and decision outcomes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from engine.board import Board, Move
from engine.pieces import Side


@dataclass(frozen=True)
class Moved:
    """The AI played ``move`` for ``mover``, producing ``board``."""

    board: Board
    move: Move
    mover: Side
    value: Union[int, float]


@dataclass(frozen=True)
class Win:
    """The side to move had no action, so ``winner`` has won."""

    winner: Side


Decision = Union[Moved, Win]


class BaseAI(ABC):
    """Abstract AI strategy contract."""

    @abstractmethod
    def decide(self, board: Board, last_action_index: int) -> Decision:
        """Choose the next action after ``last_action_index`` actions have been played."""
        raise NotImplementedError
