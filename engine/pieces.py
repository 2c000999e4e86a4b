"""Cell contents, sides, and material costs for checkers."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict, Optional


class Side(str, Enum):
    """Player side."""

    BLACK = "black"
    WHITE = "white"

    def opponent(self) -> "Side":
        return Side.WHITE if self is Side.BLACK else Side.BLACK


class Cell(IntEnum):
    """State of one board square.

    Values double as the numpy storage codes used by ``Board``.
    """

    EMPTY = 0
    BLACK_MAN = 1
    WHITE_MAN = 2
    BLACK_KING = 3
    WHITE_KING = 4

    @property
    def side(self) -> Optional[Side]:
        return CELL_SIDE.get(self)

    @property
    def is_king(self) -> bool:
        return self in (Cell.BLACK_KING, Cell.WHITE_KING)

    @property
    def symbol(self) -> str:
        return CELL_SYMBOL[self]


COST_MAN = 1
COST_KING = 3

CELL_SIDE: Dict[Cell, Side] = {
    Cell.BLACK_MAN: Side.BLACK,
    Cell.BLACK_KING: Side.BLACK,
    Cell.WHITE_MAN: Side.WHITE,
    Cell.WHITE_KING: Side.WHITE,
}

CELL_SYMBOL: Dict[Cell, str] = {
    Cell.EMPTY: ".",
    Cell.BLACK_MAN: "b",
    Cell.WHITE_MAN: "w",
    Cell.BLACK_KING: "B",
    Cell.WHITE_KING: "W",
}

SYMBOL_CELL: Dict[str, Cell] = {symbol: cell for cell, symbol in CELL_SYMBOL.items()}

# Positive favours Black, negative favours White.
CELL_COST: Dict[Cell, int] = {
    Cell.EMPTY: 0,
    Cell.BLACK_MAN: COST_MAN,
    Cell.WHITE_MAN: -COST_MAN,
    Cell.BLACK_KING: COST_KING,
    Cell.WHITE_KING: -COST_KING,
}

PROMOTION: Dict[Cell, Cell] = {
    Cell.BLACK_MAN: Cell.BLACK_KING,
    Cell.WHITE_MAN: Cell.WHITE_KING,
}

# Colour swap used to mirror a position between the two sides.
SWAPPED: Dict[Cell, Cell] = {
    Cell.EMPTY: Cell.EMPTY,
    Cell.BLACK_MAN: Cell.WHITE_MAN,
    Cell.WHITE_MAN: Cell.BLACK_MAN,
    Cell.BLACK_KING: Cell.WHITE_KING,
    Cell.WHITE_KING: Cell.BLACK_KING,
}
