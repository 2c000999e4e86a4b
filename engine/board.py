"""Checkers board state, move application, and material scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np

from engine.pieces import CELL_COST, PROMOTION, SWAPPED, SYMBOL_CELL, Cell, Side
from engine.rules import BOARD_SIZE, CAPTURE_DISTANCE, Position, midpoint

ROWS_WITH_PIECES = 3

COLUMN_LETTERS = "ABCDEFGH"
HEADER = "     " + "   ".join(COLUMN_LETTERS)
ROW_SEPARATOR = "   +" + "---+" * BOARD_SIZE

# Cost lookup indexed by the numpy cell code.
_COST_TABLE = np.array([CELL_COST[cell] for cell in Cell], dtype=np.int64)
_SWAP_TABLE = np.array([SWAPPED[cell] for cell in Cell], dtype=np.int8)


@dataclass(frozen=True)
class Move:
    """A single step or jump from one square to another."""

    source: Position
    target: Position

    @property
    def is_capture(self) -> bool:
        return abs(self.target[0] - self.source[0]) == CAPTURE_DISTANCE

    @property
    def captured_pos(self) -> Optional[Position]:
        if not self.is_capture:
            return None
        return midpoint(self.source, self.target)


@dataclass(frozen=True)
class MoveResult:
    """Result metadata for an applied move."""

    captured: Cell
    promoted: bool


class Board:
    """8x8 checkers board addressed by 1-indexed (row, col)."""

    rows: int = BOARD_SIZE
    cols: int = BOARD_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None) -> None:
        if grid is None:
            grid = np.zeros((self.rows, self.cols), dtype=np.int8)
        if grid.shape != (self.rows, self.cols):
            raise ValueError(f"Board grid must be {self.rows}x{self.cols}, got {grid.shape}")
        self.grid = grid

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def initial(cls) -> "Board":
        """Standard opening: White on rows 1-3, Black on rows 6-8, dark squares only."""
        board = cls()
        for row in range(1, ROWS_WITH_PIECES + 1):
            for col in range(1, board.cols + 1):
                if (row + col) % 2 == 1:
                    board.set_cell((row, col), Cell.WHITE_MAN)
        for row in range(board.rows - ROWS_WITH_PIECES + 1, board.rows + 1):
            for col in range(1, board.cols + 1):
                if (row + col) % 2 == 1:
                    board.set_cell((row, col), Cell.BLACK_MAN)
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Build a board from eight strings of cell symbols, row 1 first."""
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        board = cls()
        for row_idx, line in enumerate(rows, start=1):
            symbols = line.replace(" ", "")
            if len(symbols) != BOARD_SIZE:
                raise ValueError(f"Row {row_idx} must have {BOARD_SIZE} cells: {line!r}")
            for col_idx, symbol in enumerate(symbols, start=1):
                if symbol not in SYMBOL_CELL:
                    raise ValueError(f"Unknown cell symbol {symbol!r} in row {row_idx}")
                board.set_cell((row_idx, col_idx), SYMBOL_CELL[symbol])
        return board

    def clone(self) -> "Board":
        """Deep copy of the board."""
        return Board(self.grid.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board(cost={self.material_cost()})"

    def iter_positions(self) -> Iterable[Position]:
        """Yield all board positions in row-major order."""
        for row in range(1, self.rows + 1):
            for col in range(1, self.cols + 1):
                yield (row, col)

    def get_cell(self, pos: Position) -> Cell:
        row, col = pos
        return Cell(int(self.grid[row - 1, col - 1]))

    def set_cell(self, pos: Position, cell: Cell) -> None:
        row, col = pos
        self.grid[row - 1, col - 1] = cell

    def apply_move(self, move: Move) -> MoveResult:
        """
        Apply a move already accepted by ``classify`` and crown any arrival.

        The piece is relocated and the source cleared; a capture also clears
        the jumped square.
        """
        piece = self.get_cell(move.source)
        captured = Cell.EMPTY
        captured_pos = move.captured_pos
        if captured_pos is not None:
            captured = self.get_cell(captured_pos)
            self.set_cell(captured_pos, Cell.EMPTY)
        self.set_cell(move.target, piece)
        self.set_cell(move.source, Cell.EMPTY)
        promoted = self.apply_promotion()
        return MoveResult(captured=captured, promoted=promoted)

    def apply_promotion(self) -> bool:
        """Crown at most one man: a Black man on row 1 first, else a White man on row 8."""
        for row, man in ((1, Cell.BLACK_MAN), (self.rows, Cell.WHITE_MAN)):
            for col in range(1, self.cols + 1):
                if self.get_cell((row, col)) is man:
                    self.set_cell((row, col), PROMOTION[man])
                    return True
        return False

    def material_cost(self) -> int:
        """Return 3*BK + BM - 3*WK - WM. Positive favours Black."""
        return int(_COST_TABLE[self.grid].sum())

    def piece_count(self, side: Side) -> int:
        codes = [cell for cell in Cell if cell.side is side]
        return int(np.isin(self.grid, codes).sum())

    def swapped_colours(self) -> "Board":
        """Return a copy with every Black piece replaced by its White counterpart and vice versa."""
        return Board(_SWAP_TABLE[self.grid])

    def render_ascii(self) -> str:
        """Return the board as a lettered grid, row 1 at the top."""
        lines: List[str] = [HEADER, ROW_SEPARATOR]
        for row in range(1, self.rows + 1):
            cells = " |".join(f" {self.get_cell((row, col)).symbol}" for col in range(1, self.cols + 1))
            lines.append(f" {row} |{cells} |")
            lines.append(ROW_SEPARATOR)
        return "\n".join(lines)
