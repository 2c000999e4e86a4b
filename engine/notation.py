"""Text notation for checkers actions, e.g. ``A6-B5``."""

from __future__ import annotations

import re
from typing import Optional

from engine.board import Move
from engine.rules import Position

_ACTION_RE = re.compile(r"^([A-Z])(\d+)-([A-Z])(\d+)$")
_COLUMN_BASE = ord("A") - 1


def column_number(letter: str) -> int:
    """Map a column letter to its 1-based number. Letters past H land off the board."""
    return ord(letter) - _COLUMN_BASE


def column_letter(col: int) -> str:
    return chr(col + _COLUMN_BASE)


def format_position(pos: Position) -> str:
    row, col = pos
    return f"{column_letter(col)}{row}"


def format_action(move: Move) -> str:
    return f"{format_position(move.source)}-{format_position(move.target)}"


def parse_action(text: str) -> Optional[Move]:
    """Parse ``<col><row>-<col><row>``; return None if the text is not an action."""
    match = _ACTION_RE.match(text.strip())
    if match is None:
        return None
    s_col, s_row, t_col, t_row = match.groups()
    return Move(
        source=(int(s_row), column_number(s_col)),
        target=(int(t_row), column_number(t_col)),
    )
