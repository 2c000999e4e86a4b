"""Tests for action notation."""

from engine.board import Move
from engine.notation import format_action, format_position, parse_action


class TestParseAction:
    def test_parses_columns_and_rows(self) -> None:
        assert parse_action("A6-B5") == Move(source=(6, 1), target=(5, 2))
        assert parse_action("  H3-G4\n") == Move(source=(3, 8), target=(4, 7))

    def test_columns_past_h_reach_the_validator(self) -> None:
        assert parse_action("I1-J2") == Move(source=(1, 9), target=(2, 10))
        assert parse_action("A0-B9") == Move(source=(0, 1), target=(9, 2))

    def test_non_actions(self) -> None:
        assert parse_action("A") is None
        assert parse_action("P") is None
        assert parse_action("a6-b5") is None
        assert parse_action("A6B5") is None


class TestFormatAction:
    def test_format(self) -> None:
        assert format_position((4, 3)) == "C4"
        assert format_action(Move(source=(3, 2), target=(4, 3))) == "B3-C4"

    def test_parse_inverts_format(self) -> None:
        move = Move(source=(5, 4), target=(3, 6))
        assert parse_action(format_action(move)) == move
