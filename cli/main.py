"""CLI entrypoint: replay human actions from a script, then let the AI play."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional, Sequence, Tuple

from ai.base_ai import BaseAI, Win
from ai.minimax_ai import MinimaxAI
from cli.config import GameConfig
from engine.board import Board, Move
from engine.game import GameSession
from engine.notation import format_action, parse_action
from engine.pieces import Side
from engine.rules import IllegalActionError

LOGGER = logging.getLogger("checkers.cli")

SEPARATOR = "=" * 37
COMMAND_ONE_ACTION = "A"
COMMAND_PLAY = "P"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Replay checkers actions and let a minimax AI continue the game.")
    parser.add_argument(
        "script",
        nargs="?",
        default=None,
        help="File with actions such as A6-B5 and an optional final command (A or P). Reads stdin if omitted.",
    )
    parser.add_argument("--config", type=str, default=None, help="Path to game config JSON")
    parser.add_argument("--depth", type=int, default=None, help="Minimax depth in plies")
    parser.add_argument("--actions", type=int, default=None, help="Number of actions computed by the P command")
    parser.add_argument("--log-level", type=str, default=None, help="Python logging level")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.from_json(args.config) if args.config else GameConfig()
    if args.depth is not None:
        config.search_depth = args.depth
    if args.actions is not None:
        config.computed_actions = args.actions
    if args.log_level is not None:
        config.log_level = args.log_level
    config.validate()
    return config


def read_script(lines: Iterable[str]) -> Tuple[List[Move], Optional[str]]:
    """Split a script into the leading actions and the command token that follows them."""
    moves: List[Move] = []
    for line in lines:
        for token in line.split():
            move = parse_action(token)
            if move is None:
                return moves, token
            moves.append(move)
    return moves, None


def print_board(board: Board) -> None:
    print(board.render_ascii())


def print_action(number: int, mover: Side, move: Move, board: Board, computed: bool) -> None:
    prefix = "*** " if computed else ""
    print(SEPARATOR)
    print(f"{prefix}{mover.value.upper()} ACTION #{number}: {format_action(move)}")
    print(f"BOARD COST: {board.material_cost()}")
    print_board(board)


def play_human_actions(session: GameSession, moves: Iterable[Move]) -> bool:
    """Apply scripted actions in order. Return False once one is rejected."""
    for move in moves:
        mover = session.mover
        try:
            session.play_human_move(move)
        except IllegalActionError as exc:
            print(exc.verdict.message)
            return False
        print_action(session.action_count, mover, move, session.board, computed=False)
    return True


def play_computed_actions(session: GameSession, ai: BaseAI, count: int) -> bool:
    """Let the AI act up to ``count`` times. Return False if a side won."""
    for _ in range(count):
        decision = ai.decide(session.board, session.action_count)
        if isinstance(decision, Win):
            print(f"{decision.winner.value.upper()} WIN!")
            return False
        session.commit(decision.board)
        print_action(session.action_count, decision.mover, decision.move, session.board, computed=True)
    return True


def play_script(lines: Iterable[str], config: GameConfig) -> GameSession:
    """Run one scripted game and return the final session."""
    session = GameSession()
    ai = MinimaxAI(depth=config.search_depth, debug_top_k=config.debug_top_k)

    print(f"BOARD SIZE: {session.board.rows}x{session.board.cols}")
    print(f"#BLACK PIECES: {session.board.piece_count(Side.BLACK)}")
    print(f"#WHITE PIECES: {session.board.piece_count(Side.WHITE)}")
    print_board(session.board)

    moves, command = read_script(lines)
    if not play_human_actions(session, moves):
        return session

    if command is None:
        return session
    if command == COMMAND_ONE_ACTION:
        play_computed_actions(session, ai, 1)
    elif command == COMMAND_PLAY:
        play_computed_actions(session, ai, config.computed_actions)
    else:
        LOGGER.warning("Ignoring unknown command %r", command)
    return session


def run_cli(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    config = build_config(args)
    logging.basicConfig(level=getattr(logging, config.log_level.upper(), logging.WARNING))
    LOGGER.info("Starting game: depth=%d computed_actions=%d", config.search_depth, config.computed_actions)

    if args.script is None:
        play_script(sys.stdin, config)
        return
    with open(args.script, encoding="utf-8") as handle:
        play_script(handle, config)


if __name__ == "__main__":
    run_cli()
