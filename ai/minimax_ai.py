"""Plain minimax AI over a fully expanded three-ply tree."""

from __future__ import annotations

import logging
from typing import List

from ai.base_ai import BaseAI, Decision, Moved, Win
from ai.search_tree import TREE_DEPTH, SearchNode, best_child, build_tree
from engine.board import Board
from engine.notation import format_action
from engine.pieces import Side
from engine.rules import side_to_move

LOGGER = logging.getLogger(__name__)


class MinimaxAI(BaseAI):
    """Exhaustive minimax without pruning. Black maximises material cost, White minimises it."""

    def __init__(self, depth: int = TREE_DEPTH, debug_top_k: int = 3) -> None:
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        self.depth = depth
        self.debug_top_k = max(1, debug_top_k)

    def decide(self, board: Board, last_action_index: int) -> Decision:
        """Build, evaluate, and discard a tree for the side to move; never mutates ``board``."""
        mover = side_to_move(last_action_index)
        root = build_tree(board, mover, self.depth)

        if not root.children:
            LOGGER.info("%s has no legal action; %s wins", mover.value, mover.opponent().value)
            return Win(winner=mover.opponent())

        chosen = best_child(root)
        self._log_diagnostics(root, chosen)
        LOGGER.info(
            "Action #%d: %s plays %s with value %s",
            last_action_index + 1,
            mover.value,
            format_action(chosen.origin_move),
            chosen.value,
        )
        return Moved(board=chosen.board, move=chosen.origin_move, mover=mover, value=chosen.value)

    def _log_diagnostics(self, root: SearchNode, chosen: SearchNode) -> None:
        """Emit tree size and top-k candidates when DEBUG is enabled."""
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        LOGGER.debug("Tree for %s: %d nodes, %d root actions", root.mover.value, root.count_nodes(), len(root.children))
        maximizing = root.mover is Side.BLACK
        ranked: List[SearchNode] = sorted(root.children, key=lambda child: child.value, reverse=maximizing)
        for idx, child in enumerate(ranked[: self.debug_top_k], start=1):
            LOGGER.debug(
                "Candidate #%d move=%s value=%s capture=%s chosen=%s",
                idx,
                format_action(child.origin_move),
                child.value,
                child.origin_move.is_capture,
                child is chosen,
            )
