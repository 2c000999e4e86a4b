"""Exhaustive fixed-depth game tree with minimax value propagation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Union

from engine.board import Board, Move
from engine.pieces import Cell, Side
from engine.rules import CAPTURE_DISTANCE, MOVE_DISTANCE, Direction, Position, Verdict, classify

TREE_DEPTH = 3

# Terminal values for a side left without any action. Material never gets near these.
BLACK_WINS = math.inf
WHITE_WINS = -math.inf

Score = Union[int, float]


@dataclass
class SearchNode:
    """One board state reached from the root after ``depth`` plies."""

    mover: Side
    depth: int
    board: Board
    origin_move: Optional[Move] = None
    value: Optional[Score] = None
    children: List["SearchNode"] = field(default_factory=list)

    def count_nodes(self) -> int:
        return 1 + sum(child.count_nodes() for child in self.children)


def generate_action(
    node: SearchNode,
    source: Position,
    direction: Direction,
    max_depth: int = TREE_DEPTH,
) -> Optional[SearchNode]:
    """
    Produce the child reached by moving the piece on ``source`` toward ``direction``.

    A one-square step is tried first; the jump is only tried when the step is
    not legal, so each (square, direction) pair yields at most one child.
    """
    for distance in (MOVE_DISTANCE, CAPTURE_DISTANCE):
        target = direction.step(source, distance)
        if classify(node.board, source, target, node.mover) is Verdict.LEGAL:
            break
    else:
        return None

    move = Move(source=source, target=target)
    child_board = node.board.clone()
    child_board.apply_move(move)
    child = SearchNode(
        mover=node.mover.opponent(),
        depth=node.depth + 1,
        board=child_board,
        origin_move=move,
    )
    if child.depth == max_depth:
        child.value = child_board.material_cost()
    return child


def expand(node: SearchNode, max_depth: int = TREE_DEPTH) -> SearchNode:
    """Grow the subtree under ``node`` depth-first, children in discovery order."""
    if node.depth >= max_depth:
        return node

    for pos in node.board.iter_positions():
        if node.board.get_cell(pos) is Cell.EMPTY:
            continue
        for direction in Direction:
            child = generate_action(node, pos, direction, max_depth)
            if child is None:
                continue
            node.children.append(child)
            expand(child, max_depth)
    return node


def best_child(node: SearchNode) -> SearchNode:
    """Black maximises, White minimises; the earliest child wins ties."""
    pick = max if node.mover is Side.BLACK else min
    return pick(node.children, key=lambda child: child.value)


def evaluate(node: SearchNode, max_depth: int = TREE_DEPTH) -> Score:
    """Assign values bottom-up and return the value of ``node``."""
    if node.depth >= max_depth:
        return node.value

    for child in node.children:
        evaluate(child, max_depth)

    if not node.children:
        # The side to move is stuck, so its opponent has won.
        node.value = BLACK_WINS if node.mover is Side.WHITE else WHITE_WINS
    else:
        node.value = best_child(node).value
    return node.value


def build_tree(board: Board, mover: Side, max_depth: int = TREE_DEPTH) -> SearchNode:
    """Expand and evaluate the full tree rooted at a copy of ``board``."""
    root = SearchNode(mover=mover, depth=0, board=board.clone())
    expand(root, max_depth)
    evaluate(root, max_depth)
    return root
