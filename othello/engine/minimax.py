"""Depth-bounded minimax search over disc difference.

Every node is scored from a fixed perspective: the player the root is
choosing a move for. A node maximizes when the player to move there is the
perspective and minimizes otherwise; the evaluation itself never flips.

Moves are visited in ascending order and the running best is only replaced
on a strict improvement, so the smallest encoded move wins ties at every
node. Children are searched on independent board copies; the caller's board
is never modified.

A forced pass counts as a ply by default. Set pass_consumes_ply=False to
let the opponent reply at the same depth instead; this changes search results
in pass-heavy positions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from othello.engine.evaluator import score
from othello.game.board import copy_board, is_board_full
from othello.game.rules import apply_move, generate_legal_moves
from othello.game.state import Move, Player, opponent

logger = logging.getLogger("othello.search")


@dataclass
class SearchConfig:
    """Configuration for minimax search."""
    depth: int = 3
    pass_consumes_ply: bool = True

    @classmethod
    def from_dict(cls, d: Optional[dict]) -> SearchConfig:
        d = d or {}
        return cls(
            depth=int(d.get("depth", cls.depth)),
            pass_consumes_ply=bool(d.get("pass_consumes_ply", cls.pass_consumes_ply)),
        )


class MinimaxSearch:
    """Plain minimax with no pruning and no caching."""

    def __init__(self, pass_consumes_ply: bool = True):
        self.pass_consumes_ply = pass_consumes_ply
        self.nodes_searched = 0

    def search(self, board: list[list[int]], ply: int, max_ply: int,
               mover: Player, perspective: Player) -> int:
        """Return the minimax value of board with mover to play.

        ply counts half-moves (including passes) taken since the root.
        """
        self.nodes_searched += 1

        moves = generate_legal_moves(board, mover)
        other = opponent(mover)
        terminal = is_board_full(board) or \
            (not moves and not generate_legal_moves(board, other))
        if ply == max_ply or terminal:
            return score(board, perspective)

        if not moves:
            # Forced pass: no branching, the opponent moves on the same board
            next_ply = ply + 1 if self.pass_consumes_ply else ply
            return self.search(board, next_ply, max_ply, other, perspective)

        maximizing = mover == perspective
        best = None
        for move in moves:
            child = copy_board(board)
            apply_move(child, move, mover)
            val = self.search(child, ply + 1, max_ply, other, perspective)
            if best is None or (val > best if maximizing else val < best):
                best = val
        return best

    def best_move(self, board: list[list[int]], perspective: Player,
                  k: int) -> Optional[Move]:
        """Pick the move for perspective with a k-ply lookahead.

        Returns None when perspective has no legal move. The root's children
        start at ply 1, so k = 0 would never reach the cutoff and would search
        to the end of the game; it is rejected instead.

        Raises:
            ValueError: If k < 1.
        """
        if k < 1:
            raise ValueError(f"Lookahead must be at least 1, got {k}")

        perspective = Player(perspective)
        moves = generate_legal_moves(board, perspective)
        if not moves:
            return None

        self.nodes_searched = 0
        best_move: Optional[Move] = None
        best_score: Optional[int] = None

        for move in moves:
            child = copy_board(board)
            apply_move(child, move, perspective)
            val = self.search(child, 1, k, opponent(perspective), perspective)
            if best_score is None or val > best_score or \
                    (val == best_score and move < best_move):
                best_score = val
                best_move = move

        logger.debug(f"best_move k={k} for {perspective.name}: {best_move} "
                     f"(score {best_score}, {self.nodes_searched} nodes)")
        return best_move


def best_move(board: list[list[int]], perspective: Player, k: int,
              pass_consumes_ply: bool = True) -> Optional[Move]:
    """Convenience wrapper around MinimaxSearch.best_move."""
    return MinimaxSearch(pass_consumes_ply=pass_consumes_ply).best_move(
        board, perspective, k)
