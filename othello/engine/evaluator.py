"""Disc-difference evaluation.

The same score is used for finished games and for positions cut off at the
lookahead limit.
"""

from __future__ import annotations

from othello.game.board import count_pieces
from othello.game.state import Player


def score(board: list[list[int]], perspective: Player) -> int:
    """Return perspective's disc count minus the opponent's."""
    black, white = count_pieces(board)
    if perspective == Player.BLACK:
        return black - white
    return white - black
