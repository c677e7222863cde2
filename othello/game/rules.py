"""Legal move generation, disc flipping, and end-of-game detection.

Boards are 8x8 lists of cell values (see board.py). Moves are encoded as
row * 8 + col. apply_move mutates the board it is given, so callers that
need the original position must copy it first.
"""

from __future__ import annotations

from othello.game.board import (
    BOARD_SIZE, EMPTY_CELL, count_pieces, in_bounds, is_board_full,
)
from othello.game.state import GameResult, Move, Player, decode_move, opponent

# All 8 directions, scanned in this order: NW, N, NE, W, E, SW, S, SE
ALL_DIRS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]


def tiles_to_flip(board: list[list[int]], row: int, col: int,
                  player: Player) -> list[Move]:
    """Return the discs that placing player at (row, col) would flip.

    Each direction is scanned independently: a contiguous run of opponent
    discs counts only if it is closed by one of player's discs on the board.
    Results are in direction order, then distance order. An empty list means
    the placement is illegal (including when the square is occupied).
    """
    flips: list[Move] = []
    if board[row][col] != EMPTY_CELL:
        return flips

    opp = opponent(player)
    for dr, dc in ALL_DIRS:
        r, c = row + dr, col + dc
        run = []
        while in_bounds(r, c) and board[r][c] == opp:
            run.append(r * BOARD_SIZE + c)
            r += dr
            c += dc
        if run and in_bounds(r, c) and board[r][c] == player:
            flips.extend(run)
    return flips


def generate_legal_moves(board: list[list[int]], player: Player) -> list[Move]:
    """Generate all legal moves for player, ascending by encoded value."""
    moves: list[Move] = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if board[row][col] != EMPTY_CELL:
                continue
            if tiles_to_flip(board, row, col, player):
                moves.append(row * BOARD_SIZE + col)
    return moves


def apply_move(board: list[list[int]], move: Move,
               player: Player) -> list[list[int]]:
    """Place player's disc at move and flip the captured discs.

    Modifies board in place and returns it. A move that would flip nothing
    leaves the board untouched.
    """
    row, col = decode_move(move)
    flips = tiles_to_flip(board, row, col, player)
    if not flips:
        return board

    board[row][col] = int(player)
    for pos in flips:
        fr, fc = decode_move(pos)
        board[fr][fc] = int(player)
    return board


def has_any_move(board: list[list[int]]) -> bool:
    """True if either player has a legal move."""
    return bool(generate_legal_moves(board, Player.BLACK)) or \
        bool(generate_legal_moves(board, Player.WHITE))


def result_from_counts(board: list[list[int]]) -> GameResult:
    """Decide the outcome purely from disc counts."""
    black, white = count_pieces(board)
    if black > white:
        return GameResult.BLACK
    elif white > black:
        return GameResult.WHITE
    return GameResult.TIE


def check_winner(board: list[list[int]]) -> GameResult:
    """Return the result if the game is over, else GameResult.UNDECIDED.

    The game is over once neither player can move (a full board is a
    special case of this).
    """
    if not is_board_full(board) and has_any_move(board):
        return GameResult.UNDECIDED
    return result_from_counts(board)
