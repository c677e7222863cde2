"""Load and save positions and game transcripts.

Position files are whitespace-separated integers: the side to move
(0=Black, 1=White) followed by 64 cells in row-major order, each 0 (Black),
1 (White) or -1 (Empty). Anything else is rejected.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import numpy as np

from othello.game.board import BOARD_SIZE, NUM_SQUARES, VALID_CELLS
from othello.game.notation import game_to_record, record_to_game
from othello.game.state import GameResult, Move, Player

logger = logging.getLogger("othello.storage")


class PositionFormatError(ValueError):
    """Raised when a position record is malformed."""


def parse_position(text: str) -> tuple[Player, list[list[int]]]:
    """Parse a position record into (side to move, board).

    Raises:
        PositionFormatError: On non-integer or out-of-range tokens, a count
            other than 65, a side to move outside {0, 1}, or a cell outside
            {-1, 0, 1}.
    """
    tokens = text.split()
    if len(tokens) != NUM_SQUARES + 1:
        raise PositionFormatError(
            f"Expected {NUM_SQUARES + 1} integers, got {len(tokens)}")
    try:
        ints = [int(t) for t in tokens]
    except ValueError as e:
        raise PositionFormatError(f"Non-integer token in position: {e}") from e
    try:
        values = np.array(ints, dtype=np.int64)
    except OverflowError as e:
        raise PositionFormatError(f"Integer out of range in position: {e}") from e

    turn = int(values[0])
    if turn not in (Player.BLACK, Player.WHITE):
        raise PositionFormatError(f"Side to move must be 0 or 1, got {turn}")

    cells = values[1:].reshape(BOARD_SIZE, BOARD_SIZE)
    bad = ~np.isin(cells, sorted(VALID_CELLS))
    if bad.any():
        row, col = (int(i) for i in np.argwhere(bad)[0])
        raise PositionFormatError(
            f"Cell ({row}, {col}) has invalid value {int(cells[row, col])}")

    return Player(turn), cells.tolist()


def format_position(turn: Player, board: list[list[int]]) -> str:
    """Inverse of parse_position: one header line plus one line per row."""
    lines = [str(int(turn))]
    for row in board:
        lines.append(" ".join(str(int(cell)) for cell in row))
    return "\n".join(lines) + "\n"


def load_position(filepath: str) -> tuple[Player, list[list[int]]]:
    """Load a position file. See parse_position for the format."""
    try:
        with open(filepath, encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise PositionFormatError(f"{filepath} is not a text position file: {e}") from e
    turn, board = parse_position(text)
    logger.info(f"Loaded position from {filepath} ({turn.name} to move)")
    return turn, board


def save_position(filepath: str, turn: Player, board: list[list[int]]):
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, "w") as f:
        f.write(format_position(turn, board))


def save_game(filepath: str, moves: list[Move], headers: Optional[dict] = None,
              result: Optional[GameResult] = None):
    """Save a played move sequence as a game record.

    Args:
        filepath: Output file path.
        moves: Moves played, in order.
        headers: Optional header metadata.
        result: Optional final result.
    """
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, "w") as f:
        f.write(game_to_record(moves, headers=headers, result=result))
        f.write("\n")


def load_game(filepath: str) -> tuple[dict, list[Move], Optional[GameResult]]:
    """Load a game record.

    Returns:
        (headers, moves, result)
    """
    with open(filepath) as f:
        text = f.read()
    return record_to_game(text)
