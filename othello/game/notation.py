"""Othello square notation and game records.

Squares use a column letter and a row number, with row 0 as "1":
  d3   row 2, column 3 (encoded move 19)

Game format (similar to PGN):
  [Black "minimax k=3"]
  [White "minimax k=1"]
  [Result "1-0"]

  1. d3 c5
  2. f6 f5
  ...
  1-0

Passes are not written; the move list is the sequence of discs placed.
"""

from __future__ import annotations

import re
from typing import Optional

from othello.game.board import rc_to_notation, notation_to_rc
from othello.game.state import (
    GameResult, Move, decode_move, encode_move, is_valid_move_index,
)

RESULT_STRINGS = {
    GameResult.BLACK: "1-0",
    GameResult.WHITE: "0-1",
    GameResult.TIE: "1/2-1/2",
    GameResult.UNDECIDED: "*",
}
_STRING_RESULTS = {v: k for k, v in RESULT_STRINGS.items()}

_SQUARE_RE = re.compile(r"^[a-h][1-8]$")


def move_to_notation(move: Move) -> str:
    """Convert an encoded move to notation like 'd3'."""
    if not is_valid_move_index(move):
        raise ValueError(f"Move out of range: {move}")
    return rc_to_notation(*decode_move(move))


def notation_to_move(text: str) -> Move:
    """Parse notation like 'd3' into an encoded move.

    Raises:
        ValueError: If the notation is invalid.
    """
    text = text.strip().lower()
    if not _SQUARE_RE.match(text):
        raise ValueError(f"Invalid square notation: {text!r}")
    return encode_move(*notation_to_rc(text))


def result_to_string(result: GameResult) -> str:
    return RESULT_STRINGS[result]


def string_to_result(text: str) -> GameResult:
    try:
        return _STRING_RESULTS[text.strip()]
    except KeyError:
        raise ValueError(f"Invalid result string: {text!r}") from None


def game_to_record(moves: list[Move],
                   headers: Optional[dict[str, str]] = None,
                   result: Optional[GameResult] = None) -> str:
    """Convert a move sequence to a game record.

    Args:
        moves: Encoded moves in the order they were played.
        headers: Optional dict of header key-value pairs.
        result: Optional final result.
    """
    lines = []

    if headers:
        for key, value in headers.items():
            lines.append(f'[{key} "{value}"]')
    if result is not None:
        lines.append(f'[Result "{result_to_string(result)}"]')
    if headers or result is not None:
        lines.append("")

    squares = [move_to_notation(m) for m in moves]
    for i in range(0, len(squares), 2):
        lines.append(f"{i // 2 + 1}. " + " ".join(squares[i:i + 2]))

    if result is not None:
        lines.append(result_to_string(result))

    return "\n".join(lines)


def record_to_game(text: str) -> tuple[dict[str, str], list[Move], Optional[GameResult]]:
    """Parse a game record.

    Returns:
        (headers, moves, result)

    Raises:
        ValueError: If a move token is not a valid square.
    """
    headers: dict[str, str] = {}
    moves: list[Move] = []
    result: Optional[GameResult] = None

    for line in text.strip().split("\n"):
        line = line.strip()
        if not line:
            continue

        if line.startswith("[") and line.endswith("]"):
            m = re.match(r'(\w+)\s+"([^"]*)"', line[1:-1])
            if m:
                if m.group(1) == "Result":
                    result = string_to_result(m.group(2))
                else:
                    headers[m.group(1)] = m.group(2)
            continue

        line = re.sub(r"^\d+\.\s*", "", line)
        for token in line.split():
            if token in _STRING_RESULTS:
                result = _STRING_RESULTS[token]
                continue
            moves.append(notation_to_move(token))

    return headers, moves, result
