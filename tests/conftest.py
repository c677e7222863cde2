"""Shared test fixtures: boards built from text diagrams."""

import pytest

from othello.game.board import BLACK_CELL, WHITE_CELL, EMPTY_CELL

_CHARS = {"B": BLACK_CELL, "W": WHITE_CELL, ".": EMPTY_CELL}


def board_from_rows(rows: list[str]) -> list[list[int]]:
    """Build a board from 8 strings of 'B', 'W' and '.' (spaces ignored)."""
    board = []
    for row in rows:
        cells = [_CHARS[ch] for ch in row.replace(" ", "")]
        assert len(cells) == 8
        board.append(cells)
    assert len(board) == 8
    return board


@pytest.fixture
def make_board():
    return board_from_rows


@pytest.fixture
def pass_board():
    """Black to move has no legal move; White has exactly c1 (2) and c3 (18).

    W B . . . . . .
    . B . . . . . .
    (rest empty)
    """
    return board_from_rows([
        "W B . . . . . .",
        ". B . . . . . .",
        ". . . . . . . .",
        ". . . . . . . .",
        ". . . . . . . .",
        ". . . . . . . .",
        ". . . . . . . .",
        ". . . . . . . .",
    ])
