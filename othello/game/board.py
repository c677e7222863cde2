"""Board constants, starting position, and text-based rendering."""

from __future__ import annotations

BOARD_SIZE = 8
NUM_SQUARES = BOARD_SIZE * BOARD_SIZE

# Cell values as they appear in persisted positions
BLACK_CELL = 0
WHITE_CELL = 1
EMPTY_CELL = -1

VALID_CELLS = frozenset((BLACK_CELL, WHITE_CELL, EMPTY_CELL))

# Standard opening: two discs per side on the centre diagonals
STARTING_POSITIONS: dict[tuple[int, int], int] = {
    (3, 3): WHITE_CELL,
    (3, 4): BLACK_CELL,
    (4, 3): BLACK_CELL,
    (4, 4): WHITE_CELL,
}

# Column labels for notation
COL_LABELS = "abcdefgh"
# Row labels for notation (row 0 = "1", row 7 = "8")
ROW_LABELS = "12345678"

CELL_CHARS = {BLACK_CELL: "B", WHITE_CELL: "W", EMPTY_CELL: "."}


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def new_board() -> list[list[int]]:
    """Return an all-empty board."""
    return [[EMPTY_CELL] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def starting_board() -> list[list[int]]:
    """Return the standard four-disc opening board."""
    board = new_board()
    for (row, col), cell in STARTING_POSITIONS.items():
        board[row][col] = cell
    return board


def copy_board(board: list[list[int]]) -> list[list[int]]:
    """Return an independent copy of board."""
    return [row[:] for row in board]


def is_valid_board(board) -> bool:
    """Check shape (8x8) and that every cell is Black, White or Empty."""
    if len(board) != BOARD_SIZE:
        return False
    for row in board:
        if len(row) != BOARD_SIZE:
            return False
        for cell in row:
            if cell not in VALID_CELLS:
                return False
    return True


def is_board_full(board: list[list[int]]) -> bool:
    for row in board:
        if EMPTY_CELL in row:
            return False
    return True


def count_pieces(board: list[list[int]]) -> tuple[int, int]:
    """Return (black_discs, white_discs)."""
    black = 0
    white = 0
    for row in board:
        black += row.count(BLACK_CELL)
        white += row.count(WHITE_CELL)
    return black, white


def rc_to_notation(row: int, col: int) -> str:
    """Convert (row, col) to algebraic notation like 'd3'."""
    return COL_LABELS[col] + ROW_LABELS[row]


def notation_to_rc(sq: str) -> tuple[int, int]:
    """Convert algebraic notation like 'd3' to (row, col)."""
    if len(sq) != 2 or sq[0] not in COL_LABELS or sq[1] not in ROW_LABELS:
        raise ValueError(f"Invalid square: {sq!r}")
    col = COL_LABELS.index(sq[0])
    row = ROW_LABELS.index(sq[1])
    return (row, col)


def render_board(board, counts: tuple[int, int] | None = None,
                 current_player: int | None = None,
                 legal_moves: list[int] | None = None) -> str:
    """Render the board as a text string.

    Args:
        board: 8x8 list of lists of cell values.
        counts: Optional (black_discs, white_discs).
        current_player: Optional side to move (0=Black, 1=White).
        legal_moves: Optional encoded moves to mark with '*'.
    """
    lines = []

    if current_player is not None:
        player_name = "Black" if current_player == BLACK_CELL else "White"
        lines.append(f"{player_name} to move")
    if counts is not None:
        lines.append(f"Discs: Black={counts[0]}  White={counts[1]}")
    if lines:
        lines.append("")

    marked = set(legal_moves or ())

    lines.append("   a b c d e f g h")
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            if row * BOARD_SIZE + col in marked:
                cells.append("*")
            else:
                cells.append(CELL_CHARS[board[row][col]])
        lines.append(f"{row + 1}  " + " ".join(cells))

    return "\n".join(lines)
