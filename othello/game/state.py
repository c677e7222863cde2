"""Game state representation for Othello."""

from __future__ import annotations

import json
from enum import Enum, IntEnum
from typing import Optional

from othello.game.board import (
    BOARD_SIZE, NUM_SQUARES, copy_board, is_valid_board, starting_board,
)


class Player(IntEnum):
    BLACK = 0
    WHITE = 1


class GameResult(Enum):
    BLACK = "black"
    WHITE = "white"
    TIE = "tie"
    UNDECIDED = "undecided"


# Move = int in [0, 63], row * 8 + col
Move = int


def opponent(player: Player) -> Player:
    return Player(1 - player)


def encode_move(row: int, col: int) -> Move:
    return row * BOARD_SIZE + col


def decode_move(move: Move) -> tuple[int, int]:
    return move // BOARD_SIZE, move % BOARD_SIZE


def is_valid_move_index(move: Move) -> bool:
    return 0 <= move < NUM_SQUARES


class GameState:
    """Board plus side to move, history and outcome."""

    def __init__(self, current_player: Player = Player.BLACK,
                 board: Optional[list[list[int]]] = None):
        if board is None:
            board = starting_board()
        elif not is_valid_board(board):
            raise ValueError("Board must be 8x8 with cells in {-1, 0, 1}")
        self.board: list[list[int]] = copy_board(board)
        self.current_player: Player = Player(current_player)
        self.result: GameResult = GameResult.UNDECIDED
        self.move_history: list[Move] = []

    @property
    def done(self) -> bool:
        return self.result != GameResult.UNDECIDED

    def clone(self) -> GameState:
        """Return a deep copy of this state."""
        new = GameState.__new__(GameState)
        new.board = copy_board(self.board)
        new.current_player = self.current_player
        new.result = self.result
        new.move_history = self.move_history.copy()
        return new

    def get_board_tuple(self) -> tuple:
        """Return a hashable representation of the position."""
        cells = tuple(cell for row in self.board for cell in row)
        return (cells, self.current_player)

    def serialize(self) -> str:
        """Serialize game state to JSON string."""
        return json.dumps({
            "board": self.board,
            "current_player": int(self.current_player),
            "result": self.result.value,
            "move_history": self.move_history,
        })

    @classmethod
    def deserialize(cls, data: str) -> GameState:
        """Deserialize game state from JSON string."""
        d = json.loads(data)
        state = cls(Player(d["current_player"]), d["board"])
        state.result = GameResult(d.get("result", GameResult.UNDECIDED.value))
        state.move_history = list(d.get("move_history", []))
        return state
