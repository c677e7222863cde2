"""Game session: owns the live board and plays games out with minimax."""

from __future__ import annotations

import logging
from typing import Optional

from othello.engine.evaluator import score
from othello.engine.minimax import MinimaxSearch
from othello.game.board import copy_board, is_valid_board
from othello.game.notation import move_to_notation
from othello.game.rules import apply_move, generate_legal_moves, result_from_counts
from othello.game.state import GameResult, GameState, Move, Player, opponent

logger = logging.getLogger("othello.session")


class OthelloSession:
    """A position plus the side to move, driven by minimax for both sides.

    The player to move at construction time is the root perspective used by
    score_from_root_perspective(); it does not change as the game proceeds.
    best_move() always searches for the side currently to move.
    """

    def __init__(self, turn: Player, board: list[list[int]],
                 pass_consumes_ply: bool = True):
        if not is_valid_board(board):
            raise ValueError("Board must be 8x8 with cells in {-1, 0, 1}")
        self.root_player: Player = Player(turn)
        self.turn: Player = Player(turn)
        self.board: list[list[int]] = copy_board(board)
        self.winner: GameResult = GameResult.UNDECIDED
        self.move_history: list[Move] = []
        self.search = MinimaxSearch(pass_consumes_ply=pass_consumes_ply)

    @classmethod
    def from_state(cls, state: GameState, pass_consumes_ply: bool = True) -> OthelloSession:
        session = cls(state.current_player, state.board, pass_consumes_ply)
        session.move_history = state.move_history.copy()
        session.winner = state.result
        return session

    def to_state(self) -> GameState:
        state = GameState(self.turn, self.board)
        state.result = self.winner
        state.move_history = self.move_history.copy()
        return state

    def score_from_root_perspective(self) -> int:
        return score(self.board, self.root_player)

    def best_move(self, k: int) -> Optional[Move]:
        """Best move for the side to move with a k-ply lookahead, or None."""
        return self.search.best_move(self.board, self.turn, k)

    def play_out(self, k: int) -> list[Move]:
        """Play the rest of the game with both sides using k-ply lookahead.

        Modifies the board and the side to move. Passes are not recorded.
        Returns the moves played, in order, and sets the winner.
        """
        played: list[Move] = []

        while True:
            moves_now = generate_legal_moves(self.board, self.turn)
            moves_other = generate_legal_moves(self.board, opponent(self.turn))

            if not moves_now and not moves_other:
                break

            if not moves_now:
                logger.debug(f"{self.turn.name} passes")
                self.turn = opponent(self.turn)
                continue

            move = self.best_move(k)
            if move is None:
                # Only reachable if the search disagrees with move generation
                logger.warning(f"No move chosen for {self.turn.name} despite "
                               f"{len(moves_now)} legal moves; passing")
                self.turn = opponent(self.turn)
                continue

            apply_move(self.board, move, self.turn)
            played.append(move)
            self.move_history.append(move)
            logger.debug(f"{self.turn.name} plays {move_to_notation(move)}")
            self.turn = opponent(self.turn)

        self.winner = result_from_counts(self.board)
        logger.info(f"Game over after {len(played)} moves: {self.winner.value}")
        return played

    def get_board_copy(self) -> list[list[int]]:
        return copy_board(self.board)

    def get_winner(self) -> GameResult:
        return self.winner

    def get_turn(self) -> Player:
        return self.turn
