"""Othello game engine: board, state, rules, notation."""

from othello.game.state import GameState, GameResult, Player, opponent, encode_move, decode_move
from othello.game.rules import (
    tiles_to_flip, generate_legal_moves, apply_move, has_any_move,
    count_pieces, check_winner,
)
from othello.game.board import BOARD_SIZE, STARTING_POSITIONS, starting_board, render_board
from othello.game.notation import move_to_notation, notation_to_move, game_to_record, record_to_game

__all__ = [
    "GameState", "GameResult", "Player", "opponent", "encode_move", "decode_move",
    "tiles_to_flip", "generate_legal_moves", "apply_move", "has_any_move",
    "count_pieces", "check_winner",
    "BOARD_SIZE", "STARTING_POSITIONS", "starting_board", "render_board",
    "move_to_notation", "notation_to_move", "game_to_record", "record_to_game",
]
