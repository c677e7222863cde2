#!/usr/bin/env python3
"""Play Othello positions out with minimax for both sides.

Usage:
    python scripts/play.py                                # start position, config depth
    python scripts/play.py --position pos.txt --depth 2   # play out a saved position
    python scripts/play.py --position pos.txt --best-move # only print the best move
"""

import argparse
import logging
import os
import sys

import yaml

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from othello.engine.minimax import SearchConfig
from othello.engine.session import OthelloSession
from othello.data.storage import PositionFormatError, load_position, save_game
from othello.game.board import render_board, starting_board
from othello.game.notation import move_to_notation, result_to_string
from othello.game.rules import count_pieces, generate_legal_moves
from othello.game.state import Player

logger = logging.getLogger("othello.play")


def load_config(path: str) -> dict:
    """Read the YAML config, or return an empty config if it does not exist."""
    if not os.path.exists(path):
        return {}
    with open(path) as f:
        return yaml.safe_load(f) or {}


def display_session(session: OthelloSession):
    """Print the current board."""
    legal = generate_legal_moves(session.board, session.turn)
    print(render_board(session.board,
                       counts=count_pieces(session.board),
                       current_player=int(session.turn),
                       legal_moves=legal))
    print()


def main():
    parser = argparse.ArgumentParser(description="Othello minimax engine")
    parser.add_argument("--config", type=str, default="configs/engine.yaml")
    parser.add_argument("--position", type=str, default=None,
                        help="Position file (side to move + 64 cells)")
    parser.add_argument("--depth", type=int, default=None,
                        help="Override lookahead depth k")
    parser.add_argument("--best-move", action="store_true",
                        help="Print the best move for the side to move and exit")
    parser.add_argument("--save", type=str, default=None,
                        help="Write the played game record to this path")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    config = load_config(args.config)
    level = "DEBUG" if args.verbose else config.get("logging", {}).get("level", "INFO")
    logging.basicConfig(level=getattr(logging, level),
                        format="%(asctime)s [%(name)s] %(message)s")

    search_cfg = SearchConfig.from_dict(config.get("search"))
    if args.depth is not None:
        search_cfg.depth = args.depth
    if search_cfg.depth < 1:
        print(f"Depth must be at least 1, got {search_cfg.depth}", file=sys.stderr)
        sys.exit(2)

    if args.position:
        try:
            turn, board = load_position(args.position)
        except (OSError, PositionFormatError) as e:
            print(f"Could not load position: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        turn, board = Player.BLACK, starting_board()

    session = OthelloSession(turn, board, pass_consumes_ply=search_cfg.pass_consumes_ply)
    display_session(session)

    if args.best_move:
        move = session.best_move(search_cfg.depth)
        if move is None:
            print(f"{session.turn.name.title()} has no legal move (pass)")
        else:
            print(f"Best move for {session.turn.name.title()}: "
                  f"{move_to_notation(move)} ({move})")
        return

    logger.info(f"Playing out with depth {search_cfg.depth} "
                f"(pass_consumes_ply={search_cfg.pass_consumes_ply})")
    moves = session.play_out(search_cfg.depth)
    display_session(session)

    print("Moves: " + " ".join(move_to_notation(m) for m in moves))
    black, white = count_pieces(session.board)
    print(f"Final score: Black {black} - White {white}")
    print(f"Result: {session.winner.value} ({result_to_string(session.winner)})")

    if args.save:
        save_game(args.save, moves,
                  headers={"Black": f"minimax k={search_cfg.depth}",
                           "White": f"minimax k={search_cfg.depth}"},
                  result=session.winner)
        logger.info(f"Saved game to {args.save}")


if __name__ == "__main__":
    main()
