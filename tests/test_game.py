"""Unit tests for the Othello board, state, rules and notation."""

import random

import pytest

from othello.game.board import (
    BOARD_SIZE, BLACK_CELL, WHITE_CELL, EMPTY_CELL, STARTING_POSITIONS,
    copy_board, is_board_full, is_valid_board, new_board, notation_to_rc,
    rc_to_notation, render_board, starting_board,
)
from othello.game.state import (
    GameResult, GameState, Player, decode_move, encode_move, opponent,
)
from othello.game.rules import (
    ALL_DIRS, apply_move, check_winner, count_pieces, generate_legal_moves,
    has_any_move, tiles_to_flip,
)
from othello.game.notation import (
    game_to_record, move_to_notation, notation_to_move, record_to_game,
    result_to_string,
)


class TestBoard:
    def test_board_size(self):
        assert BOARD_SIZE == 8

    def test_starting_board(self):
        board = starting_board()
        assert board[3][3] == WHITE_CELL
        assert board[4][4] == WHITE_CELL
        assert board[3][4] == BLACK_CELL
        assert board[4][3] == BLACK_CELL
        assert count_pieces(board) == (2, 2)
        assert len(STARTING_POSITIONS) == 4

    def test_copy_is_independent(self):
        board = starting_board()
        clone = copy_board(board)
        board[0][0] = BLACK_CELL
        assert clone[0][0] == EMPTY_CELL

    def test_validity(self):
        assert is_valid_board(starting_board())
        bad = starting_board()
        bad[2][2] = 2
        assert not is_valid_board(bad)
        assert not is_valid_board(starting_board()[:7])

    def test_full_board(self):
        assert not is_board_full(starting_board())
        assert is_board_full([[BLACK_CELL] * 8 for _ in range(8)])

    def test_notation_conversion(self):
        assert rc_to_notation(0, 0) == "a1"
        assert rc_to_notation(7, 7) == "h8"
        assert rc_to_notation(2, 3) == "d3"

    def test_notation_roundtrip(self):
        for r in range(8):
            for c in range(8):
                assert notation_to_rc(rc_to_notation(r, c)) == (r, c)

    def test_render_board(self):
        text = render_board(starting_board(), counts=(2, 2), current_player=0,
                            legal_moves=[19])
        assert "Black to move" in text
        assert "W B" in text
        assert "*" in text


class TestState:
    def test_opponent(self):
        assert opponent(Player.BLACK) == Player.WHITE
        assert opponent(Player.WHITE) == Player.BLACK

    def test_move_encoding(self):
        assert encode_move(2, 3) == 19
        assert decode_move(19) == (2, 3)
        assert decode_move(63) == (7, 7)
        moves = [encode_move(r, c) for r in range(8) for c in range(8)]
        assert moves == sorted(moves)

    def test_initial_state(self):
        state = GameState()
        assert state.current_player == Player.BLACK
        assert state.result == GameResult.UNDECIDED
        assert not state.done
        assert state.board == starting_board()

    def test_rejects_invalid_board(self):
        with pytest.raises(ValueError):
            GameState(Player.BLACK, [[EMPTY_CELL] * 8 for _ in range(7)])

    def test_clone(self):
        state = GameState()
        clone = state.clone()
        state.board[0][0] = BLACK_CELL
        state.move_history.append(19)
        assert clone.board[0][0] == EMPTY_CELL
        assert clone.move_history == []

    def test_serialize_roundtrip(self):
        state = GameState(Player.WHITE)
        state.move_history = [19, 18]
        state.result = GameResult.TIE
        restored = GameState.deserialize(state.serialize())
        assert restored.board == state.board
        assert restored.current_player == Player.WHITE
        assert restored.move_history == [19, 18]
        assert restored.result == GameResult.TIE

    def test_board_tuple_hash(self):
        assert GameState().get_board_tuple() == GameState().get_board_tuple()
        assert GameState(Player.WHITE).get_board_tuple() != GameState().get_board_tuple()


class TestFlips:
    def test_single_direction_in_distance_order(self, make_board):
        board = make_board([
            "........",
            "........",
            "........",
            ".BWW....",
            "........",
            "........",
            "........",
            "........",
        ])
        assert tiles_to_flip(board, 3, 4, Player.BLACK) == [27, 26]

    def test_direction_order(self, make_board):
        # Black at c3 flips east (d3) before south-east (d4)
        board = make_board([
            "........",
            "........",
            "...WB...",
            "...W....",
            "....B...",
            "........",
            "........",
            "........",
        ])
        assert tiles_to_flip(board, 2, 2, Player.BLACK) == [19, 27]

    def test_occupied_square(self):
        board = starting_board()
        assert tiles_to_flip(board, 3, 3, Player.BLACK) == []

    def test_run_ending_in_empty(self, make_board):
        board = make_board([
            "........",
            "........",
            "........",
            "..WW.B..",
            "........",
            "........",
            "........",
            "........",
        ])
        assert tiles_to_flip(board, 3, 1, Player.BLACK) == []

    def test_run_leaving_board(self, make_board):
        board = make_board([
            ".WWWWWWW",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
        ])
        assert tiles_to_flip(board, 0, 0, Player.BLACK) == []

    def test_adjacent_own_disc_flips_nothing(self, make_board):
        board = make_board([
            "........",
            "........",
            "........",
            "...B....",
            "...W....",
            "........",
            "........",
            "........",
        ])
        assert tiles_to_flip(board, 2, 3, Player.BLACK) == []
        assert tiles_to_flip(board, 5, 3, Player.WHITE) == []

    def test_eight_directions(self):
        assert len(ALL_DIRS) == 8
        assert len(set(ALL_DIRS)) == 8
        assert (0, 0) not in ALL_DIRS


class TestLegalMoves:
    def test_black_opening_moves(self):
        assert generate_legal_moves(starting_board(), Player.BLACK) == [19, 26, 37, 44]

    def test_white_opening_moves(self):
        assert generate_legal_moves(starting_board(), Player.WHITE) == [20, 29, 34, 43]

    def test_empty_board_has_no_moves(self):
        board = new_board()
        assert generate_legal_moves(board, Player.BLACK) == []
        assert not has_any_move(board)

    def test_pass_board(self, pass_board):
        assert generate_legal_moves(pass_board, Player.BLACK) == []
        assert generate_legal_moves(pass_board, Player.WHITE) == [2, 18]
        assert has_any_move(pass_board)


class TestApplyMove:
    def test_opening_move(self):
        board = starting_board()
        apply_move(board, 19, Player.BLACK)
        assert board[2][3] == BLACK_CELL
        assert board[3][3] == BLACK_CELL
        assert count_pieces(board) == (4, 1)

    def test_illegal_move_is_noop(self):
        board = starting_board()
        before = copy_board(board)
        apply_move(board, 0, Player.BLACK)
        assert board == before
        apply_move(board, encode_move(3, 3), Player.BLACK)
        assert board == before

    def test_same_move_on_copies_is_identical(self):
        a = starting_board()
        b = copy_board(a)
        apply_move(a, 37, Player.BLACK)
        apply_move(b, 37, Player.BLACK)
        assert a == b

    def test_random_games_keep_flip_invariants(self):
        """Flips land exactly on the reported cells and legal moves stay exact."""
        rng = random.Random(1234)
        for _ in range(5):
            board = starting_board()
            player = Player.BLACK
            while has_any_move(board):
                moves = generate_legal_moves(board, player)
                assert moves == sorted(set(moves))
                expected = [encode_move(r, c) for r in range(8) for c in range(8)
                            if tiles_to_flip(board, r, c, player)]
                assert moves == expected
                if not moves:
                    player = opponent(player)
                    continue

                move = rng.choice(moves)
                flips = tiles_to_flip(board, *decode_move(move), player)
                before = copy_board(board)
                apply_move(board, move, player)

                changed = {encode_move(r, c) for r in range(8) for c in range(8)
                           if board[r][c] != before[r][c]}
                assert changed == set(flips) | {move}
                for pos in changed:
                    r, c = decode_move(pos)
                    assert board[r][c] == player
                player = opponent(player)


class TestWinner:
    def test_undecided_while_moves_remain(self):
        assert check_winner(starting_board()) == GameResult.UNDECIDED

    def test_full_board_majority(self):
        board = [[BLACK_CELL] * 8 for _ in range(4)] + \
                [[WHITE_CELL] * 8 for _ in range(4)]
        board[4][0] = BLACK_CELL
        assert check_winner(board) == GameResult.BLACK

    def test_blocked_tie(self, make_board):
        board = make_board([
            "B.......",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            ".......W",
        ])
        assert not has_any_move(board)
        assert check_winner(board) == GameResult.TIE

    def test_white_wins_when_blocked(self, make_board):
        board = make_board([
            "WW......",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            ".......B",
        ])
        assert check_winner(board) == GameResult.WHITE


class TestNotation:
    def test_move_to_notation(self):
        assert move_to_notation(19) == "d3"
        assert move_to_notation(0) == "a1"
        assert move_to_notation(63) == "h8"

    def test_notation_to_move(self):
        assert notation_to_move("d3") == 19
        assert notation_to_move(" F5 ") == 37

    def test_invalid_notation(self):
        with pytest.raises(ValueError):
            notation_to_move("z9")
        with pytest.raises(ValueError):
            move_to_notation(64)

    def test_result_strings(self):
        assert result_to_string(GameResult.BLACK) == "1-0"
        assert result_to_string(GameResult.WHITE) == "0-1"
        assert result_to_string(GameResult.TIE) == "1/2-1/2"

    def test_record_roundtrip(self):
        moves = [19, 18, 17, 9, 37]
        text = game_to_record(moves, headers={"Black": "k=3", "White": "k=1"},
                              result=GameResult.WHITE)
        assert "1. d3 c3" in text
        assert "3. f5" in text
        headers, parsed, result = record_to_game(text)
        assert headers == {"Black": "k=3", "White": "k=1"}
        assert parsed == moves
        assert result == GameResult.WHITE

    def test_record_without_headers(self):
        headers, moves, result = record_to_game("1. d3 c3\n2. c4")
        assert headers == {}
        assert moves == [19, 18, 26]
        assert result is None
