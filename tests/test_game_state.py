"""Tests for the game state and the move mutator."""

from logic.config import GameConfig
from logic.game_state import (
    GameState,
    GameStatus,
    Place,
    Player,
    Relocate,
    all_pieces_in,
    apply_move,
    count_pieces,
    new_board,
)


def test_new_game_is_empty_with_o_to_move():
    game = GameState()

    assert game.board.shape == (9,)
    assert all(cell == GameConfig.EMPTY_MARK for cell in game.board)
    assert game.current_player == Player.O
    assert game.status == GameStatus.IN_PROGRESS
    assert game.winner is None
    assert not game.is_game_over


def test_players_alternate():
    assert Player.O.opposite() == Player.X
    assert Player.X.opposite() == Player.O
    assert Player.O.mark != Player.X.mark


def test_place_sets_target_cell():
    board = new_board()

    apply_move(board, Place(4), Player.O)

    assert board[4] == "O"
    assert count_pieces(board, Player.O) == 1
    assert count_pieces(board, Player.X) == 0


def test_relocate_clears_source_and_sets_target(board_factory):
    board = board_factory(o=[1, 2, 3], x=[5])

    apply_move(board, Relocate(2, 7), Player.O)

    assert board[2] == GameConfig.EMPTY_MARK
    assert board[7] == "O"
    assert count_pieces(board, Player.O) == 3


def test_all_pieces_in_at_three(board_factory):
    assert not all_pieces_in(board_factory(o=[1, 2]), Player.O)
    assert all_pieces_in(board_factory(o=[1, 2, 9]), Player.O)
    assert not all_pieces_in(board_factory(o=[1, 2, 9]), Player.X)


def test_state_applies_move_for_current_player():
    game = GameState()
    game.apply_move(Place(0))
    game.switch_player()
    game.apply_move(Place(8))

    assert game.board[0] == "O"
    assert game.board[8] == "X"
    assert game.current_player == Player.X
    assert not all_pieces_in(game.board, game.current_player)


def test_terminal_statuses():
    won = GameState()
    won.declare_winner(Player.X)
    assert won.status == GameStatus.WON
    assert won.winner == Player.X
    assert won.is_game_over

    aborted = GameState()
    aborted.abort()
    assert aborted.status == GameStatus.ABORTED
    assert aborted.winner is None
    assert aborted.is_game_over


def test_first_player_setting_names_a_player():
    assert GameConfig.FIRST_PLAYER in {player.mark for player in Player}
    assert GameState().current_player.mark == GameConfig.FIRST_PLAYER
