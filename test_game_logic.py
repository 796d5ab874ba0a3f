"""
Tests for the Three Dot Game rules: board, validator, win checker and game state.
"""

import pytest

from logic.board import Board, EMPTY
from logic.config import GameConfig
from logic.game_state import GameState, GameStateError, GameStatus
from logic.move_validator import MoveValidator, PlacementResult
from logic.win_checker import WinChecker


# A full 5x5 board with no three in a row for either player,
# in an order where every dot touches an earlier one.
DRAW_MOVES_5X5 = [
    (0, 0), (1, 0), (0, 1), (1, 1), (1, 2), (0, 2), (1, 3), (0, 3), (0, 4), (1, 4),
    (2, 0), (2, 2), (2, 1), (2, 3), (2, 4),
    (3, 0), (3, 2), (3, 1), (3, 3), (3, 4),
    (4, 0), (4, 2), (4, 1), (4, 3), (4, 4),
]


def play(game, moves):
    """Play moves in order, resolving each turn. Returns the final status."""
    status = game.status
    for row, col in moves:
        assert game.place_dot(row, col) is PlacementResult.SUCCESS, (row, col)
        status = game.resolve_turn()
    return status


# ==================== BOARD ====================

def test_board_starts_empty():
    board = Board(3, 4)
    assert board.grid.shape == (3, 4)
    assert len(board.empty_cells()) == 12
    assert not board.is_full()


def test_get_cell_off_board_is_none():
    board = Board(2, 2)
    assert board.get_cell(0, 0) == EMPTY
    assert board.get_cell(-1, 0) is None
    assert board.get_cell(0, 2) is None
    assert board.get_cell(2, 0) is None


def test_place_never_overwrites():
    board = Board(2, 2)
    board.place(0, 0, 1)
    with pytest.raises(ValueError):
        board.place(0, 0, 2)
    assert board.get_cell(0, 0) == 1


def test_adjacent_dot_includes_diagonals_and_clamps_edges():
    board = Board(5, 5)
    board.place(0, 0, 2)
    assert board.has_adjacent_dot(1, 1)
    assert board.has_adjacent_dot(0, 1)
    assert board.has_adjacent_dot(1, 0)
    assert not board.has_adjacent_dot(0, 2)
    assert not board.has_adjacent_dot(4, 4)
    # An occupied cell doesn't count as its own neighbour
    assert not board.has_adjacent_dot(0, 0)


def test_board_copy_is_independent():
    board = Board(2, 2)
    copy = board.copy()
    copy.place(1, 1, 1)
    assert board.is_empty(1, 1)


# ==================== FIRST MOVE ====================

@pytest.mark.parametrize("rows, cols", [(1, 1), (1, 7), (4, 1), (5, 5), (12, 3)])
def test_first_move_succeeds_anywhere(rows, cols):
    for row in range(rows):
        for col in range(cols):
            game = GameState(GameConfig(rows=rows, cols=cols))
            assert game.place_dot(row, col) is PlacementResult.SUCCESS
            assert game.has_first_move_happened
            assert game.status is GameStatus.IN_PROGRESS
            assert game.board.get_cell(row, col) == 1


def test_one_by_one_board_draws_after_first_move():
    game = GameState(GameConfig(rows=1, cols=1))
    assert play(game, [(0, 0)]) is GameStatus.DRAWN
    assert game.winner is None


# ==================== REJECTED MOVES ====================

def test_occupied_cell_is_already_filled_and_unchanged():
    game = GameState()
    game.place_dot(2, 2)
    game.resolve_turn()
    before = game.board.grid.copy()

    assert game.place_dot(2, 2) is PlacementResult.ALREADY_FILLED
    assert (game.board.grid == before).all()
    assert game.current_player == 2
    assert len(game.moves) == 1


def test_isolated_cell_has_no_adjacent_dot():
    game = GameState()
    game.place_dot(0, 0)
    game.resolve_turn()
    before = game.board.grid.copy()

    assert game.place_dot(4, 4) is PlacementResult.NO_ADJACENT_DOT
    assert (game.board.grid == before).all()
    assert game.current_player == 2


def test_out_of_bounds_is_rejected_even_for_first_move():
    game = GameState()
    assert game.place_dot(5, 0) is PlacementResult.OUT_OF_BOUNDS
    assert game.place_dot(0, -1) is PlacementResult.OUT_OF_BOUNDS
    assert game.status is GameStatus.NOT_STARTED
    assert not game.has_first_move_happened


def test_validator_messages():
    game = GameState()
    validator = MoveValidator()
    game.place_dot(0, 0)

    filled = validator.validate_move(game, 0, 0)
    assert filled.result is PlacementResult.ALREADY_FILLED
    assert "occupied by player 1" in filled.error_message

    lonely = validator.validate_move(game, 3, 3)
    assert lonely.result is PlacementResult.NO_ADJACENT_DOT
    assert lonely.error_message

    assert validator.validate_move(game, 1, 1).error_message is None


def test_valid_moves_are_the_neighbourhood():
    game = GameState()
    assert len(game.legal_moves()) == 25
    game.place_dot(0, 0)
    assert game.legal_moves() == [(0, 1), (1, 0), (1, 1)]


# ==================== TURNS ====================

@pytest.mark.parametrize("player_count", [1, 2, 3, 9])
def test_advance_turn_is_cyclic(player_count):
    game = GameState(GameConfig(player_count=player_count))
    game.place_dot(0, 0)

    seen = []
    for _ in range(player_count):
        seen.append(game.current_player)
        game.advance_turn()

    assert game.current_player == 1
    assert seen == list(range(1, player_count + 1))


def test_advance_turn_before_start_raises():
    game = GameState()
    with pytest.raises(GameStateError):
        game.advance_turn()
    with pytest.raises(GameStateError):
        game.resolve_turn()


def test_failed_placement_keeps_the_turn():
    game = GameState()
    play(game, [(0, 0)])
    assert game.current_player == 2
    game.place_dot(4, 4)
    assert game.current_player == 2


# ==================== WINNING ====================

def test_no_win_on_fresh_board():
    game = GameState()
    assert not game.has_current_player_won()
    assert not game.is_board_full()


def test_row_win_scenario():
    game = GameState()
    moves = [(0, 0), (1, 1), (0, 1), (1, 0)]
    assert play(game, moves) is GameStatus.IN_PROGRESS
    assert game.current_player == 1

    assert game.place_dot(0, 2) is PlacementResult.SUCCESS
    assert game.has_current_player_won()
    assert game.resolve_turn() is GameStatus.WON
    assert game.winner == 1
    assert game.current_player == 1
    assert game.winning_line() == [(0, 0), (0, 1), (0, 2)]


@pytest.mark.parametrize("line", [
    [(2, 4), (3, 4), (4, 4)],      # Vertical, bottom-right corner
    [(4, 1), (4, 2), (4, 3)],      # Horizontal, last row
    [(2, 2), (3, 3), (4, 4)],      # Main diagonal
    [(2, 4), (3, 3), (4, 2)],      # Anti-diagonal
])
def test_lines_anywhere_on_the_board_win(line):
    board = Board(5, 5)
    for row, col in line:
        board.place(row, col, 2)
    checker = WinChecker()
    assert checker.has_won(board, 2)
    assert not checker.has_won(board, 1)
    assert checker.get_winning_line(board, 2) == line


def test_lines_do_not_wrap_around_edges():
    board = Board(5, 5)
    for row, col in [(0, 3), (0, 4), (1, 0)]:
        board.place(row, col, 1)
    assert not WinChecker().has_won(board, 1)


def test_two_in_a_row_or_mixed_line_is_not_a_win():
    board = Board(3, 3)
    board.place(0, 0, 1)
    board.place(0, 1, 1)
    board.place(0, 2, 2)
    checker = WinChecker()
    assert not checker.has_won(board, 1)
    assert not checker.has_won(board, 2)


def test_multi_player_win():
    game = GameState(GameConfig(rows=4, cols=4, player_count=3))
    moves = [
        (0, 0), (1, 0), (2, 0),   # Players 1, 2, 3
        (0, 1), (1, 1), (2, 1),
        (0, 2),                   # Player 1 completes row 0
    ]
    assert play(game, moves) is GameStatus.WON
    assert game.winner == 1


# ==================== DRAW ====================

def test_full_board_without_line_is_a_draw():
    game = GameState()
    assert play(game, DRAW_MOVES_5X5) is GameStatus.DRAWN
    assert game.is_board_full()
    assert not game.has_current_player_won()
    assert game.winner is None
    assert game.winning_line() is None
    assert WinChecker().is_draw(game.board, game.current_player)


def test_small_board_draw():
    game = GameState(GameConfig(rows=3, cols=3))
    moves = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]
    assert play(game, moves) is GameStatus.DRAWN


def test_queries_are_idempotent():
    game = GameState()
    play(game, DRAW_MOVES_5X5)
    grid = game.board.grid.copy()
    for _ in range(3):
        assert game.has_current_player_won() is False
        assert game.is_board_full() is True
    assert (game.board.grid == grid).all()
    assert game.status is GameStatus.DRAWN


# ==================== GAME OVER ====================

def test_no_moves_after_game_over():
    game = GameState()
    play(game, [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])
    assert game.is_game_over
    assert game.place_dot(0, 3) is PlacementResult.GAME_OVER
    assert game.board.is_empty(0, 3)
    assert game.legal_moves() == []
    with pytest.raises(GameStateError):
        game.advance_turn()
    with pytest.raises(GameStateError):
        game.resolve_turn()


def test_move_history():
    game = GameState()
    play(game, [(2, 2), (2, 3)])
    assert [(m.player, m.row, m.col, m.move_number) for m in game.moves] == [
        (1, 2, 2, 0),
        (2, 2, 3, 1),
    ]
