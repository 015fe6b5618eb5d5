import numpy as np
import pytest

from ttt_selfplay.game import EMPTY, O, TIE, X, TicTacToe, board_to_inputs


def make_state(cells, player=X):
    board = np.array([{"X": X, "O": O, ".": EMPTY}[c] for c in cells], dtype=int)
    return board, player


def test_initial_state_is_empty_with_x_to_move():
    game = TicTacToe()
    board, player = game.initial_state()
    assert (board == EMPTY).all()
    assert player == X
    assert game.check_terminal((board, player)) == (False, None)


def test_row_win_scenario():
    game = TicTacToe()
    state = make_state("XX..O....", X)
    assert game.check_terminal(state) == (False, None)
    assert game.legal_actions(state) == [2, 3, 5, 6, 7, 8]

    state = game.next_state(state, 2)
    assert game.check_terminal(state) == (True, X)
    assert state[1] == O


@pytest.mark.parametrize("cells,winner", [
    ("O..O..O..", O),
    (".X..X..X.", X),
    ("X...X...X", X),
    ("..O.O.O..", O),
    ("......XXX", X),
])
def test_columns_and_diagonals(cells, winner):
    game = TicTacToe()
    assert game.check_terminal(make_state(cells)) == (True, winner)


def test_full_board_without_line_is_tie():
    game = TicTacToe()
    state = make_state("XOXXOOOXX")
    assert game.legal_actions(state) == []
    assert game.check_terminal(state) == (True, TIE)


def test_full_board_with_line_reports_winner():
    game = TicTacToe()
    assert game.check_terminal(make_state("XXXOOXOXO")) == (True, X)


def test_next_state_does_not_mutate_input():
    game = TicTacToe()
    state = game.initial_state()
    new_board, new_player = game.next_state(state, 4)
    assert state[0][4] == EMPTY
    assert new_board[4] == X
    assert new_player == O


@pytest.mark.parametrize("action", [-1, 9, 0])
def test_illegal_moves_raise(action):
    game = TicTacToe()
    state = make_state("X........", O)
    assert not game.is_legal(state, action)
    with pytest.raises(ValueError):
        game.next_state(state, action)


def test_empty_board_encodes_to_zeros():
    inputs = board_to_inputs(np.zeros(9, dtype=int))
    assert inputs.shape == (18,)
    assert not inputs.any()


def test_encoding_pairs_per_cell():
    board, _ = make_state("X.O......")
    inputs = board_to_inputs(board)
    assert list(inputs[:6]) == [1, 0, 0, 0, 0, 1]
    assert inputs[6:].sum() == 0


def test_boards_differing_in_one_cell_encode_differently():
    base, _ = make_state("XO.X.O...")
    seen = {tuple(board_to_inputs(base))}
    for cell in range(9):
        for symbol in (EMPTY, X, O):
            if base[cell] == symbol:
                continue
            board = base.copy()
            board[cell] = symbol
            encoded = tuple(board_to_inputs(board))
            assert encoded not in seen
            seen.add(encoded)
