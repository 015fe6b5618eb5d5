
import numpy as np
from typing import List, Optional, Tuple

EMPTY = 0
X = 1   # first mover
O = -1
TIE = 0

SYMBOLS = {X: "X", O: "O", EMPTY: "."}


def symbol_char(symbol: int) -> str:
    return SYMBOLS[symbol]


class TicTacToe:
    BOARD_SIZE = 9
    WINNING_LINES = [
        (0,1,2),(3,4,5),(6,7,8),
        (0,3,6),(1,4,7),(2,5,8),
        (0,4,8),(2,4,6)
    ]

    def initial_state(self):
        board = np.zeros(self.BOARD_SIZE, dtype=int)
        player = X
        return board, player

    def legal_actions(self, state) -> List[int]:
        board, _ = state
        return [i for i in range(self.BOARD_SIZE) if board[i] == EMPTY]

    def is_legal(self, state, action) -> bool:
        board, _ = state
        return 0 <= action < self.BOARD_SIZE and board[action] == EMPTY

    def next_state(self, state, action: int):
        """Place the current player's symbol at `action` and pass the turn."""
        board, player = state
        if not self.is_legal(state, action):
            raise ValueError(f"Cell {action} is not a legal move")
        next_board = board.copy()
        next_board[action] = player
        return next_board, -player

    def check_terminal(self, state) -> Tuple[bool, Optional[int]]:
        """Returns (is_over, winner); winner is X, O, TIE or None."""
        board, _ = state
        for i,j,k in self.WINNING_LINES:
            if board[i] == board[j] == board[k] != EMPTY:
                return True, int(board[i])
        if not (board == EMPTY).any():
            return True, TIE
        return False, None

    def is_terminal(self, state) -> bool:
        return self.check_terminal(state)[0]


def board_to_inputs(board) -> np.ndarray:
    """Encode a board as 18 floats: an (is X, is O) pair per cell."""
    inputs = np.zeros(2 * TicTacToe.BOARD_SIZE, dtype=np.float64)
    inputs[0::2] = board == X
    inputs[1::2] = board == O
    return inputs
