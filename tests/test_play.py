import numpy as np

from ttt_selfplay.game import O, X, TicTacToe
from ttt_selfplay.play import play_game, print_board, print_move_probabilities
from ttt_selfplay.selfplay import MoveProbabilities


class PreferHighCells:
    """Always prefers cell 8, then 7, and so on."""

    def __init__(self):
        self.probs = np.arange(1, 10) / 45.0
        self.updates = []

    def forward(self, inputs):
        return self.probs.copy()

    def update(self, target, learning_rate, reward_scaling):
        self.updates.append((target, reward_scaling))


def feed_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_human_win_with_invalid_inputs(monkeypatch, capsys):
    network = PreferHighCells()
    feed_input(monkeypatch, ["abc", "9", "0", "0", "1", "2"])

    winner = play_game(TicTacToe(), network)

    out = capsys.readouterr().out
    assert winner == X
    assert out.count("Invalid move! Try again.") == 3
    assert "Computer placed O at position 8" in out
    assert "Computer placed O at position 7" in out
    assert "You win!" in out
    # Network learned from its two moves with a negative reward
    assert len(network.updates) == 2
    assert all(r < 0 for _, r in network.updates)


def test_computer_win(monkeypatch, capsys):
    feed_input(monkeypatch, ["0", "1", "3"])
    # X: 0, 1, 3 against O: 8, 7, 6 -> O completes the bottom row
    winner = play_game(TicTacToe(), PreferHighCells(), show_probs=False)
    out = capsys.readouterr().out
    assert winner == O
    assert "Computer wins!" in out
    assert "Neural network move probabilities:" not in out


def test_print_board_shows_indices(capsys):
    board = np.array([X, O, 0, 0, X, 0, 0, 0, O])
    print_board(board)
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == ["XO. 012", ".X. 345", "..O 678"]


def test_print_move_probabilities_marks(capsys):
    probs = np.array([0.3, 0.1, 0.1, 0.1, 0.1, 0.1, 0.1, 0.05, 0.05])
    print_move_probabilities(MoveProbabilities(probs=probs, best_overall=0, best_legal=1, total=1.0))
    out = capsys.readouterr().out
    assert " 30.0%*" in out
    assert " 10.0%#" in out
    assert "Sum of all probabilities: 1.00" in out
