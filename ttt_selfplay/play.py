
from ttt_selfplay.config import Config
from ttt_selfplay.game import O, TIE, X, symbol_char
from ttt_selfplay.selfplay import MoveProbabilities, learn_from_game, select_move_with_probs


def print_board(board):
    """Print the board with cell indices alongside each row"""
    for row in range(3):
        cells = "".join(symbol_char(board[row * 3 + col]) for col in range(3))
        indices = "".join(str(row * 3 + col) for col in range(3))
        print(f"{cells} {indices}")
    print()


def print_move_probabilities(info: MoveProbabilities):
    """Per-cell probabilities; * marks the overall favourite, # the chosen legal move"""
    print("Neural network move probabilities:")
    for row in range(3):
        line = ""
        for col in range(3):
            pos = row * 3 + col
            line += f"{info.probs[pos] * 100.0:5.1f}%"
            if pos == info.best_overall:
                line += "*"
            if pos == info.best_legal:
                line += "#"
            line += " "
        print(line)
    print(f"Sum of all probabilities: {info.total:.2f}\n")


def human_move(game, state):
    """Get move from human player"""
    while True:
        try:
            move = int(input("Your move (0-8): "))
            if game.is_legal(state, move):
                return move
        except ValueError:
            pass
        print("Invalid move! Try again.")


def play_game(game, network, learning_rate=Config.LEARNING_RATE, show_probs=True):
    """Human (X) against the network (O); the network learns from the result."""
    human_player = X
    network_player = O
    state = game.initial_state()
    moves = []

    print("Welcome to Tic Tac Toe! You are X, the computer is O.")
    print("Enter positions as numbers from 0 to 8 (see picture).")

    is_over, winner = game.check_terminal(state)
    while not is_over:
        board, player = state
        print_board(board)

        if player == human_player:
            action = human_move(game, state)
        else:
            print("Computer's move:")
            action, info = select_move_with_probs(game, state, network)
            if show_probs:
                print_move_probabilities(info)
            print(f"Computer placed O at position {action}")

        state = game.next_state(state, action)
        moves.append(action)
        is_over, winner = game.check_terminal(state)

    print_board(state[0])
    if winner == human_player:
        print("You win!")
    elif winner == TIE:
        print("It's a tie!")
    else:
        print("Computer wins!")

    learn_from_game(game, network, moves, winner, learner=network_player, learning_rate=learning_rate)
    return winner
