
import numpy as np

from ttt_selfplay.config import Config
from ttt_selfplay.game import TicTacToe
from ttt_selfplay.network import PolicyNetwork
from ttt_selfplay.play import play_game
from ttt_selfplay.train import train_against_random


def main():
    config = Config()
    rng = np.random.default_rng(config.SEED)
    game = TicTacToe()

    network = PolicyNetwork(
        rng,
        input_size=config.INPUT_SIZE,
        hidden_size=config.HIDDEN_SIZE,
        output_size=config.OUTPUT_SIZE,
    )

    print(f"\n{'='*60}")
    print("Self-play training for TICTACTOE")
    print(f"{'='*60}")
    print(f"Network: {config.INPUT_SIZE} -> {config.HIDDEN_SIZE} -> {config.OUTPUT_SIZE}")
    print(f"Learning rate: {config.LEARNING_RATE}")
    print(f"Training games: {config.NUM_TRAINING_GAMES}")
    print(f"{'='*60}\n")

    train_against_random(
        game,
        network,
        rng,
        num_games=config.NUM_TRAINING_GAMES,
        learning_rate=config.LEARNING_RATE,
        report_interval=config.REPORT_INTERVAL,
    )

    while True:
        play_game(game, network, learning_rate=config.LEARNING_RATE)
        again = input("Play again? [y/n]: ").strip().lower()
        if again != "y":
            break


if __name__ == "__main__":
    main()
