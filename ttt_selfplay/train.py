
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np
from tqdm import tqdm

from ttt_selfplay.config import Config
from ttt_selfplay.game import TIE
from ttt_selfplay.selfplay import play_random_game


@dataclass
class TrainingStats:
    wins: int = 0
    losses: int = 0
    ties: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses + self.ties

    def record(self, winner: int, learner: int = Config.LEARNER_SYMBOL):
        if winner == TIE:
            self.ties += 1
        elif winner == learner:
            self.wins += 1
        else:
            self.losses += 1

    def summary(self) -> str:
        n = max(1, self.games)
        return (
            f"Games: {self.games}, "
            f"Wins: {self.wins} ({self.wins * 100 / n:.1f}%), "
            f"Losses: {self.losses} ({self.losses * 100 / n:.1f}%), "
            f"Ties: {self.ties} ({self.ties * 100 / n:.1f}%)"
        )


def print_progress(games_played: int, stats: TrainingStats):
    tqdm.write(stats.summary())


def train_against_random(
    game,
    network,
    rng: np.random.Generator,
    num_games: int = Config.NUM_TRAINING_GAMES,
    learning_rate: float = Config.LEARNING_RATE,
    learner: int = Config.LEARNER_SYMBOL,
    report_interval: int = Config.REPORT_INTERVAL,
    on_progress: Optional[Callable[[int, TrainingStats], None]] = print_progress,
    progress: bool = True,
) -> TrainingStats:
    """Train the network for a fixed number of games against a random opponent.

    Games run strictly one after another; each game's updates are applied
    before the next game starts.
    """
    stats = TrainingStats()

    if progress:
        print(f"Training neural network against {num_games} random games...")
    for i in tqdm(range(num_games), desc="Self-play", disable=not progress):
        record = play_random_game(game, network, rng, learner=learner, learning_rate=learning_rate)
        stats.record(record.winner, learner)

        if on_progress is not None and report_interval and (i + 1) % report_interval == 0:
            on_progress(i + 1, stats)

    if progress:
        print("\nTraining complete!")
    return stats
