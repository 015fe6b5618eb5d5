
import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ttt_selfplay.config import Config
from ttt_selfplay.game import TIE, TicTacToe, board_to_inputs


@dataclass
class MoveProbabilities:
    """Network output for one position, kept for display only."""
    probs: np.ndarray
    best_overall: int  # argmax over all cells, legal or not
    best_legal: int
    total: float


@dataclass
class GameRecord:
    moves: List[int] = field(default_factory=list)
    winner: Optional[int] = None  # X, O or TIE once finished


def select_move_with_probs(game, state, network) -> Tuple[int, MoveProbabilities]:
    board, _ = state
    legal = game.legal_actions(state)
    if not legal:
        raise ValueError("No legal moves")

    probs = network.forward(board_to_inputs(board))

    # np.argmax keeps the lowest index on ties
    masked = np.full(len(probs), -np.inf)
    masked[legal] = probs[legal]
    best_legal = int(np.argmax(masked))

    info = MoveProbabilities(
        probs=probs,
        best_overall=int(np.argmax(probs)),
        best_legal=best_legal,
        total=float(probs.sum()),
    )
    return best_legal, info


def select_move(game, state, network) -> int:
    """Most probable legal cell according to the network."""
    move, _ = select_move_with_probs(game, state, network)
    return move


def random_move(game, state, rng: np.random.Generator) -> int:
    legal = game.legal_actions(state)
    if not legal:
        raise ValueError("No legal moves")
    return int(legal[rng.integers(len(legal))])


def terminal_reward(winner: int, learner: int = Config.LEARNER_SYMBOL) -> float:
    if winner == TIE:
        return Config.TIE_REWARD
    if winner == learner:
        return Config.WIN_REWARD
    return Config.LOSS_REWARD


def move_importance(move_idx: int, num_moves: int) -> float:
    """Recency weight from 0.5 for the opening move up toward 1.0."""
    return 0.5 + 0.5 * move_idx / num_moves


def build_target(legal: List[int], move: int, scaled_reward: float, size: int = TicTacToe.BOARD_SIZE) -> np.ndarray:
    """Target distribution for one training move.

    Non-negative reward: all mass on the move played. Negative reward: mass
    spread evenly over the other cells that were legal at the time.
    """
    target = np.zeros(size)
    if scaled_reward >= 0:
        target[move] = 1.0
        return target

    alternatives = [c for c in legal if c != move]
    if alternatives:
        target[alternatives] = 1.0 / len(alternatives)
    return target


def learn_from_game(
    game,
    network,
    moves: List[int],
    winner: int,
    learner: int = Config.LEARNER_SYMBOL,
    learning_rate: float = Config.LEARNING_RATE,
) -> int:
    """Replay a finished game and update the network on each of the learner's moves.

    Returns the number of updates applied.
    """
    reward = terminal_reward(winner, learner)
    num_moves = len(moves)
    state = game.initial_state()
    updates = 0

    for move_idx, move in enumerate(moves):
        board, mover = state
        if mover == learner:
            scaled_reward = reward * move_importance(move_idx, num_moves)
            target = build_target(game.legal_actions(state), move, scaled_reward)
            # update() consumes the activations of this exact position
            network.forward(board_to_inputs(board))
            network.update(target, learning_rate, scaled_reward)
            updates += 1
        state = game.next_state(state, move)

    return updates


def play_random_game(
    game,
    network,
    rng: np.random.Generator,
    learner: int = Config.LEARNER_SYMBOL,
    learning_rate: float = Config.LEARNING_RATE,
    learn: bool = True,
) -> GameRecord:
    """Play the network against a uniformly random opponent, then learn from the result."""
    record = GameRecord()
    state = game.initial_state()

    is_over, winner = game.check_terminal(state)
    while not is_over:
        _, player = state
        if player == learner:
            move = select_move(game, state, network)
        else:
            move = random_move(game, state, rng)
        state = game.next_state(state, move)
        record.moves.append(move)
        is_over, winner = game.check_terminal(state)

    record.winner = winner
    if learn:
        learn_from_game(game, network, record.moves, winner, learner, learning_rate)
    return record
