
import numpy as np
from dataclasses import dataclass

from ttt_selfplay.config import Config


def relu(x):
    return np.maximum(x, 0.0)


def relu_derivative(x):
    return (x > 0).astype(np.float64)


def softmax(logits: np.ndarray) -> np.ndarray:
    """Max-shifted softmax; falls back to uniform if the exponentials don't sum to a positive value."""
    exps = np.exp(logits - np.max(logits))
    total = exps.sum()
    if total > 0:
        return exps / total
    return np.full(len(logits), 1.0 / len(logits))


@dataclass
class NetworkParameters:
    weights_ih: np.ndarray  # (input_size, hidden_size)
    weights_ho: np.ndarray  # (hidden_size, output_size)
    biases_h: np.ndarray
    biases_o: np.ndarray

    def copy(self) -> "NetworkParameters":
        return NetworkParameters(
            weights_ih=self.weights_ih.copy(),
            weights_ho=self.weights_ho.copy(),
            biases_h=self.biases_h.copy(),
            biases_o=self.biases_o.copy(),
        )


class PolicyNetwork:
    """One hidden ReLU layer with a softmax over the nine cells.

    Parameters are plain numpy arrays updated in place by `update`, which
    reuses the activations cached by the most recent `forward` call, so
    always run `forward` on a state right before updating on it.
    """

    def __init__(
        self,
        rng: np.random.Generator,
        input_size: int = Config.INPUT_SIZE,
        hidden_size: int = Config.HIDDEN_SIZE,
        output_size: int = Config.OUTPUT_SIZE,
        init_range: float = Config.INIT_RANGE,
    ):
        self.input_size = input_size
        self.hidden_size = hidden_size
        self.output_size = output_size

        # Plain uniform init, no fan-in scaling
        self._params = NetworkParameters(
            weights_ih=rng.uniform(-init_range, init_range, (input_size, hidden_size)),
            weights_ho=rng.uniform(-init_range, init_range, (hidden_size, output_size)),
            biases_h=rng.uniform(-init_range, init_range, hidden_size),
            biases_o=rng.uniform(-init_range, init_range, output_size),
        )

        # Activation buffers from the last forward pass
        self._inputs = None
        self._hidden_pre = None
        self._hidden = None
        self._logits = None
        self._outputs = None

    @property
    def parameters(self) -> NetworkParameters:
        """Snapshot of the current parameters."""
        return self._params.copy()

    @property
    def outputs(self) -> np.ndarray:
        if self._outputs is None:
            raise RuntimeError("forward() has not been called yet")
        return self._outputs.copy()

    def forward(self, inputs) -> np.ndarray:
        inputs = np.asarray(inputs, dtype=np.float64)
        if inputs.shape != (self.input_size,):
            raise ValueError(f"Expected {self.input_size} inputs, got shape {inputs.shape}")

        p = self._params
        self._inputs = inputs.copy()
        self._hidden_pre = p.biases_h + inputs @ p.weights_ih
        self._hidden = relu(self._hidden_pre)
        self._logits = p.biases_o + self._hidden @ p.weights_ho
        self._outputs = softmax(self._logits)
        return self._outputs.copy()

    def update(self, target_probs, learning_rate: float, reward_scaling: float) -> None:
        """Single SGD step pulling the last forward output toward `target_probs`.

        Only the magnitude of `reward_scaling` is used; the sign is expected
        to be encoded in the target distribution already.
        """
        if self._outputs is None:
            raise RuntimeError("update() needs a preceding forward() call")
        target_probs = np.asarray(target_probs, dtype=np.float64)
        if target_probs.shape != (self.output_size,):
            raise ValueError(f"Expected {self.output_size} targets, got shape {target_probs.shape}")

        p = self._params
        output_deltas = (self._outputs - target_probs) * abs(reward_scaling)
        # Backpropagate before touching weights_ho
        hidden_deltas = (p.weights_ho @ output_deltas) * relu_derivative(self._hidden_pre)

        p.weights_ho -= learning_rate * np.outer(self._hidden, output_deltas)
        p.biases_o -= learning_rate * output_deltas
        p.weights_ih -= learning_rate * np.outer(self._inputs, hidden_deltas)
        p.biases_h -= learning_rate * hidden_deltas
