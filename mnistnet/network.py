"""A two-layer fully connected network with ReLU and softmax."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

INPUT_SIZE = 784
HIDDEN_SIZE = 128
OUTPUT_SIZE = 10
LEARNING_RATE = 0.01
INIT_SCALE = 0.01


def relu(x) -> np.ndarray:
    """Element-wise rectifier: keep positive values, replace the rest with zero."""
    values = np.asarray(x, dtype=np.float64)
    return np.where(values > 0, values, 0.0)


def softmax(x) -> np.ndarray:
    """Normalised exponentials along the last axis."""
    values = np.asarray(x, dtype=np.float64)
    shifted = np.exp(values - values.max(axis=-1, keepdims=True))
    return shifted / shifted.sum(axis=-1, keepdims=True)


@dataclass
class NeuralNetwork:
    """Weights and biases of an input -> hidden -> output network."""

    w1: np.ndarray
    w2: np.ndarray
    b1: np.ndarray
    b2: np.ndarray
    learning_rate: float = LEARNING_RATE

    def __post_init__(self) -> None:
        self.w1 = np.array(self.w1, dtype=np.float64)
        self.w2 = np.array(self.w2, dtype=np.float64)
        self.b1 = np.array(self.b1, dtype=np.float64)
        self.b2 = np.array(self.b2, dtype=np.float64)
        if self.w1.ndim != 2 or self.w2.ndim != 2:
            raise ValueError("weight matrices must be two-dimensional")
        hidden, _ = self.w1.shape
        output, hidden2 = self.w2.shape
        if hidden2 != hidden:
            raise ValueError("w2 columns must match w1 rows")
        if self.b1.shape != (hidden,) or self.b2.shape != (output,):
            raise ValueError("bias shapes do not match the weights")

    @property
    def input_size(self) -> int:
        return self.w1.shape[1]

    @property
    def hidden_size(self) -> int:
        return self.w1.shape[0]

    @property
    def output_size(self) -> int:
        return self.w2.shape[0]

    @classmethod
    def random(
        cls,
        seed: Optional[int] = None,
        input_size: int = INPUT_SIZE,
        hidden_size: int = HIDDEN_SIZE,
        output_size: int = OUTPUT_SIZE,
        scale: float = INIT_SCALE,
        learning_rate: float = LEARNING_RATE,
    ) -> "NeuralNetwork":
        """Weights drawn uniformly from [0, scale), biases zero."""
        rng = np.random.default_rng(seed)
        return cls(
            w1=rng.random((hidden_size, input_size)) * scale,
            w2=rng.random((output_size, hidden_size)) * scale,
            b1=np.zeros(hidden_size),
            b2=np.zeros(output_size),
            learning_rate=learning_rate,
        )

    def _as_batch(self, values, width: int, name: str) -> np.ndarray:
        batch = np.atleast_2d(np.asarray(values, dtype=np.float64))
        if batch.ndim != 2 or batch.shape[1] != width:
            raise ValueError(f"{name} must have {width} columns")
        return batch

    def forward(self, inputs) -> Tuple[np.ndarray, np.ndarray]:
        """Return the hidden activations and output probabilities for the inputs."""
        single = np.ndim(inputs) == 1
        batch = self._as_batch(inputs, self.input_size, "inputs")
        hidden = relu(batch @ self.w1.T + self.b1)
        output = softmax(hidden @ self.w2.T + self.b2)
        if single:
            return hidden[0], output[0]
        return hidden, output

    def backward(self, inputs, hidden, output, targets) -> None:
        """Apply one gradient-descent step averaged over the batch."""
        x = self._as_batch(inputs, self.input_size, "inputs")
        h = self._as_batch(hidden, self.hidden_size, "hidden")
        out = self._as_batch(output, self.output_size, "output")
        t = self._as_batch(targets, self.output_size, "targets")
        size = x.shape[0]
        if not (h.shape[0] == out.shape[0] == t.shape[0] == size):
            raise ValueError("batch sizes do not agree")

        d_output = out - t
        d_hidden = (d_output @ self.w2) * (h > 0)

        grad_w2 = d_output.T @ h / size
        grad_w1 = d_hidden.T @ x / size
        grad_b2 = d_output.sum(axis=0) / size
        grad_b1 = d_hidden.sum(axis=0) / size

        self.w2 -= self.learning_rate * grad_w2
        self.w1 -= self.learning_rate * grad_w1
        self.b2 -= self.learning_rate * grad_b2
        self.b1 -= self.learning_rate * grad_b1

    def predict(self, inputs):
        """Index of the most probable class (first one on ties)."""
        _, output = self.forward(inputs)
        result = np.argmax(output, axis=-1)
        if np.ndim(result) == 0:
            return int(result)
        return result