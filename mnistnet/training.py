"""Training and evaluation loops over mini-batches."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

import numpy as np

from mnistnet.network import NeuralNetwork

EPOCHS = 3
BATCH_SIZE = 1


@dataclass(frozen=True)
class EpochStats:
    """Summary of one pass over the training data."""

    epoch: int
    loss: float
    accuracy: float
    seconds: float


def batch_starts(count: int, batch_size: int) -> Iterator[int]:
    """Yield the first index of each batch.

    The last batch is moved back so that it ends exactly at ``count``; it may
    then overlap the batch before it.
    """
    if batch_size <= 0:
        raise ValueError("batch_size must be positive")
    if count < 0:
        raise ValueError("count must not be negative")
    if 0 < count < batch_size:
        raise ValueError("batch_size must not exceed the number of samples")
    start = 0
    while start < count:
        if start + batch_size >= count:
            start = count - batch_size
        yield start
        start += batch_size


def _prepare(network: NeuralNetwork, images, labels) -> Tuple[np.ndarray, np.ndarray]:
    x = np.asarray(images, dtype=np.float64)
    t = np.asarray(labels, dtype=np.float64)
    if x.ndim != 2 or x.shape[1] != network.input_size:
        raise ValueError(f"images must have {network.input_size} columns")
    if t.ndim != 2 or t.shape[1] != network.output_size:
        raise ValueError(f"labels must have {network.output_size} columns")
    if x.shape[0] != t.shape[0]:
        raise ValueError("images and labels differ in length")
    if x.shape[0] == 0:
        raise ValueError("no samples given")
    return x, t


def _correct(output: np.ndarray, targets: np.ndarray) -> int:
    return int(np.count_nonzero(np.argmax(output, axis=1) == np.argmax(targets, axis=1)))


def train(
    network: NeuralNetwork,
    images,
    labels,
    epochs: int = EPOCHS,
    batch_size: int = BATCH_SIZE,
    report: Optional[Callable[[EpochStats], None]] = None,
) -> List[EpochStats]:
    """Train the network in place and return the statistics of every epoch."""
    if epochs < 0:
        raise ValueError("epochs must not be negative")
    x, t = _prepare(network, images, labels)
    count = x.shape[0]
    history: List[EpochStats] = []
    for epoch in range(1, epochs + 1):
        started = time.process_time()
        loss = 0.0
        correct = 0
        for first in batch_starts(count, batch_size):
            batch_x = x[first:first + batch_size]
            batch_t = t[first:first + batch_size]
            hidden, output = network.forward(batch_x)
            network.backward(batch_x, hidden, output, batch_t)
            with np.errstate(divide="ignore", invalid="ignore"):
                loss -= float(np.sum(batch_t * np.log(output)))
            correct += _correct(output, batch_t)
        stats = EpochStats(
            epoch=epoch,
            loss=loss / count,
            accuracy=correct / count,
            seconds=time.process_time() - started,
        )
        history.append(stats)
        if report is not None:
            report(stats)
    return history


def evaluate(network: NeuralNetwork, images, labels, batch_size: int = BATCH_SIZE) -> float:
    """Fraction of samples whose most probable class matches the label."""
    x, t = _prepare(network, images, labels)
    count = x.shape[0]
    correct = 0
    for first in batch_starts(count, batch_size):
        _, output = network.forward(x[first:first + batch_size])
        correct += _correct(output, t[first:first + batch_size])
    return correct / count