"""Command line entry point: train on MNIST and report test accuracy."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from mnistnet.dataset import DatasetError, load_images, load_labels
from mnistnet.network import LEARNING_RATE, NeuralNetwork
from mnistnet.training import BATCH_SIZE, EPOCHS, EpochStats, evaluate, train

TRAIN_IMAGES = "train-images.idx3-ubyte"
TRAIN_LABELS = "train-labels.idx1-ubyte"
TEST_IMAGES = "t10k-images.idx3-ubyte"
TEST_LABELS = "t10k-labels.idx1-ubyte"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mnistnet", description="Train a small MNIST network.")
    parser.add_argument("--data-dir", type=Path, default=Path("data"))
    parser.add_argument("--train-count", type=int, default=60000)
    parser.add_argument("--test-count", type=int, default=10000)
    parser.add_argument("--epochs", type=int, default=EPOCHS)
    parser.add_argument("--batch-size", type=int, default=BATCH_SIZE)
    parser.add_argument("--learning-rate", type=float, default=LEARNING_RATE)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def _report(stats: EpochStats) -> None:
    print(
        f"Epoch {stats.epoch} - Loss: {stats.loss:.4f} - "
        f"Train Accuracy: {stats.accuracy * 100:.2f}% - Time: {stats.seconds:.3f}s"
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    print("MNIST Neural Network\n")

    data = args.data_dir
    try:
        train_images = load_images(data / TRAIN_IMAGES, args.train_count)
        train_labels = load_labels(data / TRAIN_LABELS, args.train_count)
        test_images = load_images(data / TEST_IMAGES, args.test_count)
        test_labels = load_labels(data / TEST_LABELS, args.test_count)
    except DatasetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    network = NeuralNetwork.random(seed=args.seed, learning_rate=args.learning_rate)
    try:
        started = time.process_time()
        train(
            network,
            train_images,
            train_labels,
            epochs=args.epochs,
            batch_size=args.batch_size,
            report=_report,
        )
        print(f"Total training time: {time.process_time() - started:.3f}s")
        accuracy = evaluate(network, test_images, test_labels, batch_size=args.batch_size)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Test Accuracy: {accuracy * 100:.2f}%")
    return 0


if __name__ == "__main__":
    sys.exit(main())