"""Readers for the MNIST IDX image and label files."""

from __future__ import annotations

import os
from typing import Union

import numpy as np

IMAGE_HEADER_SIZE = 16
LABEL_HEADER_SIZE = 8
IMAGE_SIZE = 28 * 28
NUM_CLASSES = 10

PathLike = Union[str, "os.PathLike[str]"]


class DatasetError(Exception):
    """Raised when a dataset file cannot be opened or is too short."""


def _read_payload(path: PathLike, header_size: int, length: int, what: str) -> bytes:
    try:
        with open(path, "rb") as stream:
            stream.seek(header_size)
            payload = stream.read(length)
    except OSError as exc:
        raise DatasetError(f"Error opening {os.fspath(path)}") from exc
    if len(payload) != length:
        raise DatasetError(f"Failed to read {what} from {os.fspath(path)}")
    return payload


def load_images(path: PathLike, count: int) -> np.ndarray:
    """Read ``count`` images as rows of 784 pixel values scaled to [0, 1]."""
    if count < 0:
        raise ValueError("count must not be negative")
    payload = _read_payload(path, IMAGE_HEADER_SIZE, count * IMAGE_SIZE, "pixel")
    pixels = np.frombuffer(payload, dtype=np.uint8).reshape(count, IMAGE_SIZE)
    return pixels.astype(np.float64) / 255.0


def one_hot(labels, num_classes: int = NUM_CLASSES) -> np.ndarray:
    """Encode integer labels as rows of 0.0/1.0; out-of-range labels give zero rows."""
    if num_classes < 0:
        raise ValueError("num_classes must not be negative")
    values = np.asarray(labels, dtype=np.int64).reshape(-1)
    return (values[:, None] == np.arange(num_classes)).astype(np.float64)


def load_labels(path: PathLike, count: int) -> np.ndarray:
    """Read ``count`` labels and return them one-hot encoded over ten classes."""
    if count < 0:
        raise ValueError("count must not be negative")
    payload = _read_payload(path, LABEL_HEADER_SIZE, count, "label")
    return one_hot(np.frombuffer(payload, dtype=np.uint8), NUM_CLASSES)