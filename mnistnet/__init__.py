"""Two-layer neural network for classifying MNIST handwritten digits."""

__version__ = "0.1.0"
__all__ = ["cli", "dataset", "network", "training"]