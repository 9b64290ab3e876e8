# mnistnet

mnistnet trains a small fully connected neural network on the MNIST handwritten
digits. The network has 784 inputs, one ReLU hidden layer of 128 units and a
softmax output of 10 classes. It is trained by gradient descent on the
cross-entropy loss, using mini-batches.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Data

Put the four MNIST files in IDX format in one directory (`data/` by default):

```
data/train-images.idx3-ubyte
data/train-labels.idx1-ubyte
data/t10k-images.idx3-ubyte
data/t10k-labels.idx1-ubyte
```

The loaders skip the 16-byte image header and the 8-byte label header without
checking them, then read the requested number of samples.

## Command line

```
mnistnet
```

By default this loads 60,000 training and 10,000 test samples, builds a network
with random weights and trains it for 3 epochs with a batch size of 1 and a
learning rate of 0.01. After each epoch it prints the average loss, the
training accuracy and the CPU time taken; then the total training time and the
test accuracy.

Options:

| Option            | Default | Meaning                                  |
|-------------------|---------|------------------------------------------|
| `--data-dir`      | `data`  | directory holding the four IDX files     |
| `--train-count`   | 60000   | number of training samples to read       |
| `--test-count`    | 10000   | number of test samples to read           |
| `--epochs`        | 3       | passes over the training data            |
| `--batch-size`    | 1       | samples per gradient step                |
| `--learning-rate` | 0.01    | step size of gradient descent            |
| `--seed`          | none    | seed for the initial weights             |

If a file is missing or too short, or the settings do not fit the data (for
example a batch larger than the sample count), an error is printed to standard
error and the command exits with status 1.

## Library use

```python
from mnistnet.dataset import load_images, load_labels
from mnistnet.network import NeuralNetwork
from mnistnet.training import train, evaluate

images = load_images("data/train-images.idx3-ubyte", 60000)
labels = load_labels("data/train-labels.idx1-ubyte", 60000)

net = NeuralNetwork.random(seed=1234)
for stats in train(net, images, labels, epochs=3, batch_size=1):
    print(stats.epoch, stats.loss, stats.accuracy, stats.seconds)

test_images = load_images("data/t10k-images.idx3-ubyte", 10000)
test_labels = load_labels("data/t10k-labels.idx1-ubyte", 10000)
print(evaluate(net, test_images, test_labels))
```

### `mnistnet.dataset`

- `load_images(path, count)` returns a `(count, 784)` array of pixel values
  scaled to [0, 1].
- `load_labels(path, count)` returns a `(count, 10)` array of one-hot rows.
- `one_hot(labels, num_classes=10)` encodes integer labels; labels outside the
  range give rows of zeros.
- Both loaders raise `DatasetError` if the file cannot be opened or is too
  short, and `ValueError` for a negative count.

### `mnistnet.network`

- `relu(x)` and `softmax(x)` work element-wise and along the last axis.
- `NeuralNetwork.random(seed, input_size, hidden_size, output_size, scale,
  learning_rate)` draws weights uniformly from [0, scale) and sets the biases
  to zero. All arguments have defaults (784, 128, 10, 0.01, 0.01).
- `forward(inputs)` returns the hidden activations and the output
  probabilities, for one sample or a batch.
- `backward(inputs, hidden, output, targets)` applies one gradient-descent
  step, with the gradients averaged over the batch.
- `predict(inputs)` returns the index of the most probable class.

### `mnistnet.training`

- `train(network, images, labels, epochs=3, batch_size=1, report=None)`
  trains the network in place and returns one `EpochStats` (epoch, loss,
  accuracy, seconds) per epoch. `report`, if given, is called with each one.
- `evaluate(network, images, labels, batch_size=1)` returns the fraction of
  samples classified correctly.
- `batch_starts(count, batch_size)` yields the first index of each batch. If
  the sample count is not a multiple of the batch size, the last batch is moved
  back so that it ends on the final sample, and may overlap the one before it.

Accuracy is a fraction between 0 and 1; the command line prints it as a
percentage.

## What it does not do

mnistnet does not save or load trained weights: a network lives only as long as
the process that trained it. It does not download the MNIST files and does not
check the magic numbers or sizes in their headers.