import re

import numpy as np

from mnistnet.cli import TEST_IMAGES, TEST_LABELS, TRAIN_IMAGES, TRAIN_LABELS, main


def _write_set(directory, images_name, labels_name, count, seed):
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=count * 784, dtype=np.uint8)
    labels = rng.integers(0, 10, size=count, dtype=np.uint8)
    (directory / images_name).write_bytes(bytes(16) + pixels.tobytes())
    (directory / labels_name).write_bytes(bytes(8) + labels.tobytes())


def _make_data(tmp_path, train_count=6, test_count=3):
    _write_set(tmp_path, TRAIN_IMAGES, TRAIN_LABELS, train_count, 1)
    _write_set(tmp_path, TEST_IMAGES, TEST_LABELS, test_count, 2)


def test_main_runs_and_reports(tmp_path, capsys):
    _make_data(tmp_path)
    code = main([
        "--data-dir", str(tmp_path),
        "--train-count", "6",
        "--test-count", "3",
        "--epochs", "2",
        "--seed", "1234",
    ])
    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("MNIST Neural Network\n\n")
    epochs = re.findall(r"^Epoch (\d+) - Loss: [\d.]+ - Train Accuracy: ([\d.]+)% - Time: [\d.]+s$", out, re.M)
    assert [e[0] for e in epochs] == ["1", "2"]
    assert all(0.0 <= float(e[1]) <= 100.0 for e in epochs)
    assert re.search(r"^Total training time: [\d.]+s$", out, re.M)
    match = re.search(r"^Test Accuracy: ([\d.]+)%$", out, re.M)
    assert match and 0.0 <= float(match.group(1)) <= 100.0


def test_main_with_batches(tmp_path, capsys):
    _make_data(tmp_path)
    code = main([
        "--data-dir", str(tmp_path),
        "--train-count", "6",
        "--test-count", "3",
        "--epochs", "1",
        "--batch-size", "2",
        "--seed", "5",
    ])
    out = capsys.readouterr().out
    assert code == 0
    assert "Epoch 1 - Loss:" in out
    assert "Test Accuracy:" in out


def test_main_missing_files(tmp_path, capsys):
    code = main(["--data-dir", str(tmp_path / "absent"), "--train-count", "1", "--test-count", "1"])
    captured = capsys.readouterr()
    assert code == 1
    assert "Error opening" in captured.err


def test_main_short_file(tmp_path, capsys):
    _make_data(tmp_path, train_count=2)
    code = main(["--data-dir", str(tmp_path), "--train-count", "5", "--test-count", "3"])
    captured = capsys.readouterr()
    assert code == 1
    assert "Failed to read" in captured.err


def test_main_batch_larger_than_data(tmp_path, capsys):
    _make_data(tmp_path)
    code = main([
        "--data-dir", str(tmp_path),
        "--train-count", "6",
        "--test-count", "3",
        "--epochs", "1",
        "--batch-size", "10",
    ])
    captured = capsys.readouterr()
    assert code == 1
    assert "batch_size" in captured.err