[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mnistnet"
version = "0.1.0"
description = "A small two-layer neural network that learns MNIST handwritten digits"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["mnist", "neural-network", "machine-learning", "digits", "classification"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mnistnet = "mnistnet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mnistnet"]

[tool.pytest.ini_options]
addopts = "-ra"
