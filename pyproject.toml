[build-system]
requires = ["setuptools>=68", "wheel"]
build-backend = "setuptools.build_meta"

[project]
name = "npuzzle"
version = "1.0.0"
description = "Solve sliding-tile N-puzzles towards the snail goal with A* or IDA*"
requires-python = ">=3.10"
dependencies = []
keywords = ["n-puzzle", "sliding puzzle", "a-star", "ida-star", "heuristic search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
npuzzle = "npuzzle.cli:main"

[tool.setuptools.packages.find]
include = ["npuzzle*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
