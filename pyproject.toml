[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocpuzzles"
version = "0.1.0"
description = "Solvers for a selection of Advent of Code puzzles from 2021 and 2022"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["aocpuzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
