"""Solvers for selected Advent of Code puzzles from 2021 and 2022, one module per day."""

__version__ = "0.1.0"