"""Maze loading, random-move individuals, path simulation, fitness scoring and population reports."""

__version__ = "0.1.0"