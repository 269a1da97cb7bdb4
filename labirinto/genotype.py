"""Individuals: sequences of moves through the maze."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

MAX_MOVES = 50


class Move(Enum):
    """A single step direction, written with its one-letter symbol."""

    UP = "C"
    DOWN = "B"
    LEFT = "E"
    RIGHT = "D"


@dataclass
class Genotype:
    """An individual: its moves and its last computed fitness."""

    moves: list[Move] = field(default_factory=list)
    fitness: float = 0.0


def random_genotype(rng: random.Random | None = None) -> Genotype:
    """Create an individual of MAX_MOVES uniformly random moves."""
    rng = rng or random.Random()
    directions = list(Move)
    return Genotype(moves=[rng.choice(directions) for _ in range(MAX_MOVES)])