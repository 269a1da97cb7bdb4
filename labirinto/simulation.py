"""Walking an individual's moves through a maze."""

from __future__ import annotations

from dataclasses import dataclass

from labirinto.genotype import Genotype, Move
from labirinto.maze import Maze, Position

_STEPS = {
    Move.UP: (-1, 0),
    Move.DOWN: (1, 0),
    Move.LEFT: (0, -1),
    Move.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class SimulationResult:
    """Where the walk stopped and how many collisions it had."""

    position: Position
    collisions: int


def simulate_path(maze: Maze, genotype: Genotype) -> SimulationResult:
    """Follow the moves from the start.

    The walk stops at the first collision (a wall or the maze edge), which
    counts once, or when the end cell is reached.
    """
    current = maze.start
    collisions = 0
    for move in genotype.moves:
        d_row, d_col = _STEPS[move]
        nxt = Position(current.row + d_row, current.col + d_col)
        if not maze.is_inside(nxt) or maze.is_wall(nxt):
            collisions += 1
            break
        current = nxt
        if current == maze.end:
            break
    return SimulationResult(position=current, collisions=collisions)