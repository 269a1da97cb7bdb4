"""Scoring individuals."""

from __future__ import annotations

from labirinto.genotype import Genotype
from labirinto.maze import Maze, Position
from labirinto.simulation import simulate_path

BASE_FITNESS = 1000.0
COLLISION_PENALTY = 10
MISSED_EXIT_PENALTY = 100


def compute_fitness(maze: Maze, genotype: Genotype, position: Position) -> float:
    """Score an individual and store the score on it.

    The score starts at 1000, loses the Manhattan distance from the given
    position to the end, 10 per collision of a fresh walk, and 100 if that
    walk does not stop on the end. It never drops below zero.
    """
    fitness = BASE_FITNESS
    fitness -= abs(position.row - maze.end.row) + abs(position.col - maze.end.col)

    result = simulate_path(maze, genotype)
    fitness -= result.collisions * COLLISION_PENALTY
    if result.position != maze.end:
        fitness -= MISSED_EXIT_PENALTY

    fitness = max(fitness, 0.0)
    genotype.fitness = fitness
    return fitness