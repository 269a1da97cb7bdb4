"""Creating and reporting on populations of individuals."""

from __future__ import annotations

import random

from labirinto.fitness import compute_fitness
from labirinto.genotype import Genotype, random_genotype
from labirinto.maze import Maze
from labirinto.simulation import simulate_path


def create_population(size: int, rng: random.Random | None = None) -> list[Genotype]:
    """Create `size` random individuals."""
    rng = rng or random.Random()
    return [random_genotype(rng) for _ in range(size)]


def describe_population(population: list[Genotype], maze: Maze) -> str:
    """Simulate and score every individual and return a text report."""
    lines = [f"Total de individuos: {len(population)}\n"]
    if not population:
        lines.append("A população está vazia.\n")
        return "".join(lines)

    for index, genotype in enumerate(population):
        result = simulate_path(maze, genotype)
        compute_fitness(maze, genotype, result.position)
        moves = "".join(f"{move.value} " for move in genotype.moves)
        lines.append(f"Individuo [{index}]: {moves}\n")
        lines.append(
            f"[{index}] Posicao final: ({result.position.row}, {result.position.col}), "
            f"Colisoes: {result.collisions}, Fitness: {genotype.fitness:.2f}\n"
        )
        lines.append("\n\n")
    return "".join(lines)