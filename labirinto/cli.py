"""Command line entry: load a maze and report on a random population."""

from __future__ import annotations

import argparse
import random
import sys

from labirinto.maze import MazeError, load_maze
from labirinto.population import create_population, describe_population

DEFAULT_MAZE = "mapa.txt"
DEFAULT_POPULATION = 50


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="labirinto",
        description="Evaluate a random population of walkers in a maze.",
    )
    parser.add_argument("maze", nargs="?", default=DEFAULT_MAZE, help="maze file")
    parser.add_argument(
        "--size", type=int, default=DEFAULT_POPULATION, help="population size"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the program; return the exit status."""
    args = _parser().parse_args(argv)
    if args.size < 0:
        print("ERRO: tamanho de populacao invalido.", file=sys.stderr)
        return 1
    rng = random.Random(args.seed)

    try:
        maze = load_maze(args.maze)
    except MazeError as exc:
        print(exc, file=sys.stderr)
        return 1

    print("Carregando o labirinto...")
    print(f"Labirinto carregado com sucesso! ({maze.rows} linhas, {maze.cols} colunas)")

    print("\n=-=-=-=-=-=-== Labirinto =-=-=-=-=-=-==\n")
    print(maze.render(), end="")
    print(f"Posicao Inicial (S) do labirinto: ({maze.start.row}, {maze.start.col})")
    print(f"Posicao Final (E) do labirinto: ({maze.end.row}, {maze.end.col})")

    print("\n=-=-=-=-=-=-== Populacao =-=-=-=-=-=-==\n")
    population = create_population(args.size, rng)
    print(describe_population(population, maze), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())