# labirinto

Loads a text maze, creates a population of individuals whose genes are
random moves, walks each one through the maze and gives it a fitness score.
This is the groundwork of a genetic algorithm for solving mazes.

## Maze files

A maze is plain text, one row per line:

- `#` is a wall
- `S` is the start
- `E` is the exit
- anything else is open floor

```
#########
#S  #   #
# # # # #
#   #  E#
#########
```

Rows shorter than the longest one are padded with spaces. If `S` or `E`
appears more than once, the last one (reading row by row) is used.

`labirinto.maze.parse_maze(text)` builds a `Maze` from text and
`labirinto.maze.load_maze(path)` reads one from a UTF-8 file. Both raise
`MazeError` for an empty maze or one without an `S` or an `E`;
`load_maze` also raises it when the file cannot be opened.

A `Maze` holds `grid` (the padded rows), `start` and `end` (`Position`
values with `row` and `col`), `rows` and `cols`. `render()` returns the maze
as text, `is_inside(position)` tells whether a position is within bounds and
`is_wall(position)` whether that cell is a `#`.

## Command line

```
pip install .
labirinto [MAZE] [--size N] [--seed SEED]
```

- `MAZE` – maze file, `mapa.txt` by default
- `--size` – population size, 50 by default
- `--seed` – seed for the random generator, for repeatable runs

The command prints the maze size, the maze itself and its start and exit
positions, then creates the population and prints for each individual its
moves, where it stopped, its collisions and its fitness. It exits with status
1, printing the message to standard error, when the maze cannot be loaded or
the size is negative.

## Moves and simulation

`labirinto.genotype.Move` has four members: `UP` (`C`), `DOWN` (`B`),
`LEFT` (`E`) and `RIGHT` (`D`). A `Genotype` holds a list of `moves` and its
last computed `fitness`. `random_genotype(rng)` makes one with `MAX_MOVES`
(50) uniformly random moves.

`labirinto.simulation.simulate_path(maze, genotype)` starts on `S` and
follows the moves in order. The walk stops when a move would leave the maze
or enter a wall — a collision, so there is at most one — or when the exit is
reached. It returns a `SimulationResult` with the final `position` and the
number of `collisions`.

## Fitness

`labirinto.fitness.compute_fitness(maze, genotype, position)` starts at 1000
and subtracts:

- the Manhattan distance from `position` to the exit;
- 10 for each collision of a fresh walk of the genotype;
- 100 when that walk does not stop on the exit.

The score never goes below zero. It is stored on `genotype.fitness` and
returned.

## Populations

`labirinto.population.create_population(size, rng)` returns a list of
`size` random genotypes. `describe_population(population, maze)` walks and
scores every individual and returns the text report the command prints.

## Library use

```python
import random

from labirinto.maze import parse_maze
from labirinto.genotype import random_genotype
from labirinto.simulation import simulate_path
from labirinto.fitness import compute_fitness
from labirinto.population import create_population, describe_population

maze = parse_maze("#####\n#S E#\n#####\n")
print(maze.render(), end="")

rng = random.Random(42)
genotype = random_genotype(rng)
result = simulate_path(maze, genotype)
print(compute_fitness(maze, genotype, result.position))

population = create_population(50, rng)
print(describe_population(population, maze), end="")
```

Pass a seeded `random.Random` when you need runs you can repeat.

## What it does not do

The package scores a single, randomly created population. It has no
selection, crossover or mutation and runs no generations, so it does not
evolve individuals towards a solution.

## Running the tests

```
pip install .[test]
pytest
```