from labirinto.fitness import compute_fitness
from labirinto.genotype import Genotype, Move
from labirinto.maze import Position, parse_maze
from labirinto.simulation import simulate_path

SAMPLE = "#####\n#S..#\n#.#E#\n#####\n"


def test_perfect_individual_scores_base():
    maze = parse_maze(SAMPLE)
    genotype = Genotype([Move.RIGHT, Move.RIGHT, Move.DOWN])
    position = simulate_path(maze, genotype).position
    assert compute_fitness(maze, genotype, position) == 1000.0
    assert genotype.fitness == 1000.0


def test_collision_and_missed_exit_penalties():
    maze = parse_maze(SAMPLE)
    genotype = Genotype([Move.UP])
    position = simulate_path(maze, genotype).position
    assert compute_fitness(maze, genotype, position) == 887.0


def test_fitness_never_negative():
    maze = parse_maze(SAMPLE)
    genotype = Genotype([Move.UP])
    assert compute_fitness(maze, genotype, Position(5000, 0)) == 0.0
    assert genotype.fitness == 0.0


def test_closer_position_scores_higher():
    maze = parse_maze(SAMPLE)
    genotype = Genotype([Move.UP])
    near = compute_fitness(maze, genotype, Position(1, 3))
    far = compute_fitness(maze, genotype, Position(1, 1))
    assert near > far


def test_stores_result_on_genotype():
    maze = parse_maze(SAMPLE)
    genotype = Genotype([Move.DOWN, Move.DOWN])
    position = simulate_path(maze, genotype).position
    score = compute_fitness(maze, genotype, position)
    assert genotype.fitness == score
    assert score < 1000.0