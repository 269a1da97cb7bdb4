"""Maze grids: parsing, loading and cell queries."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

WALL = "#"
START = "S"
END = "E"


class MazeError(Exception):
    """Raised when a maze cannot be read or is not valid."""


@dataclass(frozen=True)
class Position:
    """A cell coordinate in the maze."""

    row: int
    col: int


@dataclass(frozen=True)
class Maze:
    """A rectangular maze with a start (S) and an end (E) cell."""

    grid: tuple[str, ...]
    start: Position
    end: Position
    rows: int
    cols: int

    def render(self) -> str:
        """Return the maze as text, one line per row."""
        return "".join(f"{row}\n" for row in self.grid)

    def is_inside(self, position: Position) -> bool:
        """Whether the position lies within the maze bounds."""
        return 0 <= position.row < self.rows and 0 <= position.col < self.cols

    def is_wall(self, position: Position) -> bool:
        """Whether the cell at the position is a wall."""
        return self.grid[position.row][position.col] == WALL


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_maze(text: str) -> Maze:
    """Build a maze from its text form.

    Shorter rows are padded with spaces to the width of the longest row.
    When S or E occurs more than once, the last occurrence wins.
    """
    lines = _split_lines(text)
    if not lines:
        raise MazeError("Arquivo vazio ou inválido.")

    cols = max(len(line) for line in lines)
    grid = tuple(line.ljust(cols) for line in lines)

    start: Position | None = None
    end: Position | None = None
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == START:
                start = Position(r, c)
            elif cell == END:
                end = Position(r, c)

    if start is None or end is None:
        raise MazeError("Não foi possivel encontrar as posições no labirinto")

    return Maze(grid=grid, start=start, end=end, rows=len(grid), cols=cols)


def load_maze(path: str | PathLike[str]) -> Maze:
    """Read and parse a maze file."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise MazeError(f"ERRO ao abrir o arquivo {path}") from exc
    return parse_maze(text)