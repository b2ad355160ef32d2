"""Tile ownership grid.

The grid is a persistent row-major vector of rows (``grid[y][x]``) holding a
:class:`~paint_arena.types.Team` per tile. Its dimensions are fixed at
creation; "writing" a tile returns a new grid sharing untouched rows with the
old one, so keeping the previous grid around (e.g. for diffs in tests) is
free.
"""

from typing import Iterator, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from paint_arena.constants import GRID_HEIGHT, GRID_WIDTH
from paint_arena.types import Team

Grid = PVector[PVector[Team]]


def new_grid(width: int = GRID_WIDTH, height: int = GRID_HEIGHT) -> Grid:
    """Return an all-neutral ``width`` x ``height`` grid."""
    row: PVector[Team] = pvector([Team.NEUTRAL] * width)
    return pvector([row] * height)


def grid_size(grid: Grid) -> Tuple[int, int]:
    """Return ``(width, height)`` of ``grid``."""
    height = len(grid)
    width = len(grid[0]) if height else 0
    return width, height


def is_in_grid(grid: Grid, x: int, y: int) -> bool:
    """Return True if tile ``(x, y)`` lies inside ``grid``."""
    width, height = grid_size(grid)
    return 0 <= x < width and 0 <= y < height


def owner_at(grid: Grid, x: int, y: int) -> Team:
    """Return the owner of tile ``(x, y)``; the tile must be in bounds."""
    return grid[y][x]


def set_owner(grid: Grid, x: int, y: int, team: Team) -> Grid:
    """Return a copy of ``grid`` with tile ``(x, y)`` owned by ``team``."""
    return grid.set(y, grid[y].set(x, team))


def iter_cells(grid: Grid) -> Iterator[Tuple[int, int, Team]]:
    """Yield ``(x, y, owner)`` for every tile in row-major order."""
    for y, row in enumerate(grid):
        for x, owner in enumerate(row):
            yield x, y, owner
