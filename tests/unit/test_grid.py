from paint_arena.constants import GRID_HEIGHT, GRID_WIDTH
from paint_arena.grid import (
    grid_size,
    is_in_grid,
    iter_cells,
    new_grid,
    owner_at,
    set_owner,
)
from paint_arena.types import Team


def test_new_grid_is_neutral_and_fixed_size() -> None:
    grid = new_grid()
    assert grid_size(grid) == (GRID_WIDTH, GRID_HEIGHT) == (32, 30)
    assert len(list(iter_cells(grid))) == 960
    assert all(owner == Team.NEUTRAL for _, _, owner in iter_cells(grid))


def test_set_owner_returns_new_grid() -> None:
    grid = new_grid()
    updated = set_owner(grid, 3, 4, Team.TEAM_A)
    assert owner_at(updated, 3, 4) == Team.TEAM_A
    assert owner_at(grid, 3, 4) == Team.NEUTRAL
    assert owner_at(updated, 4, 3) == Team.NEUTRAL
    assert grid_size(updated) == grid_size(grid)


def test_is_in_grid() -> None:
    grid = new_grid()
    assert is_in_grid(grid, 0, 0)
    assert is_in_grid(grid, 31, 29)
    assert not is_in_grid(grid, -1, 0)
    assert not is_in_grid(grid, 32, 0)
    assert not is_in_grid(grid, 0, 30)
