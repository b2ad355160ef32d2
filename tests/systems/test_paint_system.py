from paint_arena.constants import CANVAS_HEIGHT, CANVAS_WIDTH, TILE_SIZE
from paint_arena.grid import new_grid, owner_at, set_owner
from paint_arena.systems.paint import paint
from paint_arena.types import Team
from tests.test_utils import (
    changed_cells,
    make_opponent,
    make_player,
    owned_cells,
    tile_pos,
)


def test_paint_covers_three_by_three_block() -> None:
    grid = new_grid()
    actor = make_player(pos=tile_pos(5, 5))
    painted = paint(grid, actor)
    expected = sorted((x, y) for x in range(4, 7) for y in range(4, 7))
    assert sorted(owned_cells(painted, Team.TEAM_A)) == expected
    assert sorted(changed_cells(grid, painted)) == expected


def test_paint_uses_floor_of_position() -> None:
    actor = make_player(pos=(2 * TILE_SIZE - 0.1, 3 * TILE_SIZE + 15.9))
    painted = paint(new_grid(), actor)
    # Tile (1, 3): block spans x 0..2, y 2..4
    assert owner_at(painted, 0, 2) == Team.TEAM_A
    assert owner_at(painted, 2, 4) == Team.TEAM_A
    assert owner_at(painted, 3, 3) == Team.NEUTRAL
    assert len(owned_cells(painted, Team.TEAM_A)) == 9


def test_paint_in_top_left_corner_skips_out_of_bounds() -> None:
    painted = paint(new_grid(), make_player(pos=(0.0, 0.0)))
    assert sorted(owned_cells(painted, Team.TEAM_A)) == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_paint_in_bottom_right_corner_skips_out_of_bounds() -> None:
    pos = (float(CANVAS_WIDTH - TILE_SIZE), float(CANVAS_HEIGHT - TILE_SIZE))
    painted = paint(new_grid(), make_opponent(pos=pos))
    assert sorted(owned_cells(painted, Team.TEAM_B)) == [
        (30, 28),
        (30, 29),
        (31, 28),
        (31, 29),
    ]


def test_paint_overwrites_other_team() -> None:
    grid = set_owner(new_grid(), 10, 10, Team.TEAM_A)
    painted = paint(grid, make_opponent(pos=tile_pos(10, 10)))
    assert owner_at(painted, 10, 10) == Team.TEAM_B
    assert owned_cells(painted, Team.TEAM_A) == []


def test_paint_same_team_is_noop_in_effect() -> None:
    actor = make_player(pos=tile_pos(3, 3))
    once = paint(new_grid(), actor)
    twice = paint(once, actor)
    assert changed_cells(once, twice) == []


def test_paint_does_not_modify_input_grid() -> None:
    grid = new_grid()
    paint(grid, make_player(pos=tile_pos(5, 5)))
    assert owned_cells(grid, Team.TEAM_A) == []
