"""Paint system.

Stamps the actor's team onto the block of tiles around the tile it occupies
(the tile itself plus ``PAINT_RADIUS`` rings of neighbours). Previous owners
are overwritten unconditionally; offsets falling outside the grid are
skipped.
"""

from paint_arena.components import Actor
from paint_arena.constants import PAINT_RADIUS
from paint_arena.grid import Grid, is_in_grid, set_owner


def paint(grid: Grid, actor: Actor, radius: int = PAINT_RADIUS) -> Grid:
    """Return ``grid`` with the block around ``actor`` owned by its team.

    Args:
        grid (Grid): Current tile ownership.
        actor (Actor): Painting actor; its tile is ``floor(position / tile)``.
        radius (int): Rings around the centre tile (1 gives a 3x3 block).

    Returns:
        Grid: Painted grid. Tiles outside the block are untouched.
    """
    gx, gy = actor.tile
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            tx, ty = gx + dx, gy + dy
            if is_in_grid(grid, tx, ty):
                grid = set_owner(grid, tx, ty, actor.team)
    return grid
