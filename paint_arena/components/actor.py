"""Actor component shared by the player and the opponents.

Positions are continuous canvas coordinates (pixels) of the actor's top-left
corner; the tile an actor occupies is derived by flooring them by the tile
size. Systems never mutate an actor: they return a ``replace``-d copy.
"""

from dataclasses import dataclass, field

from paint_arena.components.control import Control, InputDriven
from paint_arena.constants import PLAYER_SPEED, TILE_SIZE
from paint_arena.types import Facing, Team


@dataclass(frozen=True)
class Actor:
    """A moving, painting entity.

    Attributes:
        x: Left edge in canvas pixels, within ``[0, canvas_width - size]``.
        y: Top edge in canvas pixels, within ``[0, canvas_height - size]``.
        team: Team whose color this actor paints.
        size: Width and height in pixels (one tile).
        speed: Pixels travelled per tick.
        facing: Direction used for rendering.
        paint_cooldown: Ticks left before the next paint is allowed (>= 0).
        frame: Animation phase in ``[0, ANIMATION_PERIOD)``.
        control: Update strategy (keyboard or roaming AI).
    """

    x: float
    y: float
    team: Team
    size: int = TILE_SIZE
    speed: float = PLAYER_SPEED
    facing: Facing = Facing.DOWN
    paint_cooldown: int = 0
    frame: int = 0
    control: Control = field(default_factory=InputDriven)

    @property
    def tile(self) -> tuple[int, int]:
        """Grid coordinates of the tile under the actor's top-left corner."""
        return int(self.x // TILE_SIZE), int(self.y // TILE_SIZE)
