"""Fixed arena constants.

Grid and canvas dimensions are not configurable; the tunable subset lives on
:class:`paint_arena.config.GameConfig`, which defaults to the values below.
"""

TILE_SIZE = 16
"""Edge length of one tile (and of every actor) in canvas pixels."""

GRID_WIDTH = 32
GRID_HEIGHT = 30

CANVAS_WIDTH = GRID_WIDTH * TILE_SIZE
CANVAS_HEIGHT = GRID_HEIGHT * TILE_SIZE

PLAYER_SPEED = 2.0
OPPONENT_SPEED_FACTOR = 0.8
"""Opponents move at this fraction of the player's speed."""

PAINT_RADIUS = 1
"""Ring size around the actor's tile that a paint stamp covers (1 -> 3x3)."""

PAINT_COOLDOWN = 15
OPPONENT_EXTRA_COOLDOWN = 30
"""Opponents add ``int(random() * 30)`` ticks on top of ``PAINT_COOLDOWN``."""

GAME_DURATION = 60
"""Match length in seconds."""

NUM_OPPONENTS = 3

THINK_TIME_MIN = 60
THINK_TIME_SPAN = 120
ARRIVAL_RADIUS = 5.0
"""Opponents stop steering once they are this close to their target."""

ANIMATION_PERIOD = 60
FRAMES_PER_SECOND = 60
