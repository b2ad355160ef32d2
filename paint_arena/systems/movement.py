"""Movement systems.

Two resolution rules share the same bounds:

* :func:`move_by_intents` (player) resolves each axis independently and
  *rejects* an out-of-range candidate, leaving that axis where it was.
* :func:`steer_towards` (opponents) takes a true 2D step along the normalized
  vector to the target and then *clamps* into bounds.
"""

import math
from dataclasses import replace

from paint_arena.actions import Intents
from paint_arena.components import Actor
from paint_arena.constants import ARRIVAL_RADIUS, CANVAS_HEIGHT, CANVAS_WIDTH
from paint_arena.types import Facing


def max_x(actor: Actor) -> float:
    return CANVAS_WIDTH - actor.size


def max_y(actor: Actor) -> float:
    return CANVAS_HEIGHT - actor.size


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_to_canvas(actor: Actor) -> Actor:
    """Return ``actor`` with its position clamped into the canvas."""
    x = clamp(actor.x, 0, max_x(actor))
    y = clamp(actor.y, 0, max_y(actor))
    if (x, y) == (actor.x, actor.y):
        return actor
    return replace(actor, x=x, y=y)


def move_by_intents(actor: Actor, intents: Intents) -> Actor:
    """Apply keyboard intents for one tick.

    Flags are evaluated in the order up, down, left, right; each active flag
    adds its delta and overwrites the facing, so with opposite keys held the
    last one checked decides where the actor looks.
    """
    if not intents.moving:
        return actor

    new_x, new_y = actor.x, actor.y
    facing = actor.facing

    if intents.up:
        new_y -= actor.speed
        facing = Facing.UP
    if intents.down:
        new_y += actor.speed
        facing = Facing.DOWN
    if intents.left:
        new_x -= actor.speed
        facing = Facing.LEFT
    if intents.right:
        new_x += actor.speed
        facing = Facing.RIGHT

    x = new_x if 0 <= new_x <= max_x(actor) else actor.x
    y = new_y if 0 <= new_y <= max_y(actor) else actor.y
    return replace(actor, x=x, y=y, facing=facing)


def facing_for_delta(dx: float, dy: float) -> Facing:
    """Facing along the dominant axis; ties resolve horizontally."""
    if abs(dx) >= abs(dy):
        return Facing.RIGHT if dx > 0 else Facing.LEFT
    return Facing.DOWN if dy > 0 else Facing.UP


def steer_towards(
    actor: Actor,
    target_x: float,
    target_y: float,
    arrival_radius: float = ARRIVAL_RADIUS,
) -> Actor:
    """Step ``actor`` toward the target by ``speed`` pixels, then clamp.

    Actors already within ``arrival_radius`` of the target keep their
    position and facing (they are still clamped).
    """
    dx = target_x - actor.x
    dy = target_y - actor.y
    dist = math.hypot(dx, dy)

    if dist > arrival_radius:
        actor = replace(
            actor,
            x=actor.x + dx / dist * actor.speed,
            y=actor.y + dy / dist * actor.speed,
            facing=facing_for_delta(dx, dy),
        )

    return clamp_to_canvas(actor)
