"""Opponent AI system.

Each opponent roams toward a random point of the canvas and re-picks a new
one whenever its think-timer runs out. The timer is decremented once per tick
after moving, including the tick on which a new target was picked.
"""

from dataclasses import replace

from paint_arena.components import Actor, AIDriven
from paint_arena.constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    THINK_TIME_MIN,
    THINK_TIME_SPAN,
)
from paint_arena.rng import RandomSource, uniform_int
from paint_arena.systems.movement import steer_towards


def pick_target(rng: RandomSource) -> AIDriven:
    """Return a control with a fresh roam target and think-timer.

    Draws ``target_x``, ``target_y`` then the timer from ``rng``; the timer is
    uniform in ``[THINK_TIME_MIN, THINK_TIME_MIN + THINK_TIME_SPAN)``.
    """
    target_x = rng.random() * CANVAS_WIDTH
    target_y = rng.random() * CANVAS_HEIGHT
    think_timer = uniform_int(rng, THINK_TIME_MIN, THINK_TIME_SPAN)
    return AIDriven(target_x=target_x, target_y=target_y, think_timer=think_timer)


def think_system(actor: Actor, rng: RandomSource) -> Actor:
    """Re-pick the roam target if the think-timer has expired."""
    control = actor.control
    if not isinstance(control, AIDriven):
        return actor
    if control.think_timer > 0:
        return actor
    return replace(actor, control=pick_target(rng))


def roam_system(actor: Actor) -> Actor:
    """Steer toward the current target and count the think-timer down."""
    control = actor.control
    if not isinstance(control, AIDriven):
        return actor
    actor = steer_towards(actor, control.target_x, control.target_y)
    return replace(
        actor, control=replace(control, think_timer=control.think_timer - 1)
    )
