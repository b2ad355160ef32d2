"""Cooldown and paint triggering.

The cooldown is decremented first and the trigger evaluated second, so an
actor that just painted reads exactly ``paint_cooldown`` and paints again
``paint_cooldown`` ticks later.
"""

from dataclasses import replace
from typing import Tuple

from paint_arena.components import Actor
from paint_arena.config import GameConfig
from paint_arena.grid import Grid
from paint_arena.rng import RandomSource, uniform_int
from paint_arena.systems.paint import paint


def cooldown_system(actor: Actor) -> Actor:
    """Count the paint cooldown down by one tick (never below zero)."""
    if actor.paint_cooldown <= 0:
        return actor
    return replace(actor, paint_cooldown=actor.paint_cooldown - 1)


def player_paint_system(
    grid: Grid, actor: Actor, wants_paint: bool, config: GameConfig
) -> Tuple[Grid, Actor]:
    """Paint for the player when the paint intent is held and ready."""
    if not wants_paint or actor.paint_cooldown > 0:
        return grid, actor
    grid = paint(grid, actor)
    return grid, replace(actor, paint_cooldown=config.paint_cooldown)


def opponent_paint_system(
    grid: Grid, actor: Actor, config: GameConfig, rng: RandomSource
) -> Tuple[Grid, Actor]:
    """Paint for an opponent whenever ready, then add a random extra delay."""
    if actor.paint_cooldown > 0:
        return grid, actor
    grid = paint(grid, actor)
    cooldown = uniform_int(rng, config.paint_cooldown, config.opponent_extra_cooldown)
    return grid, replace(actor, paint_cooldown=cooldown)
