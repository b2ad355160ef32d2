"""Factories for actors and fresh match states.

``new_match_state`` implements the Init/Reset transition: an all-neutral
grid, a full clock, the player moved to the canvas centre and a freshly
spawned set of opponents. The player passed in is repositioned, not
recreated, so whatever else it carries (facing, cooldown, animation phase)
survives a restart.
"""

from dataclasses import replace
from typing import Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from paint_arena.components import Actor, AIDriven, InputDriven
from paint_arena.config import DEFAULT_CONFIG, GameConfig
from paint_arena.constants import (
    ANIMATION_PERIOD,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    THINK_TIME_MIN,
    TILE_SIZE,
)
from paint_arena.grid import new_grid
from paint_arena.rng import RandomSource, uniform_int
from paint_arena.state import State
from paint_arena.types import Facing, Phase, Team


def canvas_center() -> tuple[float, float]:
    return CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2


def create_player(config: GameConfig = DEFAULT_CONFIG) -> Actor:
    """Keyboard-driven team A actor standing at the canvas centre."""
    x, y = canvas_center()
    return Actor(
        x=x,
        y=y,
        team=Team.TEAM_A,
        speed=config.player_speed,
        control=InputDriven(),
    )


def spawn_opponent(rng: RandomSource, config: GameConfig = DEFAULT_CONFIG) -> Actor:
    """Team B roaming actor with randomized position, facing and phase.

    Draws ``x, y, facing, frame, think_timer`` in that order. The initial roam
    target is the spawn point itself, so the opponent idles until its first
    think (within the first ``THINK_TIME_MIN`` ticks).
    """
    x = rng.random() * (CANVAS_WIDTH - TILE_SIZE)
    y = rng.random() * (CANVAS_HEIGHT - TILE_SIZE)
    facing = Facing(uniform_int(rng, 0, len(Facing)))
    frame = uniform_int(rng, 0, ANIMATION_PERIOD)
    think_timer = uniform_int(rng, 0, THINK_TIME_MIN)
    return Actor(
        x=x,
        y=y,
        team=Team.TEAM_B,
        speed=config.opponent_speed,
        facing=facing,
        frame=frame,
        control=AIDriven(target_x=x, target_y=y, think_timer=think_timer),
    )


def spawn_opponents(
    rng: RandomSource, config: GameConfig = DEFAULT_CONFIG
) -> PVector[Actor]:
    return pvector([spawn_opponent(rng, config) for _ in range(config.num_opponents)])


def new_match_state(
    rng: RandomSource,
    config: GameConfig = DEFAULT_CONFIG,
    player: Optional[Actor] = None,
) -> State:
    """Build the ``RUNNING`` state a match starts (or restarts) from.

    Args:
        rng: Source for opponent spawn randomness.
        config: Match rules.
        player: Existing player to reposition; a new one is created if None.

    Returns:
        State: Fresh state with an all-neutral grid and ``config.duration``
            seconds on the clock.
    """
    if player is None:
        player = create_player(config)
    else:
        x, y = canvas_center()
        player = replace(player, x=x, y=y)

    return State(
        player=player,
        opponents=spawn_opponents(rng, config),
        grid=new_grid(),
        config=config,
        time_left=config.duration,
        phase=Phase.RUNNING,
    )
