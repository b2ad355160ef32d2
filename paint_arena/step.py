"""Simulation reducer.

:func:`step` advances a match by one simulation tick (~1/60 s) and
:func:`countdown` by one second. Both are pure: they return a new
:class:`~paint_arena.state.State` and leave the input untouched.

Ordering within a tick:

1. Player: movement from intents, cooldown, paint trigger, animation.
2. Each opponent in spawn order: think (maybe re-pick target), steer and
   count the think-timer down, cooldown, paint trigger, animation.
3. Live scores are recomputed from the resulting grid (display only).

An ``ENDED`` match ignores both reducers until it is reset.
"""

from dataclasses import replace
from typing import Tuple

from pyrsistent import pvector

from paint_arena.actions import Intents
from paint_arena.components import Actor, AIDriven, InputDriven
from paint_arena.constants import ANIMATION_PERIOD
from paint_arena.grid import Grid
from paint_arena.rng import RandomSource
from paint_arena.state import State
from paint_arena.systems.ai import roam_system, think_system
from paint_arena.systems.cooldown import (
    cooldown_system,
    opponent_paint_system,
    player_paint_system,
)
from paint_arena.systems.movement import move_by_intents
from paint_arena.systems.score import compute_scores
from paint_arena.systems.terminal import countdown_system


def step(state: State, intents: Intents, rng: RandomSource) -> State:
    """Advance the match by one simulation tick.

    Args:
        state (State): Current match state.
        intents (Intents): Input flags held at the start of this tick.
        rng (RandomSource): Source for AI targets and opponent cooldowns.

    Returns:
        State: Next state, or ``state`` itself if the match has ended.
    """
    if not state.running:
        return state

    grid = state.grid
    grid, player = _step_actor(state, grid, state.player, intents, rng)

    opponents = []
    for opponent in state.opponents:
        grid, opponent = _step_actor(state, grid, opponent, intents, rng)
        opponents.append(opponent)

    return replace(
        state,
        grid=grid,
        player=player,
        opponents=pvector(opponents),
        scores=compute_scores(grid),
        tick=state.tick + 1,
    )


def countdown(state: State) -> State:
    """Advance the match clock by one second (may end the match)."""
    return countdown_system(state)


def _step_actor(
    state: State, grid: Grid, actor: Actor, intents: Intents, rng: RandomSource
) -> Tuple[Grid, Actor]:
    """Dispatch on the actor's control strategy."""
    if isinstance(actor.control, InputDriven):
        grid, actor = _step_input_driven(state, grid, actor, intents)
    elif isinstance(actor.control, AIDriven):
        grid, actor = _step_ai_driven(state, grid, actor, rng)
    else:
        raise ValueError(f"Unknown control strategy: {actor.control!r}")
    return grid, _animate(actor)


def _step_input_driven(
    state: State, grid: Grid, actor: Actor, intents: Intents
) -> Tuple[Grid, Actor]:
    actor = move_by_intents(actor, intents)
    actor = cooldown_system(actor)
    return player_paint_system(grid, actor, intents.paint, state.config)


def _step_ai_driven(
    state: State, grid: Grid, actor: Actor, rng: RandomSource
) -> Tuple[Grid, Actor]:
    actor = think_system(actor, rng)
    actor = roam_system(actor)
    actor = cooldown_system(actor)
    return opponent_paint_system(grid, actor, state.config, rng)


def _animate(actor: Actor) -> Actor:
    return replace(actor, frame=(actor.frame + 1) % ANIMATION_PERIOD)
