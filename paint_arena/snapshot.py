"""Render-ready snapshot of a match.

The renderer (and any other host) reads only this view. ``result`` is
exposed exclusively once the match has ended.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from paint_arena.components import Actor, MatchResult, Scores
from paint_arena.grid import Grid
from paint_arena.state import State
from paint_arena.types import Facing, Phase, Team


@dataclass(frozen=True)
class ActorView:
    x: float
    y: float
    team: Team
    facing: Facing
    paint_cooldown: int
    frame: int
    size: int

    @property
    def ready_to_paint(self) -> bool:
        return self.paint_cooldown <= 0


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything needed to draw one frame.

    Attributes:
        grid: Tile ownership.
        player: The player's view.
        opponents: Opponent views in spawn order.
        time_left: Remaining seconds.
        phase: Match phase.
        scores: Live coverage percentages.
        result: Final outcome, ``None`` unless ``phase`` is ``ENDED``.
    """

    grid: Grid
    player: ActorView
    opponents: Tuple[ActorView, ...]
    time_left: int
    phase: Phase
    scores: Scores
    result: Optional[MatchResult] = None

    @property
    def actors(self) -> Tuple[ActorView, ...]:
        return (self.player,) + self.opponents


def actor_view(actor: Actor) -> ActorView:
    return ActorView(
        x=actor.x,
        y=actor.y,
        team=actor.team,
        facing=actor.facing,
        paint_cooldown=actor.paint_cooldown,
        frame=actor.frame,
        size=actor.size,
    )


def snapshot(state: State) -> RenderSnapshot:
    """Project ``state`` onto the renderer's input contract."""
    return RenderSnapshot(
        grid=state.grid,
        player=actor_view(state.player),
        opponents=tuple(actor_view(actor) for actor in state.opponents),
        time_left=state.time_left,
        phase=state.phase,
        scores=state.scores,
        result=state.result if state.phase == Phase.ENDED else None,
    )


def actor_view_dict(view: ActorView) -> Dict[str, Any]:
    """JSON-friendly payload for an actor view."""
    return {
        "x": float(view.x),
        "y": float(view.y),
        "team": view.team.name,
        "facing": view.facing.name,
        "paint_cooldown": int(view.paint_cooldown),
        "frame": int(view.frame),
    }


def status_dict(view: RenderSnapshot) -> Dict[str, Any]:
    """JSON-friendly match status (clock, phase, scores, outcome)."""
    return {
        "time_left": int(view.time_left),
        "phase": view.phase.value,
        "team_a": int(view.scores.team_a),
        "team_b": int(view.scores.team_b),
        "outcome": view.result.outcome.value if view.result else "",
    }
