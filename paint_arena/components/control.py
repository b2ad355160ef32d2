"""Control strategy components.

Every :class:`~paint_arena.components.actor.Actor` carries exactly one of
these. The reducer dispatches on the concrete type instead of branching on
ad hoc flags, so the player and the opponents share one actor shape while
following different update paths.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InputDriven:
    """Actor steered by the keyboard intents of the host."""


@dataclass(frozen=True)
class AIDriven:
    """Actor roaming toward randomly chosen targets.

    Attributes:
        target_x: Roam target x in canvas pixels.
        target_y: Roam target y in canvas pixels.
        think_timer: Ticks until a new target is picked (re-pick at ``<= 0``).
    """

    target_x: float
    target_y: float
    think_timer: int = 0


Control = InputDriven | AIDriven
