"""paint_arena.components
========================

Component dataclasses held by the match :class:`~paint_arena.state.State`.

``Actor`` is the single shape used for the player and every opponent; the
``control`` field selects the update strategy (``InputDriven`` for the player,
``AIDriven`` for opponents)::

    from paint_arena.components import Actor, AIDriven, InputDriven

``Scores`` and ``MatchResult`` are plain value objects produced by the score
system.
"""

from .actor import Actor
from .control import AIDriven, Control, InputDriven
from .score import MatchResult, Scores

__all__ = [
    "Actor",
    "AIDriven",
    "Control",
    "InputDriven",
    "MatchResult",
    "Scores",
]
