"""Immutable match ``State``.

A ``State`` is the complete snapshot of one match at one tick. Systems are
pure functions taking a ``State`` (plus intents and a random source) and
returning a new one; the :class:`~paint_arena.match.MatchController` swaps
its current state for the result, which is the only place the match
"changes".

Design notes:

* The grid is a persistent vector (see :mod:`paint_arena.grid`); the
  opponents are a persistent vector kept in spawn order, which is also the
  update and draw order.
* ``result`` is ``None`` while running and frozen once the phase becomes
  ``ENDED``; it never changes afterwards.
* ``time_left`` never goes below zero.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from pyrsistent import PMap, pmap, pvector
from pyrsistent.typing import PVector

from paint_arena.components import Actor, MatchResult, Scores
from paint_arena.config import DEFAULT_CONFIG, GameConfig
from paint_arena.grid import Grid, new_grid
from paint_arena.types import Phase


@dataclass(frozen=True)
class State:
    """Immutable match state.

    Attributes:
        player (Actor): The keyboard-driven actor.
        opponents (PVector[Actor]): AI actors in spawn order.
        grid (Grid): Tile ownership.
        config (GameConfig): Rules the match was started with.
        time_left (int): Remaining seconds, never negative.
        phase (Phase): ``RUNNING`` or ``ENDED``.
        scores (Scores): Coverage recomputed after every simulation tick.
        result (MatchResult | None): Frozen outcome, only set when ended.
        tick (int): Simulation ticks run since the match started.
    """

    player: Actor
    opponents: PVector[Actor] = pvector()
    grid: Grid = field(default_factory=new_grid)
    config: GameConfig = DEFAULT_CONFIG
    time_left: int = DEFAULT_CONFIG.duration
    phase: Phase = Phase.RUNNING
    scores: Scores = Scores()
    result: Optional[MatchResult] = None
    tick: int = 0

    @property
    def running(self) -> bool:
        return self.phase == Phase.RUNNING

    @property
    def actors(self) -> PVector[Actor]:
        """Player first, then opponents (draw order)."""
        return pvector([self.player]).extend(self.opponents)

    @property
    def description(self) -> PMap[str, Any]:
        """Compact diagnostic view (the grid is summarized by its scores)."""
        return pmap(
            {
                "phase": self.phase.value,
                "time_left": self.time_left,
                "tick": self.tick,
                "scores": asdict(self.scores),
                "result": asdict(self.result) if self.result else None,
                "player": asdict(self.player),
                "opponents": [asdict(actor) for actor in self.opponents],
            }
        )
