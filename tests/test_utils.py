from typing import Iterable, List, Optional, Sequence, Tuple

from pyrsistent import pvector

from paint_arena.components import Actor, AIDriven, InputDriven
from paint_arena.config import DEFAULT_CONFIG, GameConfig
from paint_arena.constants import OPPONENT_SPEED_FACTOR, PLAYER_SPEED, TILE_SIZE
from paint_arena.grid import Grid, iter_cells, new_grid, set_owner
from paint_arena.state import State
from paint_arena.types import Team


class ScriptedRandom:
    """Deterministic ``RandomSource`` replaying a fixed list of floats.

    Cycles through ``values``; ``draws`` records how many values were used.
    """

    def __init__(self, values: Sequence[float] = (0.5,)):
        if not values:
            raise ValueError("ScriptedRandom needs at least one value")
        self.values: List[float] = list(values)
        self.draws = 0

    def random(self) -> float:
        value = self.values[self.draws % len(self.values)]
        self.draws += 1
        return value


def make_player(
    pos: Tuple[float, float] = (256.0, 240.0), **kwargs: object
) -> Actor:
    return Actor(
        x=pos[0],
        y=pos[1],
        team=Team.TEAM_A,
        speed=PLAYER_SPEED,
        control=InputDriven(),
        **kwargs,  # type: ignore[arg-type]
    )


def make_opponent(
    pos: Tuple[float, float] = (100.0, 100.0),
    target: Optional[Tuple[float, float]] = None,
    think_timer: int = 100,
    **kwargs: object,
) -> Actor:
    tx, ty = target if target is not None else pos
    return Actor(
        x=pos[0],
        y=pos[1],
        team=Team.TEAM_B,
        speed=PLAYER_SPEED * OPPONENT_SPEED_FACTOR,
        control=AIDriven(target_x=tx, target_y=ty, think_timer=think_timer),
        **kwargs,  # type: ignore[arg-type]
    )


def tile_pos(tx: int, ty: int) -> Tuple[float, float]:
    """Canvas position of the top-left corner of tile ``(tx, ty)``."""
    return float(tx * TILE_SIZE), float(ty * TILE_SIZE)


def make_state(
    player: Optional[Actor] = None,
    opponents: Iterable[Actor] = (),
    grid: Optional[Grid] = None,
    config: GameConfig = DEFAULT_CONFIG,
    time_left: Optional[int] = None,
) -> State:
    return State(
        player=player if player is not None else make_player(),
        opponents=pvector(list(opponents)),
        grid=grid if grid is not None else new_grid(),
        config=config,
        time_left=config.duration if time_left is None else time_left,
    )


def fill_grid(grid: Grid, team: Team, count: int, start: int = 0) -> Grid:
    """Give ``count`` tiles (row-major, skipping the first ``start``) to ``team``."""
    for idx, (x, y, _) in enumerate(iter_cells(grid)):
        if idx < start:
            continue
        if idx >= start + count:
            break
        grid = set_owner(grid, x, y, team)
    return grid


def owned_cells(grid: Grid, team: Team) -> List[Tuple[int, int]]:
    return [(x, y) for x, y, owner in iter_cells(grid) if owner == team]


def changed_cells(before: Grid, after: Grid) -> List[Tuple[int, int]]:
    return [
        (x, y)
        for (x, y, old), (_, _, new) in zip(iter_cells(before), iter_cells(after))
        if old != new
    ]
