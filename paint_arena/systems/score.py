"""Score aggregation.

Coverage is ``floor(count / total * 100)`` per team, computed with integer
arithmetic so boundary cases (e.g. exactly half the grid) never lose a point
to float rounding.
"""

from paint_arena.components import Scores
from paint_arena.grid import Grid, grid_size, iter_cells
from paint_arena.types import Outcome, Team


def compute_scores(grid: Grid) -> Scores:
    """Scan ``grid`` once and return both teams' coverage percentages."""
    width, height = grid_size(grid)
    total = width * height
    if total == 0:
        return Scores()

    team_a = 0
    team_b = 0
    for _, _, owner in iter_cells(grid):
        if owner == Team.TEAM_A:
            team_a += 1
        elif owner == Team.TEAM_B:
            team_b += 1

    return Scores(team_a=team_a * 100 // total, team_b=team_b * 100 // total)


def decide_outcome(scores: Scores) -> Outcome:
    """Higher percentage wins; equal percentages are a tie."""
    if scores.team_a > scores.team_b:
        return Outcome.TEAM_A
    if scores.team_b > scores.team_a:
        return Outcome.TEAM_B
    return Outcome.TIE
