"""Score components: live coverage and the frozen end-of-match result."""

from dataclasses import dataclass

from paint_arena.types import Outcome, Team


@dataclass(frozen=True)
class Scores:
    """Coverage percentages, each floored independently.

    ``team_a + team_b`` plus the neutral share may fall short of 100 because
    of truncation.
    """

    team_a: int = 0
    team_b: int = 0

    def for_team(self, team: Team) -> int:
        if team == Team.TEAM_A:
            return self.team_a
        if team == Team.TEAM_B:
            return self.team_b
        raise ValueError(f"No score is kept for {team!r}")


@dataclass(frozen=True)
class MatchResult:
    """Final outcome, computed once when the countdown reaches zero."""

    outcome: Outcome
    scores: Scores
