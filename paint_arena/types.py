"""Common type aliases and enumerations.

``Team`` and ``Facing`` are integer enums (0 = neutral / down) so grids and
snapshots serialize to small integers.
"""

from enum import IntEnum, StrEnum, auto


class Team(IntEnum):
    """Tile ownership tag (also the team of an actor)."""

    NEUTRAL = 0
    TEAM_A = 1
    TEAM_B = 2


class Facing(IntEnum):
    """Direction an actor is looking at, used for drawing eyes and nozzle."""

    DOWN = 0
    LEFT = 1
    RIGHT = 2
    UP = 3


class Phase(StrEnum):
    """Match lifecycle phase."""

    RUNNING = auto()
    ENDED = auto()


class Outcome(StrEnum):
    """Final result of a match; ``TIE`` compares equal to ``"tie"``."""

    TEAM_A = auto()
    TEAM_B = auto()
    TIE = auto()
