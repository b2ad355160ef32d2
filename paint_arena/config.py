"""Match configuration.

``GameConfig`` carries the tunable subset of the arena rules. Grid size and
the number of teams are fixed (see :mod:`paint_arena.constants`).
"""

from dataclasses import dataclass
from typing import Optional

from paint_arena.constants import (
    FRAMES_PER_SECOND,
    GAME_DURATION,
    NUM_OPPONENTS,
    OPPONENT_EXTRA_COOLDOWN,
    OPPONENT_SPEED_FACTOR,
    PAINT_COOLDOWN,
    PLAYER_SPEED,
)


@dataclass(frozen=True)
class GameConfig:
    """Tunable match rules.

    Attributes:
        duration: Match length in seconds.
        num_opponents: Number of AI opponents spawned per match.
        player_speed: Player movement in pixels per tick.
        opponent_speed_factor: Opponent speed relative to ``player_speed``.
        paint_cooldown: Ticks between two paints of the same actor.
        opponent_extra_cooldown: Upper bound (exclusive) of the random extra
            cooldown opponents add after painting.
        frames_per_second: Simulation ticks per countdown tick.
        seed: Seed for the match random source (``None`` = non-reproducible).
    """

    duration: int = GAME_DURATION
    num_opponents: int = NUM_OPPONENTS
    player_speed: float = PLAYER_SPEED
    opponent_speed_factor: float = OPPONENT_SPEED_FACTOR
    paint_cooldown: int = PAINT_COOLDOWN
    opponent_extra_cooldown: int = OPPONENT_EXTRA_COOLDOWN
    frames_per_second: int = FRAMES_PER_SECOND
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError(f"duration must be positive, got {self.duration}")
        if self.num_opponents < 0:
            raise ValueError(
                f"num_opponents must be non-negative, got {self.num_opponents}"
            )
        if self.player_speed <= 0 or self.opponent_speed_factor <= 0:
            raise ValueError("speeds must be positive")
        if self.paint_cooldown < 0 or self.opponent_extra_cooldown < 1:
            raise ValueError("invalid paint cooldown settings")
        if self.frames_per_second <= 0:
            raise ValueError(
                f"frames_per_second must be positive, got {self.frames_per_second}"
            )

    @property
    def opponent_speed(self) -> float:
        return self.player_speed * self.opponent_speed_factor


DEFAULT_CONFIG = GameConfig()
