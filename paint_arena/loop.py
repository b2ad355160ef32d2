"""Single-threaded run loop.

The game is driven by two periodic calls: a simulation tick at
``frames_per_second`` and a countdown tick every ``countdown_interval``
seconds. ``TickScheduler`` turns elapsed wall-clock time into those calls,
invoking them synchronously in chronological order (a frame due at the same
instant as a countdown runs first). Nothing is threaded and no call overlaps
another.

:meth:`TickScheduler.run_frames` is the deterministic variant used by tests
and the Gymnasium environment: a countdown tick after every
``frames_per_second``-th frame.
"""

import logging
from typing import Protocol

from paint_arena.constants import FRAMES_PER_SECOND

logger = logging.getLogger(__name__)

DEFAULT_MAX_FRAMES_PER_ADVANCE = FRAMES_PER_SECOND


class TickTarget(Protocol):
    """Anything exposing the two tick entry points (e.g. ``MatchController``)."""

    def tick(self) -> object: ...

    def tick_second(self) -> object: ...


class TickScheduler:
    """Accumulates elapsed time and issues ticks at their cadences.

    Attributes:
        frames_per_second: Simulation tick rate.
        countdown_interval: Seconds between countdown ticks.
        max_frames_per_advance: Catch-up cap; frames beyond it are dropped
            (the countdown is never dropped).
        frames_run: Total simulation ticks issued.
        seconds_run: Total countdown ticks issued.
    """

    def __init__(
        self,
        frames_per_second: int = FRAMES_PER_SECOND,
        countdown_interval: float = 1.0,
        max_frames_per_advance: int = DEFAULT_MAX_FRAMES_PER_ADVANCE,
    ):
        if frames_per_second <= 0 or countdown_interval <= 0:
            raise ValueError("Tick rates must be positive")
        self.frames_per_second = frames_per_second
        self.countdown_interval = countdown_interval
        self.max_frames_per_advance = max_frames_per_advance
        self.clock = 0.0
        self.frames_due = 0
        self.seconds_due = 0
        self.frames_run = 0
        self.seconds_run = 0

    def advance(self, target: TickTarget, elapsed: float) -> int:
        """Move the clock forward by ``elapsed`` seconds and run due ticks.

        Returns:
            int: Number of simulation ticks issued.
        """
        if elapsed < 0:
            raise ValueError(f"elapsed must be non-negative, got {elapsed}")
        self.clock += elapsed
        frames = 0
        dropped = 0

        while True:
            next_frame_at = (self.frames_due + 1) / self.frames_per_second
            next_countdown_at = (self.seconds_due + 1) * self.countdown_interval
            frame_due = next_frame_at <= self.clock
            countdown_due = next_countdown_at <= self.clock
            if not frame_due and not countdown_due:
                break
            if frame_due and (
                not countdown_due or next_frame_at <= next_countdown_at
            ):
                if frames < self.max_frames_per_advance:
                    target.tick()
                    frames += 1
                    self.frames_run += 1
                else:
                    dropped += 1
                self.frames_due += 1
            else:
                target.tick_second()
                self.seconds_run += 1
                self.seconds_due += 1

        if dropped:
            logger.warning("Host fell behind; dropped %d simulation frames", dropped)
        return frames

    def run_frames(self, target: TickTarget, frames: int) -> None:
        """Run ``frames`` simulation ticks with a countdown after each full second."""
        for _ in range(frames):
            target.tick()
            self.frames_run += 1
            if self.frames_run % self.frames_per_second == 0:
                target.tick_second()
                self.seconds_run += 1
