"""Injectable randomness.

Every random decision in the simulation (opponent spawn, roam targets,
think-timers, opponent cooldowns) is drawn from a :class:`RandomSource`
passed in explicitly. ``random.Random`` satisfies the protocol; tests can
substitute a scripted sequence to assert exact positions and targets.

Draw order per opponent spawn: ``x, y, facing, frame, think_timer``.
Draw order per target re-pick: ``target_x, target_y, think_timer``.
"""

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything yielding uniform floats in ``[0, 1)``."""

    def random(self) -> float: ...


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a fresh ``random.Random`` (unseeded when ``seed`` is None)."""
    return random.Random(seed)


def uniform_int(rng: RandomSource, low: int, span: int) -> int:
    """Return an integer uniformly drawn from ``[low, low + span)``."""
    return low + min(int(rng.random() * span), span - 1)
