"""Input intents and key bindings.

The host translates key-down / key-up events into five boolean intent flags.
Intents are last-write-wins: the simulation reads whatever flags are set at
the start of its next tick, nothing is queued. Unrecognized key codes are
ignored.
"""

from dataclasses import dataclass, replace
from enum import StrEnum, auto
from typing import Dict


class Intent(StrEnum):
    """The five input flags; values match :class:`Intents` field names."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    PAINT = auto()


KEY_BINDINGS: Dict[str, Intent] = {
    "ArrowUp": Intent.UP,
    "KeyW": Intent.UP,
    "ArrowDown": Intent.DOWN,
    "KeyS": Intent.DOWN,
    "ArrowLeft": Intent.LEFT,
    "KeyA": Intent.LEFT,
    "ArrowRight": Intent.RIGHT,
    "KeyD": Intent.RIGHT,
    "Space": Intent.PAINT,
}

PAINT_KEY = "Space"
RESTART_KEY = PAINT_KEY
"""While a match is over, pressing the paint key starts a new one."""


@dataclass(frozen=True)
class Intents:
    """Snapshot of the held input flags."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    paint: bool = False

    @property
    def moving(self) -> bool:
        return self.up or self.down or self.left or self.right

    def with_intent(self, intent: Intent, active: bool) -> "Intents":
        return replace(self, **{intent.value: active})


NO_INTENTS = Intents()


def press(intents: Intents, key_code: str) -> Intents:
    """Return ``intents`` with the flag bound to ``key_code`` set."""
    intent = KEY_BINDINGS.get(key_code)
    if intent is None:
        return intents
    return intents.with_intent(intent, True)


def release(intents: Intents, key_code: str) -> Intents:
    """Return ``intents`` with the flag bound to ``key_code`` cleared."""
    intent = KEY_BINDINGS.get(key_code)
    if intent is None:
        return intents
    return intents.with_intent(intent, False)


def intents_from_flags(
    up: bool, down: bool, left: bool, right: bool, paint: bool
) -> Intents:
    """Build intents from individual flags (e.g. a ``MultiBinary`` action)."""
    return Intents(
        up=bool(up),
        down=bool(down),
        left=bool(left),
        right=bool(right),
        paint=bool(paint),
    )
