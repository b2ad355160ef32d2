import pytest

from paint_arena.actions import (
    KEY_BINDINGS,
    Intent,
    Intents,
    intents_from_flags,
    press,
    release,
)


@pytest.mark.parametrize(
    "key_code,intent",
    [
        ("ArrowUp", Intent.UP),
        ("KeyW", Intent.UP),
        ("ArrowDown", Intent.DOWN),
        ("KeyS", Intent.DOWN),
        ("ArrowLeft", Intent.LEFT),
        ("KeyA", Intent.LEFT),
        ("ArrowRight", Intent.RIGHT),
        ("KeyD", Intent.RIGHT),
        ("Space", Intent.PAINT),
    ],
)
def test_key_bindings(key_code: str, intent: Intent) -> None:
    assert KEY_BINDINGS[key_code] == intent
    pressed = press(Intents(), key_code)
    assert getattr(pressed, intent.value) is True
    assert release(pressed, key_code) == Intents()


def test_unknown_key_codes_are_ignored() -> None:
    intents = Intents(up=True)
    assert press(intents, "KeyZ") is intents
    assert release(intents, "Enter") is intents


def test_last_write_wins() -> None:
    intents = press(Intents(), "ArrowLeft")
    intents = press(intents, "KeyA")
    intents = release(intents, "ArrowLeft")
    assert intents.left is False


def test_moving_flag() -> None:
    assert Intents().moving is False
    assert Intents(paint=True).moving is False
    assert Intents(right=True).moving is True


def test_intents_from_flags() -> None:
    assert intents_from_flags(1, 0, 0, 1, 1) == Intents(
        up=True, right=True, paint=True
    )
