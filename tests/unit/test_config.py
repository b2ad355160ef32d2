import pytest

from paint_arena.config import DEFAULT_CONFIG, GameConfig


def test_defaults_match_arena_rules() -> None:
    assert DEFAULT_CONFIG.duration == 60
    assert DEFAULT_CONFIG.num_opponents == 3
    assert DEFAULT_CONFIG.paint_cooldown == 15
    assert DEFAULT_CONFIG.player_speed == 2.0
    assert DEFAULT_CONFIG.opponent_speed == pytest.approx(1.6)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"duration": 0},
        {"num_opponents": -1},
        {"player_speed": 0.0},
        {"opponent_speed_factor": -0.5},
        {"paint_cooldown": -1},
        {"opponent_extra_cooldown": 0},
        {"frames_per_second": 0},
    ],
)
def test_invalid_config_is_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        GameConfig(**kwargs)
