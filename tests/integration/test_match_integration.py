import pytest

from paint_arena.actions import Intents
from paint_arena.components import AIDriven
from paint_arena.config import GameConfig
from paint_arena.constants import CANVAS_HEIGHT, CANVAS_WIDTH, TILE_SIZE
from paint_arena.match import MatchController
from paint_arena.types import Facing, Outcome, Phase, Team
from tests.test_utils import ScriptedRandom, owned_cells


def run_out_clock(match: MatchController) -> None:
    for _ in range(match.config.duration):
        match.tick_second()


def test_initial_match_state() -> None:
    match = MatchController(rng=ScriptedRandom([0.3]))
    state = match.state
    assert state.phase == Phase.RUNNING
    assert state.time_left == 60
    assert (state.player.x, state.player.y) == (CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2)
    assert len(state.opponents) == 3
    assert all(owner == Team.NEUTRAL for row in state.grid for owner in row)
    assert match.intents == Intents()


def test_opponent_spawn_uses_documented_draw_order() -> None:
    rng = ScriptedRandom([0.5, 0.25, 0.75, 0.5, 0.5])
    match = MatchController(GameConfig(num_opponents=1), rng=rng)
    opponent = match.state.opponents[0]
    assert opponent.x == pytest.approx(0.5 * (CANVAS_WIDTH - TILE_SIZE))
    assert opponent.y == pytest.approx(0.25 * (CANVAS_HEIGHT - TILE_SIZE))
    assert opponent.facing == Facing.UP
    assert opponent.frame == 30
    assert opponent.team == Team.TEAM_B
    assert opponent.speed == pytest.approx(1.6)
    assert opponent.control == AIDriven(
        target_x=opponent.x, target_y=opponent.y, think_timer=30
    )
    assert rng.draws == 5


def test_timer_decreases_by_one_per_countdown_tick() -> None:
    match = MatchController(rng=ScriptedRandom())
    for expected in range(59, 0, -1):
        match.tick_second()
        assert match.state.time_left == expected
        assert match.running


def test_match_ends_exactly_once_and_clock_stays_at_zero() -> None:
    match = MatchController(rng=ScriptedRandom())
    run_out_clock(match)
    assert match.state.phase == Phase.ENDED
    assert match.matches_played == 1
    ended = match.state
    for _ in range(3):
        match.tick_second()
    assert match.state is ended
    assert match.state.time_left == 0
    assert match.matches_played == 1


def test_simulation_ticks_are_noops_once_ended() -> None:
    match = MatchController(rng=ScriptedRandom())
    run_out_clock(match)
    ended = match.state
    match.key_down("ArrowLeft")
    match.tick()
    assert match.state is ended


def test_restart_is_ignored_while_running() -> None:
    match = MatchController(rng=ScriptedRandom())
    match.tick_second()
    before = match.state
    assert match.restart() is False
    assert match.state is before


def test_restart_after_end_reinitializes_match() -> None:
    match = MatchController(rng=ScriptedRandom([0.1, 0.9, 0.4]))
    match.key_down("ArrowUp")
    match.key_down("Space")
    for _ in range(30):
        match.tick()
    match.key_up("Space")
    match.key_up("ArrowUp")
    assert owned_cells(match.state.grid, Team.TEAM_A) != []
    facing = match.state.player.facing
    old_opponents = list(match.state.opponents)

    run_out_clock(match)
    assert match.restart() is True

    state = match.state
    assert state.phase == Phase.RUNNING
    assert state.time_left == 60
    assert state.result is None
    assert state.tick == 0
    assert all(owner == Team.NEUTRAL for row in state.grid for owner in row)
    assert (state.player.x, state.player.y) == (CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2)
    assert state.player.facing == facing
    assert len(state.opponents) == 3
    assert all(
        new is not old for new in state.opponents for old in old_opponents
    )


def test_space_while_ended_restarts_match() -> None:
    match = MatchController(rng=ScriptedRandom())
    run_out_clock(match)
    match.key_down("Space")
    assert match.running
    assert match.state.time_left == 60
    assert match.intents.paint


def test_unknown_keys_are_ignored() -> None:
    match = MatchController(rng=ScriptedRandom())
    match.key_down("KeyQ")
    match.key_up("Escape")
    assert match.intents == Intents()


def test_key_events_drive_player_movement() -> None:
    match = MatchController(rng=ScriptedRandom())
    start_x = match.state.player.x
    match.key_down("KeyA")
    match.tick()
    match.tick()
    assert match.state.player.x == start_x - 4
    assert match.state.player.facing == Facing.LEFT
    match.key_up("KeyA")
    match.tick()
    assert match.state.player.x == start_x - 4


def test_snapshot_exposes_result_only_when_ended() -> None:
    match = MatchController(rng=ScriptedRandom())
    match.tick()
    view = match.snapshot()
    assert view.result is None
    assert view.time_left == 60
    assert len(view.opponents) == 3
    assert view.player.x == match.state.player.x

    run_out_clock(match)
    view = match.snapshot()
    assert view.phase == Phase.ENDED
    assert view.result is not None
    assert view.result.outcome in set(Outcome)


def test_tie_when_nobody_painted() -> None:
    match = MatchController(GameConfig(num_opponents=0), rng=ScriptedRandom())
    run_out_clock(match)
    assert match.state.result is not None
    assert match.state.result.outcome == "tie"


def test_player_alone_wins() -> None:
    match = MatchController(GameConfig(num_opponents=0), rng=ScriptedRandom())
    match.key_down("Space")
    match.tick()
    match.key_down("ArrowRight")
    for _ in range(120):
        match.tick()
    run_out_clock(match)
    assert match.state.result is not None
    assert match.state.result.outcome == Outcome.TEAM_A
    assert match.state.result.scores.team_a > 0
