import logging
import time
import streamlit as st
from pyrsistent import thaw

from config import (
    AppConfig,
    get_config_from_widgets,
    make_match_and_reset,
    set_default_config,
)
from paint_arena.actions import PAINT_KEY
from paint_arena.loop import TickScheduler
from paint_arena.match import MatchController
from paint_arena.renderer.canvas import CanvasRenderer
from paint_arena.snapshot import status_dict
from paint_arena.types import Outcome, Phase

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

DIRECTION_KEYS = ["ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight"]

OUTCOME_MESSAGES = {
    Outcome.TEAM_A: "🎉 **Blue wins!** 🎉",
    Outcome.TEAM_B: "💀 **Red wins!** 💀",
    Outcome.TIE: "🤝 **It's a tie!** 🤝",
}

st.set_page_config(layout="wide", page_title="Paint Arena")


def hold_direction(match: MatchController, key_code: str) -> None:
    """Buttons cannot report key-up, so a direction is held until replaced."""
    for other in DIRECTION_KEYS:
        if other != key_code:
            match.key_up(other)
    match.key_down(key_code)


def release_directions(match: MatchController) -> None:
    for key_code in DIRECTION_KEYS:
        match.key_up(key_code)


# --------- Main App ---------

set_default_config()
tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    config: AppConfig = get_config_from_widgets()

    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["config"] = config
        make_match_and_reset(config)
    st.divider()

if "match" not in st.session_state:
    make_match_and_reset(st.session_state["config"])

match: MatchController = st.session_state["match"]
scheduler: TickScheduler = st.session_state["scheduler"]
renderer: CanvasRenderer = st.session_state["renderer"]
current_cfg: AppConfig = st.session_state["config"]

with tab_game:
    left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

    with right_col:
        if st.button("🔁 New Match", key="restart_btn", use_container_width=True):
            if not match.restart():
                st.toast("The match is still running.", icon="⏳")

        st.divider()

        _, up_col, _ = st.columns([1, 1, 1])
        with up_col:
            if st.button("⬆️", key="up_btn", use_container_width=True):
                hold_direction(match, "ArrowUp")
        left_btn, stop_btn, right_btn = st.columns([1, 1, 1])
        with left_btn:
            if st.button("⬅️", key="left_btn", use_container_width=True):
                hold_direction(match, "ArrowLeft")
        with stop_btn:
            if st.button("⏹️", key="stop_btn", use_container_width=True):
                release_directions(match)
        with right_btn:
            if st.button("➡️", key="right_btn", use_container_width=True):
                hold_direction(match, "ArrowRight")
        _, down_col, _ = st.columns([1, 1, 1])
        with down_col:
            if st.button("⬇️", key="down_btn", use_container_width=True):
                hold_direction(match, "ArrowDown")

        paint_held = st.toggle("🎨 Paint", key="paint_toggle")
        if paint_held != st.session_state["paint_held"]:
            st.session_state["paint_held"] = paint_held
            if paint_held:
                match.key_down(PAINT_KEY)
            else:
                match.key_up(PAINT_KEY)

    @st.fragment(run_every=current_cfg.refresh_seconds)
    def arena() -> None:
        now = time.monotonic()
        elapsed = now - st.session_state["last_clock"]
        st.session_state["last_clock"] = now
        scheduler.advance(match, elapsed)

        view = match.snapshot()
        status = status_dict(view)
        info_col, board_col = st.columns([0.3, 0.7])
        with info_col:
            st.info(f"**Time:** {view.time_left}", icon="⏱️")
            st.info(f"**Team 1 (Blue):** {status['team_a']}%", icon="🟦")
            st.info(f"**Team 2 (Red):** {status['team_b']}%", icon="🟥")
        with board_col:
            if view.phase == Phase.ENDED and view.result is not None:
                st.success(OUTCOME_MESSAGES[view.result.outcome])
            img = renderer.render(view)
            st.image(img.convert("P"), use_container_width=True)

    with middle_col:
        arena()

with tab_state:
    st.json(thaw(match.state.description), expanded=1)
