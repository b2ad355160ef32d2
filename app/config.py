from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

import streamlit as st

from paint_arena.config import GameConfig
from paint_arena.constants import GAME_DURATION, NUM_OPPONENTS
from paint_arena.loop import TickScheduler
from paint_arena.match import MatchController
from paint_arena.renderer.canvas import CanvasRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    """Host-side settings edited in the Config tab."""

    seed: Optional[int] = None
    render_scale: int = 1
    duration: int = GAME_DURATION
    num_opponents: int = NUM_OPPONENTS
    refresh_seconds: float = 0.1

    def game_config(self) -> GameConfig:
        return GameConfig(
            duration=self.duration,
            num_opponents=self.num_opponents,
            seed=self.seed,
        )


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = AppConfig()


def get_config_from_widgets() -> AppConfig:
    current: AppConfig = st.session_state["config"]

    st.subheader("Match")
    duration = st.number_input(
        "Duration (seconds)", min_value=5, max_value=600, value=current.duration
    )
    num_opponents = st.number_input(
        "Opponents", min_value=0, max_value=8, value=current.num_opponents
    )

    st.subheader("Random seed")
    use_seed = st.checkbox("Reproducible spawns", value=current.seed is not None)
    seed: Optional[int] = None
    if use_seed:
        seed = int(
            st.number_input(
                "Random seed", min_value=0, value=current.seed or 0, key="seed_input"
            )
        )

    st.subheader("Display")
    render_scale = st.slider(
        "Scale", min_value=1, max_value=3, value=current.render_scale
    )
    refresh_seconds = st.slider(
        "Refresh interval (s)",
        min_value=0.05,
        max_value=0.5,
        value=current.refresh_seconds,
        help="How often the page pulls a new frame; the simulation runs at 60 Hz.",
    )

    return AppConfig(
        seed=seed,
        render_scale=int(render_scale),
        duration=int(duration),
        num_opponents=int(num_opponents),
        refresh_seconds=float(refresh_seconds),
    )


def make_match_and_reset(config: AppConfig) -> None:
    """Create a new match for ``config`` and reset the session bookkeeping.

    Centralizes session_state keys (match, scheduler, renderer, clock) so the
    page code only reads them.
    """
    try:
        match = MatchController(config.game_config())
    except ValueError as e:
        st.error(f"Match creation failed: {e}")
        st.stop()
    st.session_state["match"] = match
    st.session_state["scheduler"] = TickScheduler()
    st.session_state["renderer"] = CanvasRenderer(scale=config.render_scale)
    st.session_state["last_clock"] = time.monotonic()
    st.session_state["paint_held"] = False
    logger.info("New match session (seed=%s)", config.seed)
