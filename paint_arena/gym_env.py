"""Gymnasium environment wrapper for Paint Arena.

Provides a structured observation that pairs a rendered RGBA image with an
info dictionary (player view, match status and config). One environment step
is one simulation frame; every ``frames_per_second``-th step also runs a
countdown tick, so a full match lasts ``duration * frames_per_second`` steps.

Reward is the change of the player's lead (``team_a - team_b`` coverage
percentage) per step. ``terminated`` is ``True`` once the countdown has run
out; ``truncated`` is always ``False``.

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"player": {...}, "status": {...}, "config": {...}}}``

Usage:

``env = PaintArenaEnv(render_scale=1)``

The environment is purposely *not* vectorized; wrap externally if needed.
"""

import gymnasium as gym
import numpy as np
from typing import Any, Dict, Optional, Tuple

from PIL.Image import Image as PILImage

from paint_arena.actions import Intent, Intents, intents_from_flags
from paint_arena.config import DEFAULT_CONFIG, GameConfig
from paint_arena.loop import TickScheduler
from paint_arena.match import MatchController
from paint_arena.renderer.canvas import DEFAULT_SCALE, CanvasRenderer
from paint_arena.rng import make_rng
from paint_arena.snapshot import actor_view_dict, status_dict
from paint_arena.state import State
from paint_arena.types import Team

ObsType = Dict[str, Any]

ACTION_FLAGS = [Intent.UP, Intent.DOWN, Intent.LEFT, Intent.RIGHT, Intent.PAINT]


def action_to_intents(action: Any) -> Intents:
    """Convert a ``MultiBinary(5)`` action (up, down, left, right, paint)."""
    flags = np.asarray(action).reshape(-1)
    if flags.shape != (len(ACTION_FLAGS),):
        raise ValueError(f"Invalid action: {action!r}")
    return intents_from_flags(*(bool(flag) for flag in flags))


def env_config_observation_dict(config: GameConfig) -> Dict[str, Any]:
    """Config portion of observation (rules and seed)."""
    return {
        "duration": int(config.duration),
        "num_opponents": int(config.num_opponents),
        "frames_per_second": int(config.frames_per_second),
        "seed": config.seed if config.seed is not None else -1,
    }


def lead(state: State) -> int:
    """Player team's coverage minus the rival team's."""
    own = state.player.team
    rival = Team.TEAM_B if own == Team.TEAM_A else Team.TEAM_A
    return state.scores.for_team(own) - state.scores.for_team(rival)


class PaintArenaEnv(gym.Env[ObsType, np.ndarray]):
    """Gymnasium ``Env`` implementation for Paint Arena.

    The agent controls the player (team A) against the built-in opponents.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        render_mode: str = "texture",
        render_scale: int = DEFAULT_SCALE,
        config: GameConfig = DEFAULT_CONFIG,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "texture" to return PIL image frames, "human" to open window.
            render_scale: Integer upscaling factor of the rendered canvas.
            config: Match rules; ``config.seed`` seeds the first episode.
        """
        from gymnasium import spaces

        self.config = config
        self.match: Optional[MatchController] = None
        self._scheduler = TickScheduler(frames_per_second=config.frames_per_second)
        self._render_mode = render_mode
        self._renderer = CanvasRenderer(scale=render_scale)

        render_width, render_height = self._renderer.size

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        text_space_short = spaces.Text(max_length=32)
        float_box = spaces.Box(low=0.0, high=float(max(render_width, render_height)))

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0,
                    high=255,
                    shape=(render_height, render_width, 4),
                    dtype=np.uint8,
                ),
                "info": spaces.Dict(
                    {
                        "player": spaces.Dict(
                            {
                                "x": float_box,
                                "y": float_box,
                                "team": text_space_short,
                                "facing": text_space_short,
                                "paint_cooldown": int_box(0, 1_000),
                                "frame": int_box(0, 1_000),
                            }
                        ),
                        "status": spaces.Dict(
                            {
                                "time_left": int_box(0, 1_000_000),
                                "phase": text_space_short,  # "running" / "ended"
                                "team_a": int_box(0, 100),
                                "team_b": int_box(0, 100),
                                "outcome": text_space_short,  # "" until ended
                                "tick": int_box(0, 1_000_000_000),
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "duration": int_box(1, 1_000_000),
                                "num_opponents": int_box(0, 1_000),
                                "frames_per_second": int_box(1, 1_000),
                                "seed": int_box(-1, 2**62),
                            }
                        ),
                    }
                ),
            }
        )

        self.action_space = spaces.MultiBinary(len(ACTION_FLAGS))

        self.reset(seed=config.seed)

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode (a brand-new match).

        Arguments:
            seed: Seeds the match random source; ``None`` falls back to
                ``config.seed`` (unseeded when that is ``None`` too).
            options: Gymnasium options (unused).

        Returns:
            Observation dict and empty info dict per Gymnasium API.
        """
        if seed is None:
            seed = self.config.seed
        super().reset(seed=seed)
        self.match = MatchController(self.config, rng=make_rng(seed))
        self._scheduler = TickScheduler(frames_per_second=self.config.frames_per_second)
        return self._get_obs(), self._get_info()

    def step(self, action: Any) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply the action for one simulation frame.

        Arguments:
            action: Five 0/1 flags ``(up, down, left, right, paint)``.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.match is not None

        self.match.set_intents(action_to_intents(action))
        prev_lead = lead(self.match.state)
        self._scheduler.run_frames(self.match, 1)
        reward = float(lead(self.match.state) - prev_lead)
        terminated = not self.match.running
        return self._get_obs(), reward, terminated, False, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current match.

        Args:
            mode: "human" to display, "texture" to return PIL image. Defaults to
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.match is not None
        img = self._renderer.render(self.match.snapshot())
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Dict[str, Any]]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.match is not None
        view = self.match.snapshot()
        return {
            "player": actor_view_dict(view.player),
            "status": {**status_dict(view), "tick": int(self.match.state.tick)},
            "config": env_config_observation_dict(self.config),
        }

    def _get_obs(self) -> ObsType:
        assert self.match is not None
        img = self._renderer.render(self.match.snapshot())
        return {"image": np.array(img), "info": self.state_info()}

    def _get_info(self) -> Dict[str, object]:
        return {}

    def close(self) -> None:
        pass
