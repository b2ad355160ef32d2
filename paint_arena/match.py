"""Match controller.

``MatchController`` owns one match: the current immutable
:class:`~paint_arena.state.State`, the held input intents and the random
source. Hosts drive it through three entry points:

* :meth:`MatchController.tick` at ~60 Hz (simulation),
* :meth:`MatchController.tick_second` at 1 Hz (countdown),
* :meth:`MatchController.key_down` / :meth:`MatchController.key_up` from
  the input device.

Nothing here is thread-safe; the host must not call into one controller
concurrently (see :class:`paint_arena.loop.TickScheduler`).
"""

import logging
from typing import Optional

from paint_arena.actions import NO_INTENTS, RESTART_KEY, Intents, press, release
from paint_arena.config import DEFAULT_CONFIG, GameConfig
from paint_arena.factories import new_match_state
from paint_arena.rng import RandomSource, make_rng
from paint_arena.snapshot import RenderSnapshot, snapshot
from paint_arena.state import State
from paint_arena.step import countdown, step

logger = logging.getLogger(__name__)


class MatchController:
    """Single match lifecycle: ``RUNNING`` -> ``ENDED`` -> (restart) ``RUNNING``."""

    state: State
    intents: Intents

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        rng: Optional[RandomSource] = None,
    ):
        """Create a controller and start the first match.

        Args:
            config: Match rules.
            rng: Random source; defaults to ``make_rng(config.seed)``.
        """
        self.config = config
        self.rng: RandomSource = rng if rng is not None else make_rng(config.seed)
        self.intents = NO_INTENTS
        self.matches_played = 0
        self.state = new_match_state(self.rng, config)
        logger.info(
            "Match started: %d s, %d opponents", config.duration, config.num_opponents
        )

    @property
    def running(self) -> bool:
        return self.state.running

    def tick(self) -> State:
        """Run one simulation tick; a no-op once the match has ended."""
        self.state = step(self.state, self.intents, self.rng)
        return self.state

    def tick_second(self) -> State:
        """Run one countdown tick; logs the outcome when the match ends."""
        was_running = self.state.running
        self.state = countdown(self.state)
        if was_running and not self.state.running and self.state.result is not None:
            self.matches_played += 1
            logger.info(
                "Match over after %d ticks: %s (A %d%% / B %d%%)",
                self.state.tick,
                self.state.result.outcome.value,
                self.state.result.scores.team_a,
                self.state.result.scores.team_b,
            )
        return self.state

    def restart(self) -> bool:
        """Start a new match if the current one has ended.

        Returns:
            bool: True if a new match was started. A running match cannot be
                restarted and is left untouched.
        """
        if self.state.running:
            logger.debug("Ignoring restart while the match is running")
            return False
        self.state = new_match_state(self.rng, self.config, player=self.state.player)
        logger.info("Match restarted")
        return True

    def key_down(self, key_code: str) -> None:
        """Record a key press; the restart key starts a new match once ended."""
        if key_code == RESTART_KEY and not self.state.running:
            self.restart()
        self.intents = press(self.intents, key_code)

    def key_up(self, key_code: str) -> None:
        self.intents = release(self.intents, key_code)

    def set_intents(self, intents: Intents) -> None:
        """Replace all held intents at once (last write wins)."""
        self.intents = intents

    def snapshot(self) -> RenderSnapshot:
        return snapshot(self.state)
