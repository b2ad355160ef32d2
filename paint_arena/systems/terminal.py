"""Countdown and end-of-match systems.

The countdown runs only while the match is ``RUNNING``. When it reaches zero
the phase flips to ``ENDED`` exactly once and the final result is frozen;
later countdown ticks leave the state untouched.
"""

from dataclasses import replace

from paint_arena.components import MatchResult
from paint_arena.state import State
from paint_arena.systems.score import compute_scores, decide_outcome
from paint_arena.types import Phase


def countdown_system(state: State) -> State:
    """Advance the match clock by one second."""
    if not state.running:
        return state

    time_left = max(state.time_left - 1, 0)
    state = replace(state, time_left=time_left)
    if time_left == 0:
        state = end_system(state)
    return state


def end_system(state: State) -> State:
    """Freeze final scores and the winner; idempotent once ended."""
    if not state.running:
        return state
    scores = compute_scores(state.grid)
    result = MatchResult(outcome=decide_outcome(scores), scores=scores)
    return replace(state, phase=Phase.ENDED, scores=scores, result=result)
