"""Test helpers shared across modules."""

from typing import Sequence

from arcade_shooter.game.game_state import GameState
from arcade_shooter.game.input import InputState

# Spawn interval that never elapses within a test
NEVER = 10**9


class FixedRandom:
    """Random source returning a fixed cycle of values."""

    def __init__(self, values: Sequence[float]):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


def run_frames(game_state: GameState, input_state: InputState, frames: int) -> None:
    """Tick the game and check its invariants after every frame."""
    for _ in range(frames):
        game_state.tick(input_state)
        game_state.check_invariants()
