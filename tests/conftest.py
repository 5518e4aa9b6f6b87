"""Shared fixtures for game tests."""

import random

import pytest

from arcade_shooter.game.game_state import GameState
from arcade_shooter.game.spawner import Spawner
from helpers import NEVER


@pytest.fixture
def default_game_state() -> GameState:
    """Game state with a seeded spawner on the regular interval."""
    return GameState(rng=random.Random(0))


@pytest.fixture
def quiet_game_state() -> GameState:
    """Game state whose spawner never fires, for tests that place enemies by hand."""
    return GameState(spawner=Spawner(rng=random.Random(0), interval=NEVER))
