"""Simulation runtime helpers used by Animator."""

import hashlib
import json
import random

from .game_state import GameState
from .input import InputSource
from .pilots.base_pilot import BasePilot


def derive_simulation_seed(pilot: InputSource, fps: int) -> int:
    """Create a stable seed based on simulation inputs."""
    payload = {
        "fps": fps,
        "pilot": pilot.__class__.__name__,
    }
    encoded = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    digest = hashlib.sha256(encoded).digest()
    return int.from_bytes(digest[:8], "big")


def create_seeded_game_state(pilot: InputSource, seed: int) -> GameState:
    """Create a game state with deterministic RNG streams for pilot and world state."""
    master_rng = random.Random(seed)
    pilot_rng = random.Random(master_rng.getrandbits(64))
    game_rng = random.Random(master_rng.getrandbits(64))
    if isinstance(pilot, BasePilot):
        pilot.set_rng(pilot_rng)
    return GameState(rng=game_rng)
