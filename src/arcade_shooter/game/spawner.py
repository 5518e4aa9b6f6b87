"""Timer-driven enemy spawning."""

import logging
import random
from typing import Protocol

from ..constants import (
    ENEMY_BASE_SPEED,
    ENEMY_SPAWN_INTERVAL,
    ENEMY_SPAWN_Y,
    ENEMY_SPEED_VARIANCE,
    ENEMY_WIDTH,
    PLAYFIELD_WIDTH,
)
from .drawables import Enemy

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """The part of ``random.Random`` the spawner needs."""

    def random(self) -> float: ...


class Spawner:
    """Creates one enemy every ``interval`` frames."""

    def __init__(
        self,
        rng: RandomSource | None = None,
        interval: int = ENEMY_SPAWN_INTERVAL,
        base_speed: float = ENEMY_BASE_SPEED,
        speed_variance: float = ENEMY_SPEED_VARIANCE,
    ):
        """
        Initialize the spawner.

        Args:
            rng: Random source for spawn position and speed
            interval: Frames between spawns
            base_speed: Slowest enemy speed in units per frame
            speed_variance: Width of the speed range above ``base_speed``
        """
        self.rng = rng or random.Random()
        self.interval = interval
        self.base_speed = base_speed
        self.speed_variance = speed_variance
        self.timer = 0

    def reset(self) -> None:
        self.timer = 0

    def update(self) -> Enemy | None:
        """Advance the timer one frame and return a new enemy when it is due."""
        self.timer += 1
        if self.timer < self.interval:
            return None
        self.timer = 0
        return self.spawn()

    def spawn(self) -> Enemy:
        """Create an enemy above the top edge at a random column and speed."""
        x = self.rng.random() * (PLAYFIELD_WIDTH - ENEMY_WIDTH)
        speed = self.base_speed + self.rng.random() * self.speed_variance
        logger.debug("Spawning enemy at x=%.1f speed=%.2f", x, speed)
        return Enemy(x=x, y=ENEMY_SPAWN_Y, speed=speed)
