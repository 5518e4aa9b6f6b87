"""Enemies descending toward the player."""

from ...constants import ENEMY_HEIGHT, ENEMY_WIDTH
from .drawable import BoxEntity


class Enemy(BoxEntity):
    """A falling enemy; its speed is fixed when it spawns."""

    def __init__(self, x: float, y: float, speed: float):
        super().__init__(x, y, ENEMY_WIDTH, ENEMY_HEIGHT)
        self.speed = speed

    def update(self) -> None:
        """Advance one frame downward."""
        self.y += self.speed

    def has_passed(self, floor_y: float) -> bool:
        """Check whether the enemy's top edge went past the given line."""
        return self.y > floor_y
