"""Bullets fired by the player ship."""

from ...constants import BULLET_HEIGHT, BULLET_SPEED, BULLET_WIDTH
from .drawable import BoxEntity


class Bullet(BoxEntity):
    """A projectile travelling straight up."""

    def __init__(self, x: float, y: float, speed: float = BULLET_SPEED):
        super().__init__(x, y, BULLET_WIDTH, BULLET_HEIGHT)
        self.speed = speed

    def update(self) -> None:
        """Advance one frame upward."""
        self.y -= self.speed

    def is_offscreen(self) -> bool:
        """True once the whole bullet is above the playfield."""
        return self.bottom < 0
