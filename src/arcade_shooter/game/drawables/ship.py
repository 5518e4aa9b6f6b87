"""Player ship object."""

from typing import TYPE_CHECKING

from ...constants import (
    BULLET_WIDTH,
    PLAYER_HEIGHT,
    PLAYER_SPEED,
    PLAYER_START_X,
    PLAYER_START_Y,
    PLAYER_WIDTH,
    PLAYFIELD_HEIGHT,
    PLAYFIELD_WIDTH,
    SHOOT_DELAY,
)
from ..input import Control
from .drawable import BoxEntity

if TYPE_CHECKING:
    from ..input import InputState


class Ship(BoxEntity):
    """Represents the player's ship."""

    def __init__(self, speed: float = PLAYER_SPEED, shoot_delay: int = SHOOT_DELAY):
        """Initialize the ship at its starting position."""
        super().__init__(PLAYER_START_X, PLAYER_START_Y, PLAYER_WIDTH, PLAYER_HEIGHT)
        self.speed = speed
        self.shoot_delay = shoot_delay
        self.shoot_cooldown = 0  # Frames until the ship can shoot again

    def reset(self) -> None:
        """Put the ship back where a new run starts."""
        self.x = PLAYER_START_X
        self.y = PLAYER_START_Y
        self.shoot_cooldown = 0

    def update(self, input_state: "InputState") -> None:
        """Move according to held controls, stay inside the playfield and cool down.

        Args:
            input_state: Keys held this frame.
        """
        # Opposite controls both apply and cancel out
        if input_state.is_active(Control.LEFT):
            self.x -= self.speed
        if input_state.is_active(Control.RIGHT):
            self.x += self.speed
        if input_state.is_active(Control.UP):
            self.y -= self.speed
        if input_state.is_active(Control.DOWN):
            self.y += self.speed

        self.x = max(0, min(PLAYFIELD_WIDTH - self.width, self.x))
        self.y = max(0, min(PLAYFIELD_HEIGHT - self.height, self.y))

        if self.shoot_cooldown > 0:
            self.shoot_cooldown -= 1

    def can_shoot(self) -> bool:
        """Check if the cooldown has finished."""
        return self.shoot_cooldown == 0

    def muzzle_position(self) -> tuple[float, float]:
        """Where a new bullet starts: centered on the ship, at its top edge."""
        return self.x + self.width / 2 - BULLET_WIDTH / 2, self.y
