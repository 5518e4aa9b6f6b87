"""Game state management for the ship, bullets, enemies, score and run status."""

import logging
import random
from enum import Enum
from typing import List

from ..constants import ENEMY_REWARD, PLAYFIELD_HEIGHT, PLAYFIELD_WIDTH
from .drawables import Bullet, Enemy, Ship
from .geometry import overlaps
from .input import Control, InputState
from .spawner import RandomSource, Spawner

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameState:
    """Owns every entity of one game and advances it one frame at a time."""

    def __init__(self, rng: RandomSource | None = None, spawner: Spawner | None = None):
        """
        Initialize a fresh run.

        Args:
            rng: Random source handed to the default spawner
            spawner: Spawner to use instead of the default one
        """
        self.rng = rng or random.Random()
        self.spawner = spawner or Spawner(rng=self.rng)
        self.ship = Ship()
        self.bullets: List[Bullet] = []
        self.enemies: List[Enemy] = []
        self.score = 0
        self.status = GameStatus.RUNNING
        self.frame = 0

    @property
    def is_running(self) -> bool:
        return self.status is GameStatus.RUNNING

    @property
    def is_game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def tick(self, input_state: InputState) -> None:
        """Advance the game by one frame.

        While the game is over nothing moves; only a held restart key is
        honoured, and the restart frame itself does not simulate.

        Args:
            input_state: Keys held during this frame.
        """
        self.frame += 1
        if self.is_game_over:
            if input_state.is_active(Control.RESTART):
                self.restart()
            return

        self._update_player(input_state)
        self._update_bullets()
        self._update_enemies()
        self.resolve_collisions()

    def restart(self) -> None:
        """Reset score, entities, spawn timer and ship, and start running."""
        logger.info("Restarting game (final score %d)", self.score)
        self.score = 0
        self.bullets = []
        self.enemies = []
        self.spawner.reset()
        self.ship.reset()
        self.status = GameStatus.RUNNING

    def shoot(self) -> None:
        """Ship shoots a bullet and starts its cooldown."""
        x, y = self.ship.muzzle_position()
        self.bullets.append(Bullet(x, y))
        self.ship.shoot_cooldown = self.ship.shoot_delay

    def end_game(self, reason: str) -> None:
        if self.is_game_over:
            return
        logger.info("Game over at frame %d: %s (score %d)", self.frame, reason, self.score)
        self.status = GameStatus.GAME_OVER

    def _update_player(self, input_state: InputState) -> None:
        self.ship.update(input_state)
        if input_state.is_active(Control.FIRE) and self.ship.can_shoot():
            self.shoot()

    def _update_bullets(self) -> None:
        for bullet in self.bullets:
            bullet.update()
        self.bullets = [bullet for bullet in self.bullets if not bullet.is_offscreen()]

    def _update_enemies(self) -> None:
        enemy = self.spawner.update()
        if enemy is not None:
            self.enemies.append(enemy)

        for enemy in self.enemies:
            enemy.update()
        if any(enemy.has_passed(PLAYFIELD_HEIGHT) for enemy in self.enemies):
            self.end_game("enemy reached the bottom")

    def resolve_collisions(self) -> None:
        """Match bullets against enemies, then enemies against the ship.

        Bullets are checked oldest first, each against the enemies oldest
        first; a bullet destroys the first enemy it overlaps and nothing else.
        """
        destroyed: set[int] = set()
        surviving_bullets = []
        for bullet in self.bullets:
            target = next(
                (
                    enemy
                    for enemy in self.enemies
                    if id(enemy) not in destroyed and overlaps(bullet, enemy)
                ),
                None,
            )
            if target is None:
                surviving_bullets.append(bullet)
                continue
            destroyed.add(id(target))
            self.score += ENEMY_REWARD

        self.bullets = surviving_bullets
        if destroyed:
            self.enemies = [enemy for enemy in self.enemies if id(enemy) not in destroyed]

        if any(overlaps(self.ship, enemy) for enemy in self.enemies):
            self.end_game("ship collided with an enemy")

    def check_invariants(self) -> None:
        """Assert the properties every completed frame must satisfy."""
        ship = self.ship
        assert ship.shoot_cooldown >= 0, f"negative cooldown {ship.shoot_cooldown}"
        assert 0 <= ship.x <= PLAYFIELD_WIDTH - ship.width, f"ship x out of bounds: {ship.x}"
        assert 0 <= ship.y <= PLAYFIELD_HEIGHT - ship.height, f"ship y out of bounds: {ship.y}"
        assert self.score >= 0, f"negative score {self.score}"
        assert 0 <= self.spawner.timer < self.spawner.interval, (
            f"spawn timer {self.spawner.timer} outside [0, {self.spawner.interval})"
        )
