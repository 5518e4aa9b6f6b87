"""Tests for bullet and enemy movement, removal and the bottom-edge check."""

from arcade_shooter.constants import BULLET_HEIGHT, BULLET_SPEED, PLAYFIELD_HEIGHT
from arcade_shooter.game.drawables import Bullet, Enemy
from arcade_shooter.game.game_state import GameState, GameStatus
from arcade_shooter.game.input import NO_INPUT


class TestBullets:
    """Tests for bullet travel and off-screen cleanup."""

    def test_bullet_moves_up(self, quiet_game_state: GameState) -> None:
        bullet = Bullet(100, 300)
        quiet_game_state.bullets.append(bullet)

        quiet_game_state.tick(NO_INPUT)

        assert bullet.y == 300 - BULLET_SPEED
        assert bullet in quiet_game_state.bullets

    def test_bullet_kept_until_fully_above_top(self, quiet_game_state: GameState) -> None:
        """A bullet whose bottom edge sits exactly on the top edge is still kept."""
        bullet = Bullet(100, BULLET_SPEED - BULLET_HEIGHT)
        quiet_game_state.bullets.append(bullet)

        quiet_game_state.tick(NO_INPUT)
        assert bullet.bottom == 0
        assert bullet in quiet_game_state.bullets

        quiet_game_state.tick(NO_INPUT)
        assert bullet not in quiet_game_state.bullets

    def test_removes_every_offscreen_bullet(self, quiet_game_state: GameState) -> None:
        """Adjacent removals neither skip nor duplicate entries."""
        gone = [Bullet(10, -15), Bullet(20, -14), Bullet(30, -20)]
        kept = Bullet(40, 200)
        quiet_game_state.bullets.extend([gone[0], gone[1], kept, gone[2]])

        quiet_game_state.tick(NO_INPUT)

        assert quiet_game_state.bullets == [kept]


class TestEnemies:
    """Tests for enemy descent and the bottom-edge game over."""

    def test_enemy_moves_down_by_its_speed(self, quiet_game_state: GameState) -> None:
        enemy = Enemy(10, 100, speed=2.5)
        quiet_game_state.enemies.append(enemy)

        quiet_game_state.tick(NO_INPUT)

        assert enemy.y == 102.5

    def test_empty_store_is_fine(self, quiet_game_state: GameState) -> None:
        quiet_game_state.tick(NO_INPUT)
        assert quiet_game_state.status is GameStatus.RUNNING

    def test_enemy_past_bottom_ends_game(self, quiet_game_state: GameState) -> None:
        enemy = Enemy(10, PLAYFIELD_HEIGHT + 1, speed=2)
        quiet_game_state.enemies.append(enemy)

        quiet_game_state.tick(NO_INPUT)

        assert quiet_game_state.status is GameStatus.GAME_OVER
        # Crossing the bottom flags the game; the enemy itself stays
        assert enemy in quiet_game_state.enemies

    def test_enemy_on_bottom_line_does_not_end_game(self, quiet_game_state: GameState) -> None:
        quiet_game_state.enemies.append(Enemy(10, PLAYFIELD_HEIGHT - 2, speed=2))

        quiet_game_state.tick(NO_INPUT)

        assert quiet_game_state.status is GameStatus.RUNNING

    def test_any_crossing_enemy_ends_game(self, quiet_game_state: GameState) -> None:
        quiet_game_state.enemies.extend(
            [
                Enemy(10, 100, speed=2),
                Enemy(60, PLAYFIELD_HEIGHT, speed=2),
                Enemy(110, PLAYFIELD_HEIGHT + 5, speed=2),
            ]
        )

        quiet_game_state.tick(NO_INPUT)

        assert quiet_game_state.status is GameStatus.GAME_OVER
        assert len(quiet_game_state.enemies) == 3
