"""Tests for computer pilots."""

import random

import pytest

from arcade_shooter.constants import PLAYFIELD_WIDTH
from arcade_shooter.game.drawables import Enemy
from arcade_shooter.game.game_state import GameState, GameStatus
from arcade_shooter.game.input import Control, InputState
from arcade_shooter.game.pilots import (
    DEFAULT_PILOT_NAME,
    AutopilotPilot,
    IdlePilot,
    create_pilot,
    supported_pilot_names,
)
from arcade_shooter.game.session import Session


class TestPilotRegistry:
    def test_supported_names(self) -> None:
        assert supported_pilot_names() == ("autopilot", "idle")
        assert DEFAULT_PILOT_NAME in supported_pilot_names()

    def test_create_by_name(self) -> None:
        assert isinstance(create_pilot("autopilot"), AutopilotPilot)
        assert isinstance(create_pilot("idle"), IdlePilot)

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown pilot 'ace'"):
            create_pilot("ace")


class TestAutopilot:
    """Tests for target selection and steering."""

    def test_fires_with_no_enemies(self, quiet_game_state: GameState) -> None:
        pilot = AutopilotPilot(rng=random.Random(0))
        assert pilot.poll(quiet_game_state) == InputState.for_controls(Control.FIRE)

    def test_steers_towards_enemy_on_the_right(self, quiet_game_state: GameState) -> None:
        quiet_game_state.enemies.append(Enemy(PLAYFIELD_WIDTH - 40, 100, speed=2))
        pilot = AutopilotPilot(rng=random.Random(0))

        input_state = pilot.poll(quiet_game_state)

        assert input_state.is_active(Control.RIGHT)
        assert input_state.is_active(Control.FIRE)

    def test_steers_towards_enemy_on_the_left(self, quiet_game_state: GameState) -> None:
        quiet_game_state.enemies.append(Enemy(5, 100, speed=2))
        pilot = AutopilotPilot(rng=random.Random(0))

        assert pilot.poll(quiet_game_state).is_active(Control.LEFT)

    def test_holds_still_when_lined_up(self, quiet_game_state: GameState) -> None:
        ship = quiet_game_state.ship
        quiet_game_state.enemies.append(Enemy(ship.x, 100, speed=2))
        pilot = AutopilotPilot(rng=random.Random(0))

        input_state = pilot.poll(quiet_game_state)

        assert not input_state.is_active(Control.LEFT)
        assert not input_state.is_active(Control.RIGHT)

    def test_ignores_enemies_below_the_ship(self, quiet_game_state: GameState) -> None:
        ship = quiet_game_state.ship
        ship.y = 100
        quiet_game_state.enemies.append(Enemy(5, 300, speed=2))
        pilot = AutopilotPilot(rng=random.Random(0))

        assert pilot.poll(quiet_game_state) == InputState.for_controls(Control.FIRE)

    def test_keeps_target_until_destroyed(self, quiet_game_state: GameState) -> None:
        far_left = Enemy(5, 100, speed=2)
        quiet_game_state.enemies.append(far_left)
        pilot = AutopilotPilot(rng=random.Random(0))
        pilot.poll(quiet_game_state)

        # A closer enemy appearing does not steal the locked target
        quiet_game_state.enemies.append(Enemy(quiet_game_state.ship.x + 40, 100, speed=2))
        assert pilot.poll(quiet_game_state).is_active(Control.LEFT)

        quiet_game_state.enemies.remove(far_left)
        assert pilot.poll(quiet_game_state).is_active(Control.RIGHT)

    @pytest.mark.parametrize("restart, expected", [(True, InputState.of("r")), (False, InputState())])
    def test_game_over_behaviour(
        self, quiet_game_state: GameState, restart: bool, expected: InputState
    ) -> None:
        quiet_game_state.status = GameStatus.GAME_OVER
        pilot = AutopilotPilot(rng=random.Random(0), restart=restart)

        assert pilot.poll(quiet_game_state) == expected

    def test_scores_in_a_real_game(self) -> None:
        game_state = GameState(rng=random.Random(5))
        session = Session(game_state, AutopilotPilot(rng=random.Random(5)))

        for _ in range(600):
            session.tick()
            game_state.check_invariants()
            if game_state.is_game_over:
                break

        assert game_state.score > 0


class TestIdlePilot:
    def test_idle_game_ends(self, default_game_state: GameState) -> None:
        session = Session(default_game_state, IdlePilot())

        for _ in range(500):
            session.tick()
            if default_game_state.is_game_over:
                break

        assert default_game_state.status is GameStatus.GAME_OVER
        assert default_game_state.score == 0
