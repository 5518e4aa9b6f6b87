"""Autopilot: chase a weighted-random nearby enemy and keep firing."""

import random
from typing import TYPE_CHECKING

from ..input import Control, InputState
from .base_pilot import BasePilot

if TYPE_CHECKING:
    from ..drawables import Enemy
    from ..game_state import GameState


class AutopilotPilot(BasePilot):
    """
    Ship picks a target among the closest enemies and lines up beneath it.

    Candidates are the 4 enemies nearest to the ship horizontally that are
    still above it; distance-based weights make close targets likely without
    making the choice predictable. Fire is held the whole time.
    """
    _MAX_CANDIDATES = 4

    def __init__(self, rng: random.Random | None = None, restart: bool = False) -> None:
        """
        Args:
            rng: Random source for target selection
            restart: Press restart when the game is over instead of idling
        """
        self._rng = rng or random.Random()
        self.restart = restart
        self._target: "Enemy | None" = None

    def set_rng(self, rng: random.Random) -> None:
        self._rng = rng

    def poll(self, game_state: "GameState") -> InputState:
        if game_state.is_game_over:
            self._target = None
            if self.restart:
                return InputState.for_controls(Control.RESTART)
            return InputState()

        controls = [Control.FIRE]
        target = self._current_target(game_state)
        if target is not None:
            steer = self._steer_towards(game_state, target)
            if steer is not None:
                controls.append(steer)
        return InputState.for_controls(*controls)

    def _current_target(self, game_state: "GameState") -> "Enemy | None":
        if self._target is not None and self._target in game_state.enemies:
            return self._target
        candidates = self._candidates(game_state)
        if not candidates:
            self._target = None
            return None
        ship_center = game_state.ship.x + game_state.ship.width / 2
        weights = [
            self._distance_weight(abs(enemy.x + enemy.width / 2 - ship_center))
            for enemy in candidates
        ]
        self._target = self._rng.choices(candidates, weights=weights, k=1)[0]
        return self._target

    def _candidates(self, game_state: "GameState") -> list["Enemy"]:
        ship = game_state.ship
        ship_center = ship.x + ship.width / 2
        above = [enemy for enemy in game_state.enemies if enemy.bottom < ship.y]
        above.sort(key=lambda enemy: abs(enemy.x + enemy.width / 2 - ship_center))
        return above[: self._MAX_CANDIDATES]

    def _distance_weight(self, distance: float) -> int:
        if distance < 15:
            return 10
        if distance < 120:
            return 100
        return 1

    def _steer_towards(self, game_state: "GameState", target: "Enemy") -> Control | None:
        ship = game_state.ship
        offset = (target.x + target.width / 2) - (ship.x + ship.width / 2)
        if offset > ship.speed:
            return Control.RIGHT
        if offset < -ship.speed:
            return Control.LEFT
        return None
