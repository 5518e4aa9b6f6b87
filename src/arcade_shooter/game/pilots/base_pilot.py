"""Base interface for computer-controlled pilots."""

import random
from abc import abstractmethod
from typing import TYPE_CHECKING

from ..input import InputSource, InputState

if TYPE_CHECKING:
    from ..game_state import GameState


class BasePilot(InputSource):
    """An input source that decides its keys from the current game state."""

    def set_rng(self, rng: random.Random) -> None:
        """Inject RNG source for deterministic simulations."""
        del rng

    @abstractmethod
    def poll(self, game_state: "GameState") -> InputState:
        """
        Decide which keys to hold for the next frame.

        Args:
            game_state: The current game state with ship, enemies and bullets

        Returns:
            The input snapshot for the frame
        """
        raise NotImplementedError


class IdlePilot(BasePilot):
    """Never touches the controls; the run ends when an enemy gets through."""

    def poll(self, game_state: "GameState") -> InputState:
        return InputState()
