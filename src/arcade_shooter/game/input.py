"""Key bindings, per-frame input snapshots and the input source interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .game_state import GameState


class Control(Enum):
    """Logical controls the simulation reacts to."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    FIRE = "fire"
    RESTART = "restart"


# Key identifiers follow pygame.key.name()
KEY_BINDINGS: dict[Control, tuple[str, ...]] = {
    Control.LEFT: ("left", "a"),
    Control.RIGHT: ("right", "d"),
    Control.UP: ("up", "w"),
    Control.DOWN: ("down", "s"),
    Control.FIRE: ("space",),
    Control.RESTART: ("r",),
}


@dataclass(frozen=True)
class InputState:
    """Immutable snapshot of the keys held during one frame."""
    held: frozenset[str] = frozenset()

    @classmethod
    def of(cls, *keys: str) -> "InputState":
        return cls(frozenset(keys))

    @classmethod
    def for_controls(cls, *controls: Control) -> "InputState":
        """Snapshot holding the primary binding of each control."""
        return cls(frozenset(KEY_BINDINGS[control][0] for control in controls))

    def is_held(self, key: str) -> bool:
        return key in self.held

    def is_active(self, control: Control) -> bool:
        """Check whether any binding of the control is held."""
        return any(self.is_held(key) for key in KEY_BINDINGS[control])


NO_INPUT = InputState()


class InputSource(ABC):
    """Supplies one input snapshot per frame to a session."""

    @abstractmethod
    def poll(self, game_state: "GameState") -> InputState:
        """
        Return the input for the frame about to be simulated.

        Args:
            game_state: Read-only view of the state before the frame
        """
        raise NotImplementedError


class ScriptedInput(InputSource):
    """Replays a fixed sequence of per-frame key sets, then holds nothing."""

    def __init__(self, frames: Iterable[Iterable[str]], loop: bool = False):
        self.frames = [InputState(frozenset(keys)) for keys in frames]
        self.loop = loop
        self.position = 0

    @classmethod
    def holding(cls, keys: Iterable[str], frames: int) -> "ScriptedInput":
        """Script that holds the same keys for a number of frames."""
        key_set = tuple(keys)
        return cls([key_set] * frames)

    def poll(self, game_state: "GameState") -> InputState:
        if not self.frames:
            return NO_INPUT
        if self.position >= len(self.frames):
            if not self.loop:
                return NO_INPUT
            self.position = 0
        snapshot = self.frames[self.position]
        self.position += 1
        return snapshot
