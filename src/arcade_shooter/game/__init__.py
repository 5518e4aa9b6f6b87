"""Game simulation, input sources and rendering."""

from .animator import Animator
from .drawables import BoxEntity, Bullet, Drawable, Enemy, Ship
from .game_state import GameState, GameStatus
from .geometry import AABB, Rect, overlaps
from .input import KEY_BINDINGS, Control, InputSource, InputState, ScriptedInput
from .pilots import AutopilotPilot, BasePilot, IdlePilot
from .raster_animation import generate_raster_frames
from .render_context import RenderContext
from .renderer import Renderer
from .session import Session
from .spawner import Spawner

__all__ = [
    "AABB",
    "Animator",
    "AutopilotPilot",
    "BasePilot",
    "BoxEntity",
    "Bullet",
    "Control",
    "Drawable",
    "Enemy",
    "GameState",
    "GameStatus",
    "IdlePilot",
    "InputSource",
    "InputState",
    "KEY_BINDINGS",
    "Rect",
    "RenderContext",
    "Renderer",
    "ScriptedInput",
    "Session",
    "Ship",
    "Spawner",
    "generate_raster_frames",
    "overlaps",
]
