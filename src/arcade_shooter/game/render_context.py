"""Rendering configuration: scale and palette."""

from dataclasses import dataclass

from ..constants import (
    BACKGROUND_COLOR,
    ENTITY_COLOR,
    HUD_COLOR,
    OVERLAY_COLOR,
    PLAYFIELD_HEIGHT,
    PLAYFIELD_WIDTH,
)

Color = tuple[int, ...]


@dataclass(frozen=True)
class RenderContext:
    """How playfield units map to pixels and which colors to paint with."""
    scale: int = 1
    background_color: Color = BACKGROUND_COLOR
    entity_color: Color = ENTITY_COLOR
    hud_color: Color = HUD_COLOR
    overlay_color: Color = OVERLAY_COLOR

    @property
    def size(self) -> tuple[int, int]:
        """Frame size in pixels."""
        return PLAYFIELD_WIDTH * self.scale, PLAYFIELD_HEIGHT * self.scale

    def to_pixel_box(
        self, x: float, y: float, width: float, height: float
    ) -> tuple[float, float, float, float]:
        """Convert a playfield box to a Pillow ``[x0, y0, x1, y1]`` rectangle."""
        s = self.scale
        # Pillow rectangles include the end pixel
        return x * s, y * s, (x + width) * s - 1, (y + height) * s - 1
