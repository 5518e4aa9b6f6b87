"""Base class for everything the renderer paints."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from PIL import ImageDraw

if TYPE_CHECKING:
    from ..render_context import RenderContext


class Drawable(ABC):
    """An object that can paint itself onto a frame."""

    @abstractmethod
    def draw(self, draw: ImageDraw.ImageDraw, context: "RenderContext") -> None:
        """
        Draw the object.

        Args:
            draw: Pillow drawing handle for the frame overlay
            context: Scale and palette of the frame
        """
        raise NotImplementedError


class BoxEntity(Drawable):
    """A solid rectangle living in the playfield."""

    def __init__(self, x: float, y: float, width: float, height: float):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def draw(self, draw: ImageDraw.ImageDraw, context: "RenderContext") -> None:
        draw.rectangle(
            context.to_pixel_box(self.x, self.y, self.width, self.height),
            fill=context.entity_color,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(x={self.x:.1f}, y={self.y:.1f})"
