"""Renderer for drawing game frames using Pillow."""

from PIL import Image, ImageDraw, ImageFont

from .game_state import GameState
from .render_context import RenderContext
from .scene import draw_scene

HUD_FONT_SIZE = 18
TITLE_FONT_SIZE = 36
RESTART_PROMPT = "Press R to restart"


class Renderer:
    """Renders game state as PIL Images."""

    def __init__(self, game_state: GameState, render_context: RenderContext):
        """
        Initialize renderer.

        Args:
            game_state: The game state to render (never modified)
            render_context: Rendering configuration and theming
        """
        self.game_state = game_state
        self.context = render_context
        self.width, self.height = self.context.size
        self.hud_font = ImageFont.load_default(size=HUD_FONT_SIZE * self.context.scale)
        self.title_font = ImageFont.load_default(size=TITLE_FONT_SIZE * self.context.scale)

    def render_frame(self) -> Image.Image:
        """
        Render the current game state as an image.

        When the game is over the last frame stays visible behind a
        translucent overlay with the final score.

        Returns:
            RGB PIL Image of the current frame
        """
        img = Image.new("RGB", (self.width, self.height), self.context.background_color)

        overlay = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay, "RGBA")
        draw_scene(self.game_state, draw, self.context)
        self._draw_score(draw)

        combined = Image.alpha_composite(img.convert("RGBA"), overlay)
        if self.game_state.is_game_over:
            combined = Image.alpha_composite(combined, self._game_over_overlay())

        return combined.convert("RGB")

    def _draw_score(self, draw: ImageDraw.ImageDraw) -> None:
        """Draw the current score in the top-left corner."""
        margin = 10 * self.context.scale
        draw.text(
            (margin, margin),
            f"SCORE: {self.game_state.score}",
            font=self.hud_font,
            fill=self.context.hud_color,
        )

    def _game_over_overlay(self) -> Image.Image:
        overlay = Image.new("RGBA", (self.width, self.height), self.context.overlay_color)
        draw = ImageDraw.Draw(overlay, "RGBA")
        center_y = self.height // 2
        s = self.context.scale
        self._draw_centered(draw, "GAME OVER", center_y - 20 * s, self.title_font)
        self._draw_centered(draw, f"Score: {self.game_state.score}", center_y + 20 * s, self.hud_font)
        self._draw_centered(draw, RESTART_PROMPT, center_y + 50 * s, self.hud_font)
        return overlay

    def _draw_centered(
        self, draw: ImageDraw.ImageDraw, text: str, y: float, font: ImageFont.ImageFont
    ) -> None:
        """Draw text horizontally centered with its vertical middle at ``y``."""
        bbox = draw.textbbox((0, 0), text, font=font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        x = (self.width - text_width) / 2
        draw.text((x, y - text_height / 2), text, font=font, fill=self.context.hud_color)
