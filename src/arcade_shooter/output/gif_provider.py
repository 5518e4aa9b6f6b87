"""GIF replay encoder."""

from .base import OutputProvider


class GifOutputProvider(OutputProvider):
    output_format = "gif"

    def save_options(self) -> dict[str, object]:
        # Frames are mostly identical; let Pillow diff them
        return {"optimize": False, "disposal": 1}
