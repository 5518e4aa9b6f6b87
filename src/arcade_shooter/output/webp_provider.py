"""WebP replay encoder."""

from .base import OutputProvider


class WebPOutputProvider(OutputProvider):
    output_format = "webp"

    def save_options(self) -> dict[str, object]:
        return {"lossless": True, "method": 4}
