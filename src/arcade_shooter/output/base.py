"""Base classes for replay file encoders."""

from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import Iterable

from PIL import Image


class OutputProvider(ABC):
    """Turns a stream of rendered frames into the bytes of one animated file."""

    #: Pillow format identifier, e.g. ``gif`` or ``webp``
    output_format: str = ""

    def __init__(self, path: str = ""):
        """
        Args:
            path: Destination file used by :meth:`write`
        """
        self.path = path

    @abstractmethod
    def save_options(self) -> dict[str, object]:
        """Format-specific keyword arguments for ``Image.save``."""
        raise NotImplementedError

    def encode(self, frames: Iterable[Image.Image], frame_duration: int) -> bytes:
        """
        Encode frames as a looping animation.

        Args:
            frames: Rendered frames in play order
            frame_duration: Display time of each frame in milliseconds

        Returns:
            The encoded file, or empty bytes when there are no frames
        """
        frame_list = list(frames)
        if not frame_list:
            return b""

        buffer = BytesIO()
        first, *rest = frame_list
        first.save(
            buffer,
            format=self.output_format,
            save_all=True,
            append_images=rest,
            duration=frame_duration,
            loop=0,
            **self.save_options(),
        )
        return buffer.getvalue()

    def write(self, data: bytes) -> None:
        """Write encoded bytes to the destination path."""
        if not self.path:
            raise ValueError("Output path not set")
        Path(self.path).write_bytes(data)
