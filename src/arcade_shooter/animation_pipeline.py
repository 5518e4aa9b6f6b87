"""Replay recording shared by the CLI entry points."""

from .game.animator import Animator
from .game.input import InputSource
from .game.raster_animation import generate_raster_frames
from .output import resolve_output_provider
from .output.base import OutputProvider


def encode_animation(
    pilot: InputSource,
    output_path: str,
    *,
    fps: int,
    max_frames: int | None,
    seed: int | None = None,
    scale: int = 1,
    provider: OutputProvider | None = None,
) -> bytes:
    """Play a game with the given pilot and encode it for the output path."""
    target_provider = provider or resolve_output_provider(output_path)
    animator = Animator(pilot, fps=fps, scale=scale, seed=seed)
    frame_stream = generate_raster_frames(animator, max_frames)
    return target_provider.encode(frame_stream, frame_duration=animator.frame_duration)
