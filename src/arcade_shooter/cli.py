"""CLI interface for arcade-shooter."""

import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from .animation_pipeline import encode_animation
from .config import Settings, load_settings
from .game.pilots import DEFAULT_PILOT_NAME, BasePilot, create_pilot, supported_pilot_names
from .output import resolve_output_provider, supported_output_formats
from .output.base import OutputProvider

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()

app = typer.Typer(help="A minimal real-time arcade shooter.", no_args_is_help=True)


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


@app.command()
def play(
    fps: int | None = typer.Option(None, "--fps", help="Frames per second"),
    scale: int | None = typer.Option(None, "--scale", help="Window pixels per playfield unit"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for enemy spawns"),
) -> None:
    """
    Play in a window.

    Move with the arrow keys or WASD, hold SPACE to fire, press R to restart
    after a game over and ESC to quit.
    """
    try:
        settings = _resolve_settings(fps=fps, scale=scale, seed=seed)
        # Imported lazily so recording never needs a display
        import pygame

        from .game.live import create_live_runner

        console.print("[bold blue]Starting game...[/bold blue]")
        try:
            runner = create_live_runner(settings)
            runner.run()
        except pygame.error as e:
            raise CLIError(f"Could not open game window: {e}")
        console.print(f"[green]✓[/green] Final score: {runner.session.game_state.score}")
    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


@app.command()
def record(
    output: str = typer.Argument(
        ..., help=f"Replay file to write ({SUPPORTED_OUTPUT_FORMATS_TEXT})"
    ),
    pilot: str = typer.Option(
        DEFAULT_PILOT_NAME,
        "--pilot",
        "-p",
        help=f"Who plays the recorded game ({', '.join(supported_pilot_names())})",
    ),
    fps: int | None = typer.Option(None, "--fps", help="Frames per second for the replay"),
    max_frames: int | None = typer.Option(
        None, "--max-frames", help="Maximum number of frames to record"
    ),
    scale: int | None = typer.Option(None, "--scale", help="Pixels per playfield unit"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for pilot and enemy spawns"),
) -> None:
    """Record a game played by a computer pilot as an animated image."""
    try:
        settings = _resolve_settings(fps=fps, scale=scale, seed=seed)
        if max_frames is not None and max_frames <= 0:
            raise CLIError("--max-frames must be positive")
        provider = _resolve_output_provider(output)
        selected_pilot = _resolve_pilot(pilot)

        # Warn about GIF FPS limitation
        if output.lower().endswith(".gif") and settings.fps > 50:
            console.print(
                f"[yellow]Warning:[/yellow] FPS > 50 may not display correctly in browsers "
                f"(GIF delay will be {1000 // settings.fps}ms, but browsers clamp delays < 20ms to ~100ms)"
            )

        ext = Path(output).suffix[1:].upper()
        console.print(f"[bold blue]Recording {ext} replay with the {pilot} pilot...[/bold blue]")
        try:
            encoded = encode_animation(
                pilot=selected_pilot,
                output_path=output,
                fps=settings.fps,
                max_frames=max_frames,
                seed=settings.seed,
                scale=settings.scale,
                provider=provider,
            )
            provider.write(encoded)
        except Exception as e:
            raise CLIError(f"Failed to generate output: {e}")

        console.print(f"[green]✓[/green] {ext} saved to {output}")

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


def _resolve_settings(**overrides: object) -> Settings:
    """Load environment settings, apply CLI overrides and configure logging."""
    try:
        settings = load_settings().override(**overrides)
    except ValueError as e:
        raise CLIError(str(e))
    if settings.fps <= 0:
        raise CLIError("--fps must be positive")
    if settings.scale <= 0:
        raise CLIError("--scale must be positive")
    _configure_logging(settings.log_level)
    return settings


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _resolve_output_provider(output: str) -> OutputProvider:
    try:
        return resolve_output_provider(output)
    except ValueError as e:
        raise CLIError(str(e))


def _resolve_pilot(name: str) -> BasePilot:
    try:
        return create_pilot(name)
    except ValueError as exc:
        raise CLIError(str(exc))


if __name__ == "__main__":
    app()
