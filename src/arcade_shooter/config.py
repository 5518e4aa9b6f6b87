"""Runtime settings loaded from environment variables."""

import os
from dataclasses import dataclass, replace

from .constants import DEFAULT_FPS

ENV_PREFIX = "ARCADE_SHOOTER_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Settings shared by the live window and the replay recorder."""
    fps: int = DEFAULT_FPS
    scale: int = 1
    seed: int | None = None
    log_level: str = "WARNING"

    def override(self, **changes: object) -> "Settings":
        """Return a copy with every non-None change applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """
    Build settings from ``ARCADE_SHOOTER_*`` environment variables.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Raises:
        ValueError: If a variable holds an invalid value
    """
    env = os.environ if environ is None else environ
    defaults = Settings()

    fps = _read_int(env, "FPS", defaults.fps)
    scale = _read_int(env, "SCALE", defaults.scale)
    if fps <= 0:
        raise ValueError(f"{ENV_PREFIX}FPS must be positive, got {fps}")
    if scale <= 0:
        raise ValueError(f"{ENV_PREFIX}SCALE must be positive, got {scale}")

    seed_text = env.get(f"{ENV_PREFIX}SEED")
    seed = _read_int(env, "SEED", 0) if seed_text else None

    log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
        )

    return Settings(fps=fps, scale=scale, seed=seed, log_level=log_level)


def _read_int(env, name: str, default: int) -> int:
    raw = env.get(f"{ENV_PREFIX}{name}")
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}")
