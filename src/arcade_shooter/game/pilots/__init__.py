"""Computer-controlled input sources used for headless replays."""

from .autopilot import AutopilotPilot
from .base_pilot import BasePilot, IdlePilot

DEFAULT_PILOT_NAME = "autopilot"
PILOT_TYPES: dict[str, type[BasePilot]] = {
    "autopilot": AutopilotPilot,
    "idle": IdlePilot,
}


def supported_pilot_names() -> tuple[str, ...]:
    """Return supported pilot names in deterministic order."""
    return tuple(PILOT_TYPES.keys())


def create_pilot(name: str) -> BasePilot:
    """Create a pilot instance by name."""
    pilot_class = PILOT_TYPES.get(name)
    if pilot_class is None:
        available = ", ".join(supported_pilot_names())
        raise ValueError(f"Unknown pilot '{name}'. Available: {available}")
    return pilot_class()


__all__ = [
    "AutopilotPilot",
    "BasePilot",
    "IdlePilot",
    "DEFAULT_PILOT_NAME",
    "PILOT_TYPES",
    "supported_pilot_names",
    "create_pilot",
]
