"""Axis-aligned bounding boxes and the overlap test used for every collision."""

from dataclasses import dataclass
from typing import Protocol


class AABB(Protocol):
    """Anything with a position and a size in playfield coordinates."""
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Rect:
    """Plain box value for ad-hoc collision checks."""
    x: float
    y: float
    width: float
    height: float


def overlaps(a: AABB, b: AABB) -> bool:
    """
    Check whether two boxes intersect.

    Boxes that only share an edge do not overlap, so a bullet grazing an
    enemy's side on a boundary frame is not a hit.
    """
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )
