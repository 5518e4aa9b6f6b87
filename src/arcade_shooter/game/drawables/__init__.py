"""Drawable game objects."""

from .bullet import Bullet
from .drawable import BoxEntity, Drawable
from .enemy import Enemy
from .ship import Ship

__all__ = [
    "BoxEntity",
    "Bullet",
    "Drawable",
    "Enemy",
    "Ship",
]
