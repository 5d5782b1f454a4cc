"""Minigame components and read-only views."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Phase(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


@dataclass
class Box:
    """Axis-aligned rectangle. (x, y) is the top-left corner; y grows downward."""

    x: float
    y: float
    width: float
    height: float


@dataclass
class Falling:
    """Obstacle marker with its base fall speed per frame."""

    speed: float


@dataclass
class Avatar:
    """Marks the player-controlled box."""


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class MinigameView:
    """Immutable snapshot of the minigame for rendering."""

    phase: Phase
    seconds_left: int
    difficulty: float
    player: Rect | None
    obstacles: tuple[Rect, ...]
