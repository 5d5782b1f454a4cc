"""delve-minigame - Gas-line dodging reflex minigame for Deep Mine."""
from __future__ import annotations

from delve_minigame.collision import boxes_overlap
from delve_minigame.components import Avatar, Box, Falling, MinigameView, Phase, Rect
from delve_minigame.config import MinigameConfig
from delve_minigame.game import Minigame
from delve_minigame.systems import make_collision_system, make_fall_system, spawn_obstacle
from delve_minigame.trigger import DepthTrigger

__all__ = [
    "Avatar",
    "Box",
    "DepthTrigger",
    "Falling",
    "Minigame",
    "MinigameConfig",
    "MinigameView",
    "Phase",
    "Rect",
    "boxes_overlap",
    "make_collision_system",
    "make_fall_system",
    "spawn_obstacle",
]
