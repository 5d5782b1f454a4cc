"""Rectangle overlap test."""
from __future__ import annotations

from delve_minigame.components import Box


def boxes_overlap(a: Box, b: Box) -> bool:
    """Strict AABB overlap; boxes that only share an edge do not collide."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )
