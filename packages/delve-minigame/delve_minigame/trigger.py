"""Edge-triggered depth milestone detection."""
from __future__ import annotations

import math


class DepthTrigger:
    """Fires once each time the whole depth lands on a new multiple of *interval*.

    The trigger remembers the highest ``floor(depth)`` it has seen and fires
    only when a new floor is itself a positive multiple of *interval*. Depth
    hovering just past a milestone does not refire, and a jump that skips
    over a milestone (floor 9 to floor 12) does not fire at all.
    """

    def __init__(self, interval: int = 10, depth: float = 0.0) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._interval = interval
        self._last_floor = math.floor(depth)

    @property
    def last_floor(self) -> int:
        return self._last_floor

    def observe(self, depth: float) -> bool:
        """Record *depth*; True when its floor newly equals a milestone."""
        current = math.floor(depth)
        if current <= self._last_floor:
            return False
        self._last_floor = current
        return current > 0 and current % self._interval == 0
