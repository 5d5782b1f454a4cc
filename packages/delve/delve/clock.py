"""Frame counter and time-unit conversion."""

import math
import random
from typing import Callable

from delve.types import TickContext


class Clock:
    """Counts frames at a fixed *tps* (frames per time-unit)."""

    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError(f"tps must be positive, got {tps}")
        self._tps = tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def ticks(self, seconds: float) -> int:
        """Frames needed to cover *seconds* time-units, rounded up, at least one."""
        if seconds <= 0:
            raise ValueError(f"seconds must be positive, got {seconds}")
        # round() absorbs float error such as 0.1 * 30 == 3.0000000000000004
        return max(1, math.ceil(round(seconds * self._tps, 9)))

    def next_frame(self, stop_fn: Callable[[], None], rng: random.Random) -> TickContext:
        self._tick_number += 1
        return TickContext(self._tick_number, self._tps, stop_fn, rng)
