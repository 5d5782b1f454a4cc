"""Engine - one World and an ordered list of systems, stepped frame by frame."""

import random

from delve.clock import Clock
from delve.types import System
from delve.world import World


class Engine:
    def __init__(self, tps: int = 60, seed: int | None = None) -> None:
        self._clock = Clock(tps)
        self._world = World()
        self._systems: list[System] = []
        # Random(None) seeds itself from system entropy
        self._rng = random.Random(seed)
        self._stopping = False

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def _request_stop(self) -> None:
        self._stopping = True

    def step(self) -> bool:
        """Run every system once, in order.

        Returns False when a system asked to stop; the systems after it are
        skipped for this frame.
        """
        self._stopping = False
        ctx = self._clock.next_frame(self._request_stop, self._rng)
        for system in self._systems:
            system(self._world, ctx)
            if self._stopping:
                return False
        return True

    def run(self, frames: int) -> int:
        """Step up to *frames* times. Returns how many frames actually ran."""
        for ran in range(1, frames + 1):
            if not self.step():
                return ran
        return max(frames, 0)
