"""Countdown and repeating timer components, and the systems that drive them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from delve.types import EntityId, System, TickContext
    from delve.world import World


@dataclass
class Timer:
    """Counts *remaining* frames down to zero, fires once, then detaches."""

    name: str
    remaining: int

    def tick(self) -> bool:
        self.remaining -= 1
        return self.remaining <= 0


@dataclass
class Periodic:
    """Fires every *interval* frames for as long as it stays attached."""

    name: str
    interval: int
    elapsed: int = 0

    def __post_init__(self) -> None:
        if self.interval <= 0:
            raise ValueError(f"interval must be positive, got {self.interval}")

    def tick(self) -> bool:
        self.elapsed += 1
        if self.elapsed < self.interval:
            return False
        self.elapsed = 0
        return True


def make_timer_system(
    on_fire: Callable[[World, TickContext, EntityId, Timer], None],
) -> System:
    def timer_system(world: World, ctx: TickContext) -> None:
        for eid, (timer,) in world.query(Timer):
            if timer.tick():
                world.detach(eid, Timer)
                on_fire(world, ctx, eid, timer)

    return timer_system


def make_periodic_system(
    on_fire: Callable[[World, TickContext, EntityId, Periodic], None],
) -> System:
    """Return a system that advances every Periodic and calls *on_fire* when due.

    A callback may despawn other entities; those are skipped for the rest
    of the pass.
    """

    def periodic_system(world: World, ctx: TickContext) -> None:
        for eid, (periodic,) in world.query(Periodic):
            if periodic.tick():
                on_fire(world, ctx, eid, periodic)

    return periodic_system
