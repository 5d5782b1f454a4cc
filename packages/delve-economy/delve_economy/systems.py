"""System factory for idle auto-mining."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from delve_economy.manager import EconomyManager

if TYPE_CHECKING:
    from delve import TickContext, World


def make_auto_mine_system(
    manager: EconomyManager,
    interval: float = 1.0,
    on_mined: Callable[[World, TickContext], None] | None = None,
) -> Callable[[World, TickContext], None]:
    """Return a system that calls ``manager.auto_tick()`` every *interval* time-units.

    The countdown only runs while the auto-mine rate is above zero and
    restarts from scratch when the rate drops back to zero.
    ``on_mined(world, ctx)`` fires after each accepted tick.
    """
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")
    elapsed = 0

    def auto_mine_system(world: World, ctx: TickContext) -> None:
        nonlocal elapsed
        if manager.state.auto_mine_rate <= 0:
            elapsed = 0
            return
        elapsed += 1
        if elapsed < max(1, round(interval * ctx.tps)):
            return
        elapsed = 0
        if manager.auto_tick() and on_mined is not None:
            on_mined(world, ctx)

    return auto_mine_system
