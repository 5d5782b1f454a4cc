"""delve - Fixed-timestep simulation loop for the Deep Mine game."""

from delve.clock import Clock
from delve.engine import Engine
from delve.schedule import Periodic, Timer, make_periodic_system, make_timer_system
from delve.types import DeadEntityError, EntityId, System, TickContext
from delve.world import World

__all__ = [
    "Engine",
    "World",
    "Clock",
    "TickContext",
    "EntityId",
    "System",
    "DeadEntityError",
    "Timer",
    "Periodic",
    "make_timer_system",
    "make_periodic_system",
]
