"""Shared types for the delve frame loop."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from delve.world import World

EntityId = int


@dataclass(frozen=True, slots=True)
class TickContext:
    """What a system sees of the current frame."""

    tick_number: int
    tps: int
    request_stop: Callable[[], None]
    random: _random.Random


class DeadEntityError(KeyError):
    """Raised when an entity id no longer refers to a live entity."""

    def __init__(self, entity_id: EntityId) -> None:
        self.entity_id = entity_id
        super().__init__(f"entity {entity_id} is not alive")


System = Callable[["World", TickContext], None]
