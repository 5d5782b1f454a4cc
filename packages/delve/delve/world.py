"""World - live entities and the components they hold."""

from __future__ import annotations

from typing import Any, Iterator, TypeVar, cast

from delve.types import DeadEntityError, EntityId

T = TypeVar("T")


class World:
    """Entities kept in spawn order, each holding one component per type."""

    def __init__(self) -> None:
        self._entities: dict[EntityId, dict[type, Any]] = {}
        self._next_id: EntityId = 0

    def spawn(self, *components: Any) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        self._entities[eid] = {type(c): c for c in components}
        return eid

    def despawn(self, entity_id: EntityId) -> None:
        self._entities.pop(entity_id, None)

    def attach(self, entity_id: EntityId, component: Any) -> None:
        self._components(entity_id)[type(component)] = component

    def detach(self, entity_id: EntityId, component_type: type) -> None:
        held = self._entities.get(entity_id)
        if held is not None:
            held.pop(component_type, None)

    def get(self, entity_id: EntityId, component_type: type[T]) -> T:
        held = self._components(entity_id)
        if component_type not in held:
            raise KeyError(
                f"entity {entity_id} has no {component_type.__name__} component"
            )
        return cast(T, held[component_type])

    def has(self, entity_id: EntityId, component_type: type) -> bool:
        return component_type in self._entities.get(entity_id, {})

    def query(self, *ctypes: type) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Yield ``(eid, components)`` for entities holding every type in *ctypes*.

        Iterates a snapshot in spawn order, so systems may despawn while
        looping. Entities despawned mid-loop are not yielded.
        """
        if not ctypes:
            return
        for eid, held in list(self._entities.items()):
            if eid in self._entities and all(t in held for t in ctypes):
                yield eid, tuple(held[t] for t in ctypes)

    def _components(self, entity_id: EntityId) -> dict[type, Any]:
        try:
            return self._entities[entity_id]
        except KeyError:
            raise DeadEntityError(entity_id) from None
