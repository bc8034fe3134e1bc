"""In-memory entity store.

Entities are plain integer identifiers. Each entity holds at most one
component per component type; components are pydantic models (or any
object) keyed by their type. Queries return a `View`, a lazy and restartable
sequence of entity ids matching a required/excluded component signature.
"""

import itertools
from collections.abc import Iterable, Iterator

from gesture_timeline.errors import MissingComponentError


class View:
    """Entities holding every `required` type and none of the `excluded` ones.

    Each iteration takes a fresh snapshot of the matching ids, so callers may
    attach or detach components while iterating, and the same view can be
    iterated again later to observe the store's new state.
    """

    def __init__(
        self, registry: "Registry", required: Iterable[type], excluded: Iterable[type] = ()
    ):
        self._registry = registry
        self.required = tuple(required)
        self.excluded = tuple(excluded)

    def __iter__(self) -> Iterator[int]:
        return iter(self._snapshot())

    def __len__(self) -> int:
        return len(self._snapshot())

    def _snapshot(self) -> list[int]:
        pools = self._registry._pools
        if self.required:
            candidates = min(
                (pools.get(component_type, {}) for component_type in self.required),
                key=len,
            )
        else:
            candidates = self._registry._entities
        return [
            entity
            for entity in list(candidates)
            if self._registry.has(entity, *self.required)
            and not any(
                entity in pools.get(component_type, {})
                for component_type in self.excluded
            )
        ]


class Registry:
    """Associative store from entity id to typed components.

    Attributes:
        _entities: Ids of live entities, in creation order.
        _pools: Component type to {entity: component}.
    """

    def __init__(self):
        self._ids = itertools.count()
        self._entities: dict[int, None] = {}
        self._pools: dict[type, dict[int, object]] = {}

    def create(self, *components) -> int:
        """Create a new entity, optionally attaching `components` to it.

        Returns:
            The new entity id.
        """
        entity = next(self._ids)
        self._entities[entity] = None
        for component in components:
            self.attach(entity, component)
        return entity

    def destroy(self, entity: int) -> None:
        """Remove an entity and every component it holds."""
        for pool in self._pools.values():
            pool.pop(entity, None)
        self._entities.pop(entity, None)

    def valid(self, entity: int) -> bool:
        return entity in self._entities

    def attach(self, entity: int, component):
        """Attach `component`, replacing any component of the same type.

        Returns:
            The attached component.

        Raises:
            MissingComponentError: If `entity` does not exist.
        """
        if entity not in self._entities:
            raise MissingComponentError(f"entity {entity} does not exist")
        self._pools.setdefault(type(component), {})[entity] = component
        return component

    def detach(self, entity: int, component_type: type) -> None:
        self._pools.get(component_type, {}).pop(entity, None)

    def get(self, entity: int, component_type: type):
        """Return the `component_type` component of `entity`.

        Raises:
            MissingComponentError: If the entity does not hold one.
        """
        try:
            return self._pools[component_type][entity]
        except KeyError:
            raise MissingComponentError(
                f"entity {entity} has no {component_type.__name__}"
            ) from None

    def try_get(self, entity: int, component_type: type):
        return self._pools.get(component_type, {}).get(entity)

    def has(self, entity: int, *component_types: type) -> bool:
        return all(
            entity in self._pools.get(component_type, {})
            for component_type in component_types
        )

    def reset(self, component_type: type) -> None:
        """Detach `component_type` from every entity."""
        self._pools.pop(component_type, None)

    def entities_with(
        self, required: Iterable[type], excluded: Iterable[type] = ()
    ) -> View:
        return View(self, required, excluded)

    def view(self, *required: type, exclude: Iterable[type] = ()) -> View:
        """Positional shorthand for `entities_with`."""
        return View(self, required, exclude)

    def entities(self) -> list[int]:
        return list(self._entities)
