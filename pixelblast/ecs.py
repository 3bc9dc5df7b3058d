"""A minimal entity-component system."""

from __future__ import annotations

from itertools import count
from typing import Any, TypeVar

MAX_COMPONENTS = 32

_next_id = count()
_type_ids: dict[type, int] = {}

C = TypeVar("C", bound="Component")


def component_type_id(component_type: type) -> int:
    """Return the stable numeric id of a component type, assigning one on first use."""
    try:
        return _type_ids[component_type]
    except KeyError:
        type_id = _type_ids[component_type] = next(_next_id)
        return type_id


class Component:
    """Base class for behaviour attached to an entity."""

    entity: Entity | None = None

    def init(self) -> None:
        """Called once after the component is attached to its entity."""

    def update(self) -> None:
        """Called every frame."""

    def draw(self) -> None:
        """Called every frame after updates."""


class Entity:
    """A container of components that are updated and drawn in insertion order."""

    def __init__(self) -> None:
        self._active = True
        self._components: list[Component] = []
        self._by_type: dict[type, Component] = {}

    @property
    def active(self) -> bool:
        return self._active

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    def update(self) -> None:
        for component in self._components:
            component.update()

    def draw(self) -> None:
        for component in self._components:
            component.draw()

    def destroy(self) -> None:
        """Mark the entity for removal on the manager's next refresh."""
        self._active = False

    def has_component(self, component_type: type) -> bool:
        return component_type in self._by_type

    def add_component(self, component_type: type[C], *args: Any, **kwargs: Any) -> C:
        """Create a component of the given type, attach it and return it."""
        if component_type_id(component_type) >= MAX_COMPONENTS:
            raise ValueError(
                f"component type {component_type.__name__} exceeds the limit of "
                f"{MAX_COMPONENTS} component types"
            )
        component = component_type(*args, **kwargs)
        component.entity = self
        self._components.append(component)
        self._by_type[component_type] = component
        component.init()
        return component

    def get_component(self, component_type: type[C]) -> C:
        """Return the component of the given type; raise KeyError if absent."""
        try:
            return self._by_type[component_type]  # type: ignore[return-value]
        except KeyError:
            raise KeyError(f"entity has no {component_type.__name__}") from None


class Manager:
    """Owns the entities of a scene."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities)

    def update(self) -> None:
        for entity in self._entities:
            entity.update()

    def draw(self) -> None:
        for entity in self._entities:
            entity.draw()

    def refresh(self) -> None:
        """Drop every entity that has been destroyed."""
        self._entities = [entity for entity in self._entities if entity.active]

    def add_entity(self) -> Entity:
        entity = Entity()
        self._entities.append(entity)
        return entity