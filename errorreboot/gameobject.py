"""Game objects: containers of components."""

from __future__ import annotations

from typing import Iterable, TypeVar

from errorreboot.component import Component

C = TypeVar("C", bound=Component)


class GameObject:
    """An entity in a scene, holding at most one component of each type."""

    def __init__(self, components: Iterable[Component] = ()) -> None:
        self._components: dict[type, Component] = {}
        for component in components:
            self.add_component(component)

    @property
    def components(self) -> tuple[Component, ...]:
        """The attached components, in the order they were first added."""
        return tuple(self._components.values())

    def update(self, delta_time: float) -> None:
        """Advance every component by ``delta_time`` seconds."""
        for component in self._components.values():
            component.update(delta_time)

    def draw(self) -> None:
        """Draw every component."""
        for component in self._components.values():
            component.draw()

    def add_component(self, component: Component) -> None:
        """Attach ``component``, replacing any component of exactly the same type."""
        if not isinstance(component, Component):
            raise TypeError(f"expected a Component, got {type(component).__name__}")
        self._components[type(component)] = component

    def get_component(self, component_type: type[C]) -> C | None:
        """Return the component of exactly ``component_type``, or None."""
        return self._components.get(component_type)  # type: ignore[return-value]