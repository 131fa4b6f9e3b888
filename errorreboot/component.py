"""Behaviour that can be attached to a game object."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """A piece of behaviour that is stepped and drawn together with its owner."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the component by ``delta_time`` seconds."""

    @abstractmethod
    def draw(self) -> None:
        """Render the component."""