"""Concrete scenes."""

from __future__ import annotations

import copy
from typing import Iterable

from errorreboot.gameobject import GameObject
from errorreboot.scene import Scene, scene


@scene(objects="_objects")
class DynamicScene(Scene):
    """A scene whose objects are added at run time."""

    def __init__(self, objects: Iterable[GameObject] = ()) -> None:
        self._objects: list[GameObject] = list(objects)

    def __len__(self) -> int:
        return len(self._objects)

    def add_object(self, obj: GameObject) -> None:
        """Append ``obj`` to the scene."""
        self._objects.append(obj)

    def clone(self) -> DynamicScene:
        """Return a scene holding independent copies of every object."""
        return DynamicScene(copy.deepcopy(obj) for obj in self._objects)