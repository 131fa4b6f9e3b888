"""Scenes: collections of game objects stepped and drawn together."""

from __future__ import annotations

from typing import Callable, ClassVar, Iterable, Iterator, Optional, TypeVar

from errorreboot.gameobject import GameObject

S = TypeVar("S", bound="Scene")

_EXCLUSIVE = "Only one of the attributes 'objects' and 'object' is allowed"


class SceneDefinitionError(TypeError):
    """A scene class was declared with an invalid object layout."""


class Scene:
    """Base scene; the :func:`scene` decorator declares where its objects live."""

    _objects_field: ClassVar[Optional[str]] = None
    _object_fields: ClassVar[tuple[str, ...]] = ()

    def objects(self) -> Iterator[GameObject]:
        """Iterate over the scene's objects."""
        if self._objects_field is not None:
            return iter(getattr(self, self._objects_field))
        return (getattr(self, name) for name in self._object_fields)

    def update(self, delta_time: float) -> None:
        """Advance every object by ``delta_time`` seconds."""
        for obj in self.objects():
            obj.update(delta_time)

    def draw(self) -> None:
        """Draw every object."""
        for obj in self.objects():
            obj.draw()


def _check_name(name: object) -> str:
    if not isinstance(name, str) or not name.isidentifier():
        raise SceneDefinitionError(f"Unsupported attribute: {name!r}")
    return name


def scene(
    *, objects: Optional[str] = None, object_fields: Iterable[str] = ()
) -> Callable[[type[S]], type[S]]:
    """Declare a scene's objects: one collection attribute, or several single ones."""
    if isinstance(object_fields, str):
        object_fields = (object_fields,)
    fields = tuple(_check_name(name) for name in object_fields)
    if objects is not None:
        _check_name(objects)
        if fields:
            raise SceneDefinitionError(_EXCLUSIVE)

    def decorate(cls: type[S]) -> type[S]:
        if not (isinstance(cls, type) and issubclass(cls, Scene)):
            raise SceneDefinitionError("Only Scene subclasses are supported")
        cls._objects_field = objects
        cls._object_fields = fields
        return cls

    return decorate