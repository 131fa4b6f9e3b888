"""Position, rotation and scale of objects in two and three dimensions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional


def _normalise(name: str, value: Any, size: Optional[int]) -> Any:
    if size is None:
        return float(value)
    result = tuple(float(v) for v in value)
    if len(result) != size:
        raise ValueError(f"{name} needs {size} components, got {len(result)}")
    return result


class _Validated:
    _sizes: ClassVar[dict[str, Optional[int]]] = {}

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._sizes:
            value = _normalise(name, value, self._sizes[name])
        super().__setattr__(name, value)


@dataclass
class Transform2d(_Validated):
    """Local transform in the plane; rotation is an angle."""

    _sizes: ClassVar[dict[str, Optional[int]]] = {
        "position": 2,
        "rotation": None,
        "scale": 2,
    }

    position: tuple[float, float] = (0.0, 0.0)
    rotation: float = 0.0
    scale: tuple[float, float] = (1.0, 1.0)


@dataclass
class Transform3d(_Validated):
    """Local transform in space; rotation is a quaternion (x, y, z, w)."""

    _sizes: ClassVar[dict[str, Optional[int]]] = {
        "position": 3,
        "rotation": 4,
        "scale": 3,
    }

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    scale: tuple[float, float, float] = (1.0, 1.0, 1.0)