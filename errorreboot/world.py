"""The world: every loaded scene, stepped and drawn at a fixed rate."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Callable

from errorreboot.scene import Scene

FRAME_INTERVAL = 1.0 / 60.0

logger = logging.getLogger(__name__)


@dataclass
class _Slot:
    scene: Scene
    lock: threading.Lock = field(default_factory=threading.Lock)


class World:
    """Holds the loaded scenes and paces their updates and draws."""

    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self._slots: list[_Slot] = []
        self._slots_lock = threading.Lock()
        self._timing_lock = threading.Lock()
        now = clock()
        self._last = {"update": now, "draw": now}

    @property
    def scenes(self) -> tuple[Scene, ...]:
        """The loaded scenes, in load order."""
        with self._slots_lock:
            return tuple(slot.scene for slot in self._slots)

    def _tick(self, which: str) -> tuple[float, float]:
        now = self._clock()
        with self._timing_lock:
            last = self._last[which]
            self._last[which] = now
        return now - last, last + FRAME_INTERVAL

    def _snapshot(self) -> list[_Slot]:
        with self._slots_lock:
            return list(self._slots)

    def _sleep_until(self, until: float) -> None:
        remaining = until - self._clock()
        if remaining > 0:
            self._sleep(remaining)

    def update(self) -> float:
        """Update every scene once, then wait out the frame; return the delta time."""
        delta_time, until = self._tick("update")
        for slot in self._snapshot():
            with slot.lock:
                slot.scene.update(delta_time)
        logger.info("tick %s", delta_time)
        self._sleep_until(until)
        return delta_time

    def draw(self) -> float:
        """Draw every scene once, then wait out the frame; return the delta time."""
        delta_time, until = self._tick("draw")
        for slot in self._snapshot():
            with slot.lock:
                slot.scene.draw()
        self._sleep_until(until)
        return delta_time

    def load_scene(self, scene: Scene) -> None:
        """Add ``scene`` after the scenes already loaded."""
        with self._slots_lock:
            self._slots.append(_Slot(scene))

    def remove_scene(self, index: int) -> None:
        """Remove the scene at ``index``; raise IndexError if there is none."""
        with self._slots_lock:
            del self._slots[index]