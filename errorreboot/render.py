"""Render surfaces that draw the game into a window."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional

import pygame

CLEAR_COLOR = (0, 0, 0, 0)

logger = logging.getLogger(__name__)

Size = tuple[int, int]


def _validate_size(size: Iterable[Any]) -> Size:
    width, height = (int(value) for value in size)
    if width < 0 or height < 0:
        raise ValueError(f"size must not be negative, got {width}x{height}")
    return width, height


def _set_mode(size: Size) -> pygame.Surface:
    return pygame.display.set_mode(size, pygame.RESIZABLE)


class Surface(ABC):
    """Something a window's contents are drawn onto."""

    @abstractmethod
    def resize(self, size: Size) -> None:
        """Reconfigure the surface for a window of ``size`` pixels."""

    @abstractmethod
    def draw(self) -> None:
        """Render one frame and present it."""


class PygameSurface(Surface):
    """A surface backed by a pygame window, cleared to transparent every frame."""

    def __init__(
        self,
        size: Iterable[Any],
        window: pygame.Surface,
        *,
        set_mode: Optional[Callable[[Size], pygame.Surface]] = None,
        present: Optional[Callable[[], None]] = None,
    ) -> None:
        self._size = _validate_size(size)
        self._window = window
        self._set_mode = set_mode or _set_mode
        self._present = present or pygame.display.flip
        logger.info("Surface configured: %dx%d", *self._size)

    @property
    def size(self) -> Size:
        """The configured size in pixels."""
        return self._size

    @property
    def window(self) -> pygame.Surface:
        """The pygame surface frames are drawn onto."""
        return self._window

    def resize(self, size: Iterable[Any]) -> None:
        """Reconfigure the window for ``size`` pixels."""
        self._size = _validate_size(size)
        self._window = self._set_mode(self._size)
        logger.info("Surface configured: %dx%d", *self._size)

    def draw(self) -> None:
        """Clear the window to transparent and present it."""
        self._window.fill(CLEAR_COLOR)
        self._present()